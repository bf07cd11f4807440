from __future__ import annotations

import logging
from pathlib import Path

import pytest

from wp_scaffold.plan import ReplacementPair
from wp_scaffold.substitute import apply_plan, apply_replacements

PLAN = (
    ReplacementPair("TENUP_PLUGIN", "ACME_PLUGIN"),
    ReplacementPair("TenUpPlugin", "AcmePlugin"),
)


def test_apply_replacements_replaces_every_occurrence():
    text = "TenUpPlugin\\Core and TenUpPlugin\\Admin use TENUP_PLUGIN_VERSION"

    assert apply_replacements(text, PLAN) == "AcmePlugin\\Core and AcmePlugin\\Admin use ACME_PLUGIN_VERSION"


def test_apply_replacements_follows_plan_order():
    plan = (ReplacementPair("tenup-plugin", "acme"), ReplacementPair("acme", "wrong"))

    assert apply_replacements("tenup-plugin", plan) == "wrong"
    assert apply_replacements("tenup-plugin", plan[:1]) == "acme"


def test_apply_replacements_treats_search_literally():
    plan = (ReplacementPair("a.b*", "x"),)

    assert apply_replacements("a.b* aXb", plan) == "x aXb"


def test_apply_plan_only_writes_changed_files(tmp_path: Path):
    touched = tmp_path / "touched.php"
    touched.write_text("namespace TenUpPlugin;\n", encoding="utf-8")
    untouched = tmp_path / "untouched.php"
    untouched.write_text("namespace Other;\n", encoding="utf-8")
    before = untouched.stat().st_mtime_ns

    report = apply_plan([touched, untouched], PLAN)

    assert report.changed == [touched]
    assert report.count == 1
    assert touched.read_text(encoding="utf-8") == "namespace AcmePlugin;\n"
    assert untouched.stat().st_mtime_ns == before


def test_apply_plan_preserves_line_endings(tmp_path: Path):
    path = tmp_path / "windows.php"
    path.write_bytes(b"<?php\r\nnamespace TenUpPlugin;\r\n")

    apply_plan([path], PLAN)

    assert path.read_bytes() == b"<?php\r\nnamespace AcmePlugin;\r\n"


def test_apply_plan_skips_undecodable_files(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    binary = tmp_path / "blob.dat"
    payload = b"\xff\xfeTenUpPlugin\x00"
    binary.write_bytes(payload)

    with caplog.at_level(logging.DEBUG, logger="wp_scaffold.substitute"):
        report = apply_plan([binary], PLAN)

    assert report.changed == []
    assert report.skipped == [binary]
    assert binary.read_bytes() == payload
    assert "blob.dat" in caplog.text


def test_apply_plan_honours_skip_list(tmp_path: Path):
    kept = tmp_path / "scaffold.mjs"
    kept.write_text("TenUpPlugin", encoding="utf-8")
    other = tmp_path / "main.php"
    other.write_text("TenUpPlugin", encoding="utf-8")

    report = apply_plan([kept, other], PLAN, skip=[tmp_path / "." / "scaffold.mjs"])

    assert report.changed == [other]
    assert kept.read_text(encoding="utf-8") == "TenUpPlugin"
