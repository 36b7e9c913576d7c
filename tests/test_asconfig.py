"""Tests for reading asconfig.json."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from asconfig_tasks.asconfig import AsconfigError, load_asconfig, parse_asconfig_text
from asconfig_tasks.models import AsconfigDocument


RELAXED = """
// AIR desktop project
{
    config: "air",
    compilerOptions: {
        "source-path": ["src"], // trailing comma below
    },
    application: "src/Main-app.xml",
    windows: { target: "bundle" },
}
"""


class TestParseAsconfigText:
    def test_accepts_comments_and_trailing_commas(self) -> None:
        doc = parse_asconfig_text(RELAXED)
        assert doc.config == "air"
        assert doc.has_application
        assert doc.windows_bundle

    def test_plain_json(self) -> None:
        doc = parse_asconfig_text('{"config": "airmobile"}')
        assert doc.is_air_mobile

    def test_invalid_text_raises(self) -> None:
        with pytest.raises(AsconfigError):
            parse_asconfig_text("{ config: ")

    def test_non_object_raises(self) -> None:
        with pytest.raises(AsconfigError, match="expected object"):
            parse_asconfig_text("[1, 2, 3]")

    def test_deep_nesting_raises(self) -> None:
        with pytest.raises(AsconfigError, match="nested too deeply"):
            parse_asconfig_text("[" * 50000 + "]" * 50000)


class TestLoadAsconfig:
    def test_no_workspace(self) -> None:
        assert load_asconfig(None) is None

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_asconfig(tmp_path) is None

    def test_loads_relaxed_json(self, tmp_path: Path) -> None:
        (tmp_path / "asconfig.json").write_text(RELAXED, encoding="utf-8")
        doc = load_asconfig(tmp_path)
        assert isinstance(doc, AsconfigDocument)
        assert doc.config == "air"

    def test_parse_error_reads_as_missing(self, tmp_path: Path) -> None:
        (tmp_path / "asconfig.json").write_text("{ this is not json", encoding="utf-8")
        assert load_asconfig(tmp_path) is None

    def test_non_object_reads_as_missing(self, tmp_path: Path) -> None:
        (tmp_path / "asconfig.json").write_text('"airmobile"', encoding="utf-8")
        assert load_asconfig(tmp_path) is None

    def test_binary_garbage_reads_as_missing(self, tmp_path: Path) -> None:
        (tmp_path / "asconfig.json").write_bytes(b"\xff\xfe\x00{")
        assert load_asconfig(tmp_path) is None

    def test_directory_named_asconfig_reads_as_missing(self, tmp_path: Path) -> None:
        (tmp_path / "asconfig.json").mkdir()
        assert load_asconfig(tmp_path) is None

    def test_deep_nesting_reads_as_missing(self, tmp_path: Path) -> None:
        (tmp_path / "asconfig.json").write_text("{a: " * 50000 + "1" + "}" * 50000, encoding="utf-8")
        assert load_asconfig(tmp_path) is None
