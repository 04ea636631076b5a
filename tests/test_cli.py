"""Tests for the CLI module."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from md2inao.cli import EXIT_ERROR, EXIT_OK, EXIT_TOO_WIDE, main

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MD = FIXTURE_DIR / "sample.md"

WIDE_LISTING = "```\n" + "x" * 60 + "\n```\n"


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logging.getLogger("md2inao").handlers.clear()


class TestCLIMain:
    """Test the main() entry point."""

    def test_list_presets(self, capsys):
        ret = main(["--list-presets"])
        assert ret == EXIT_OK
        out = capsys.readouterr().out
        assert "webdb" in out
        assert "book" in out

    def test_missing_input(self):
        with pytest.raises(SystemExit):
            main([])

    def test_unknown_preset(self):
        with pytest.raises(SystemExit):
            main(["input.md", "--preset", "nonexistent"])

    def test_file_not_found(self, capsys):
        ret = main(["nonexistent.md"])
        assert ret == EXIT_ERROR
        err = capsys.readouterr().err
        assert "not found" in err

    def test_writes_stdout(self, tmp_path, capsys):
        md_file = tmp_path / "myfile.md"
        md_file.write_text("# Test\n\n本文", encoding="utf-8")
        ret = main([str(md_file)])
        assert ret == EXIT_OK
        assert capsys.readouterr().out == "■Test\n本文\n"

    def test_output_file(self, tmp_path, capsys):
        md_file = tmp_path / "myfile.md"
        md_file.write_text("# Test", encoding="utf-8")
        out = tmp_path / "out" / "myfile.txt"
        ret = main([str(md_file), "-o", str(out)])
        assert ret == EXIT_OK
        assert out.read_text(encoding="utf-8") == "■Test\n"
        assert capsys.readouterr().out == ""

    def test_convert_sample(self, tmp_path):
        if not SAMPLE_MD.exists():
            pytest.skip("sample.md fixture not found")
        out = tmp_path / "output.txt"
        ret = main([str(SAMPLE_MD), "-o", str(out)])
        assert ret == EXIT_OK
        assert out.stat().st_size > 0

    def test_verbose_flag(self, tmp_path, capsys):
        md_file = tmp_path / "myfile.md"
        md_file.write_text("# Test", encoding="utf-8")
        out = tmp_path / "myfile.txt"
        ret = main([str(md_file), "-o", str(out), "-v"])
        assert ret == EXIT_OK
        err = capsys.readouterr().err
        assert "Input:" in err
        assert "Done." in err

    def test_default_list_option(self, tmp_path, capsys):
        md_file = tmp_path / "list.md"
        md_file.write_text("1. first\n2. second", encoding="utf-8")
        ret = main([str(md_file), "--default-list", "alpha"])
        assert ret == EXIT_OK
        assert capsys.readouterr().out == "（a）first\n（b）second\n"


class TestLineLength:
    """Too-wide listings are reported on stderr."""

    @pytest.fixture
    def wide_md(self, tmp_path):
        md_file = tmp_path / "wide.md"
        md_file.write_text(WIDE_LISTING, encoding="utf-8")
        return md_file

    def test_warning_reported(self, wide_md, capsys):
        ret = main([str(wide_md)])
        assert ret == EXIT_OK
        captured = capsys.readouterr()
        assert "x" * 60 in captured.out
        assert captured.err.count("55 columns") == 1

    def test_strict_exit_code(self, wide_md, capsys):
        assert main([str(wide_md), "--strict"]) == EXIT_TOO_WIDE

    def test_override_ceiling(self, wide_md, capsys):
        ret = main([str(wide_md), "--strict", "--max-inline-list-length", "80"])
        assert ret == EXIT_OK
        assert "columns" not in capsys.readouterr().err

    def test_invalid_ceiling(self, wide_md, capsys):
        ret = main([str(wide_md), "--max-list-length", "0"])
        assert ret == EXIT_ERROR
        assert "positive" in capsys.readouterr().err
