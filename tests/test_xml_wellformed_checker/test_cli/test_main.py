"""Tests for the CLI main module."""

import json
from pathlib import Path

import pytest

from xml_wellformed_checker.cli.main import (
    EXIT_NOT_WELL_FORMED,
    EXIT_OK,
    EXIT_READ_FAILURE,
    FileOutcome,
    create_argument_parser,
    exit_code_for,
    format_text,
    main,
)
from xml_wellformed_checker.shared import CheckResult


@pytest.fixture
def good_file(tmp_path) -> Path:
    path = tmp_path / "good.xml"
    path.write_text('<?xml version="1.0"?>\n<root>\n  <item id="1"/>\n</root>\n')
    return path


@pytest.fixture
def bad_file(tmp_path) -> Path:
    path = tmp_path / "bad.xml"
    path.write_text("<a>\n</b>\n<c>\n")
    return path


class TestArgumentParser:
    """Test command-line argument parsing."""

    def test_create_parser(self) -> None:
        """Test parser creation."""
        parser = create_argument_parser()
        assert parser.prog == "xml-wellformed"

    def test_defaults(self) -> None:
        """Test unset options stay None so the config file can supply them."""
        args = create_argument_parser().parse_args(["doc.xml"])
        assert args.paths == [Path("doc.xml")]
        assert args.format is None
        assert args.encoding is None
        assert args.summary is False

    def test_paths_required(self) -> None:
        """Test running without files is a usage error."""
        with pytest.raises(SystemExit) as exc:
            create_argument_parser().parse_args([])
        assert exc.value.code == 2


class TestMain:
    """Test end-to-end CLI runs."""

    def test_well_formed_file_prints_nothing(self, good_file, capsys) -> None:
        """Test silence and exit 0 for a good document."""
        assert main([str(good_file)]) == EXIT_OK
        assert capsys.readouterr().out == ""

    def test_diagnostics_printed(self, bad_file, capsys) -> None:
        """Test [Line n] output in emission order."""
        assert main([str(bad_file)]) == EXIT_NOT_WELL_FORMED
        assert capsys.readouterr().out.splitlines() == [
            "[Line 2] Tag <a>is closed by </b>",
            "[Line 3] Multiple root elements detected: <a> and <c>.",
            "[Line 3] Tag <c> was never closed.",
        ]

    def test_unreadable_file(self, tmp_path, capsys) -> None:
        """Test read failure message and exit code."""
        missing = tmp_path / "missing.xml"
        assert main([str(missing)]) == EXIT_READ_FAILURE
        assert f"Error: Couldn't read file: {missing}" in capsys.readouterr().err

    def test_multiple_files_have_headers(self, good_file, bad_file, capsys) -> None:
        """Test that only files with diagnostics get a header."""
        assert main([str(good_file), str(bad_file)]) == EXIT_NOT_WELL_FORMED
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == f"{bad_file}:"
        assert f"{good_file}:" not in lines

    def test_summary(self, good_file, capsys) -> None:
        """Test the per-file summary line."""
        main([str(good_file), "--summary"])
        assert capsys.readouterr().out.strip() == (
            f"{good_file}: 4 lines, root <root>, 1 root element(s), 0 error(s)"
        )

    def test_json_output(self, bad_file, tmp_path, capsys) -> None:
        """Test JSON output for checked and unreadable files."""
        missing = tmp_path / "missing.xml"
        code = main([str(bad_file), str(missing), "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert code == EXIT_READ_FAILURE
        assert data[0]["file"] == str(bad_file)
        assert data[0]["well_formed"] is False
        assert [d["kind"] for d in data[0]["diagnostics"]] == [
            "MISMATCHED_TAG_NAMES",
            "MULTIPLE_ROOT_ELEMENTS",
            "UNCLOSED_TAG_AT_EOF",
        ]
        assert data[1]["file"] == str(missing)
        assert "error" in data[1]

    def test_config_file(self, bad_file, tmp_path, capsys) -> None:
        """Test options loaded from a config file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"output_format": "json"}))

        main([str(bad_file), "--config", str(config_path)])

        assert json.loads(capsys.readouterr().out)[0]["root_name"] == "a"

    def test_invalid_config_file(self, good_file, tmp_path, capsys) -> None:
        """Test a bad config file is reported without checking."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"output_format": "yaml"}))

        assert main([str(good_file), "--config", str(config_path)]) == EXIT_READ_FAILURE
        assert "Invalid configuration" in capsys.readouterr().err


class TestHelpers:
    """Test formatting and exit code helpers."""

    def test_exit_code_for(self) -> None:
        """Test exit code precedence."""
        ok = FileOutcome(Path("a.xml"), result=CheckResult())
        failed = FileOutcome(Path("b.xml"), error="File not found")

        assert exit_code_for([ok]) == EXIT_OK
        assert exit_code_for([ok, failed]) == EXIT_READ_FAILURE
        assert exit_code_for([]) == EXIT_OK

    def test_format_text_skips_unreadable(self) -> None:
        """Test unreadable files produce no stdout text."""
        failed = FileOutcome(Path("b.xml"), error="File not found")
        assert format_text([failed], show_summary=True) == ""

    def test_file_outcome_to_dict(self) -> None:
        """Test outcome serialization for checked and unreadable files."""
        checked = FileOutcome(Path("a.xml"), result=CheckResult(source="a.xml"))
        failed = FileOutcome(Path("b.xml"), error="File not found")

        assert checked.to_dict()["file"] == "a.xml"
        assert failed.to_dict() == {"file": "b.xml", "error": "File not found"}
        assert failed == FileOutcome(Path("b.xml"), error="File not found")
