"""
Tests for the command line interface.
"""

import json
from unittest.mock import Mock, patch

import pytest

import cli
from cardparser import ContactInfo, DocumentLoadError

CONTACT = ContactInfo("Mike Smith", "4105551234", "msmith@asymmetrik.com")


class TestCLI:
    """Test cases for the CLI."""

    @pytest.fixture
    def card_file(self, tmp_path):
        path = tmp_path / "card.txt"
        path.write_text("Mike Smith\n410-555-1234\nmsmith@asymmetrik.com\n", encoding="utf-8")
        return path

    @pytest.fixture
    def card_parser(self):
        parser = Mock()
        parser.get_contact_info.return_value = CONTACT
        return parser

    def test_parse_args(self):
        """Test command line argument parsing."""
        args = cli.parse_args(["card.txt", "-o", "out.txt", "--parser", "default", "--format", "json"])

        assert args.input == "card.txt"
        assert args.output == "out.txt"
        assert args.parser == "default"
        assert args.format == "json"

    def test_parse_args_requires_input(self):
        """Test the input path is required."""
        with pytest.raises(SystemExit) as exc:
            cli.parse_args([])

        assert exc.value.code == 2

    def test_load_document(self, card_file):
        """Test loading a document from disk."""
        assert cli.load_document(str(card_file)).startswith("Mike Smith\n")

    def test_load_missing_document(self, tmp_path):
        """Test loading a missing document."""
        with pytest.raises(DocumentLoadError) as exc:
            cli.load_document(str(tmp_path / "missing.txt"))

        assert "missing.txt" in str(exc.value)

    def test_run_prints_results(self, card_file, card_parser, capsys):
        """Test results are printed in the text format."""
        args = cli.parse_args([str(card_file)])

        code = cli.run(args, parser=card_parser)

        assert code == 0
        card_parser.get_contact_info.assert_called_once_with(
            "Mike Smith\n410-555-1234\nmsmith@asymmetrik.com\n"
        )
        assert capsys.readouterr().out == str(CONTACT) + "\n"

    def test_run_json_format(self, card_file, card_parser, capsys):
        """Test results are printed as JSON."""
        args = cli.parse_args([str(card_file), "--format", "json"])

        cli.run(args, parser=card_parser)

        assert json.loads(capsys.readouterr().out) == CONTACT.to_dict()

    def test_run_writes_output_file(self, card_file, card_parser, tmp_path):
        """Test results are written to the output file."""
        output = tmp_path / "results.txt"
        args = cli.parse_args([str(card_file), "-o", str(output)])

        cli.run(args, parser=card_parser)

        assert ContactInfo.from_text(output.read_text(encoding="utf-8")) == CONTACT

    def test_run_write_failure_keeps_result(self, card_file, card_parser, tmp_path, capsys):
        """Test a failed write still prints the results."""
        args = cli.parse_args([str(card_file), "-o", str(tmp_path)])

        code = cli.run(args, parser=card_parser)

        assert code == 0
        assert "Name: Mike Smith" in capsys.readouterr().out

    def test_run_missing_input(self, tmp_path, card_parser):
        """Test a missing input file exits with an error."""
        args = cli.parse_args([str(tmp_path / "missing.txt")])

        code = cli.run(args, parser=card_parser)

        assert code == 1
        card_parser.get_contact_info.assert_not_called()

    def test_main_creates_configured_parser(self, card_file, card_parser):
        """Test main builds the parser named on the command line."""
        with patch("cli.create_parser", return_value=card_parser) as create:
            code = cli.main([str(card_file), "--parser", "custom"])

        assert code == 0
        create.assert_called_once()
        assert create.call_args.args == ("custom",)
