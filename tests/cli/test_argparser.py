"""Unit tests for the argument parser module in bfsfind CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from bfsfind.cli.argparser import create_exclusion_action, create_parser, non_negative_int
from bfsfind.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock ExclusionRules object."""
    mock_rules = MagicMock(spec=GitIgnoreExclusionRules)
    mock_rules.load_rules = MagicMock()
    mock_rules.add_rule = MagicMock()
    return mock_rules


@pytest.fixture
def parser(mock_exclusion_rules):
    return create_parser(mock_exclusion_rules)


@pytest.mark.parametrize("value,expected", [("0", 0), ("3", 3), ("42", 42)])
def test_non_negative_int_valid(value, expected):
    assert non_negative_int(value) == expected


@pytest.mark.parametrize("value", ["-1", "abc", "1.5", ""])
def test_non_negative_int_invalid(value):
    with pytest.raises(argparse.ArgumentTypeError, match="Must be a non-negative integer"):
        non_negative_int(value)


def test_defaults(parser):
    args = parser.parse_args([r"\.txt$", "2"])
    assert args.pattern == r"\.txt$"
    assert args.max_depth == 2
    assert args.entry_type == "all"
    assert args.start_dir == "."
    assert args.output is None
    assert args.summary is None
    assert args.permission_action == "ignore"
    assert args.exclude is None
    assert args.ignore is None


def test_all_options(parser, mock_exclusion_rules):
    args = parser.parse_args(
        ["-t", "dir", "-d", "/srv", "-o", "out.txt", "-s", "stderr", "-P", "warn", "-i", "*.pyc", "^src$", "0"]
    )
    assert args.entry_type == "dir"
    assert args.start_dir == "/srv"
    assert args.output == Path("out.txt")
    assert args.summary == "stderr"
    assert args.permission_action == "warn"
    assert args.ignore == ["*.pyc"]
    assert args.max_depth == 0
    mock_exclusion_rules.add_rule.assert_called_once_with("*.pyc")


def test_long_options(parser):
    args = parser.parse_args(["--type", "file", "--dir", "src", "--permission-action", "fail", "x", "1"])
    assert args.entry_type == "file"
    assert args.start_dir == "src"
    assert args.permission_action == "fail"


@pytest.mark.parametrize(
    "argv",
    [
        ["pattern"],
        [],
        ["pattern", "abc"],
        ["pattern", "-1"],
        ["-t", "symlink", "pattern", "1"],
        ["-P", "loud", "pattern", "1"],
        ["-s", "file", "pattern", "1"],
    ],
)
def test_invalid_arguments_exit_with_status_2(parser, argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(argv)
    assert excinfo.value.code == 2
    assert "error" in capsys.readouterr().err


def test_invalid_max_depth_message(parser, capsys):
    with pytest.raises(SystemExit):
        parser.parse_args(["pattern", "deep"])
    assert "invalid max depth value: 'deep'" in capsys.readouterr().err


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("bfsfind ")


def test_create_exclusion_action():
    """Test creation of ExclusionRulesAction class."""
    ExclusionAction = create_exclusion_action(MagicMock())
    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude", help="test help")
    assert action.option_strings == ["-e", "--exclude"]
    assert action.dest == "exclude"


def test_exclusions_applied_in_command_line_order(tmp_path):
    ignore_file = tmp_path / ".gitignore"
    ignore_file.write_text("*.log\n")

    calls = []
    mock_rules = MagicMock(spec=GitIgnoreExclusionRules)
    mock_rules.load_rules.side_effect = lambda path: calls.append(("file", path))
    mock_rules.add_rule.side_effect = lambda rule: calls.append(("rule", rule))

    parser = create_parser(mock_rules)
    args = parser.parse_args(["-i", "*.tmp", "-e", str(ignore_file), "-i", "!keep.log", "x", "1"])

    assert calls == [("rule", "*.tmp"), ("file", ignore_file), ("rule", "!keep.log")]
    assert args.exclude == [ignore_file]
    assert args.ignore == ["*.tmp", "!keep.log"]


def test_exclusions_reach_real_rules(tmp_path):
    ignore_file = tmp_path / ".gitignore"
    ignore_file.write_text("*.log\n")

    rules = GitIgnoreExclusionRules()
    parser = create_parser(rules)
    parser.parse_args(["-e", str(ignore_file), "-i", "!keep.log", "x", "1"])

    assert rules.exclude("debug.log")
    assert not rules.exclude("keep.log")


def test_missing_exclusion_file_is_usage_error(tmp_path, capsys):
    parser = create_parser(GitIgnoreExclusionRules())
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-e", str(tmp_path / "missing"), "x", "1"])
    assert excinfo.value.code == 2
    assert "Rules file not found" in capsys.readouterr().err
