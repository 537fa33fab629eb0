"""Tests for the CLI interface."""

import pytest
import tempfile
import os

from soundkey.ui.cli import main, create_parser, NO_MATCH


SAMPLE_NAMES = """Smith
Smyth
Schmidt
Jones
"""


@pytest.fixture
def sample_name_file():
    """Create a temporary name list for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.txt', delete=False) as f:
        f.write(SAMPLE_NAMES)
        temp_path = f.name

    yield temp_path

    if os.path.exists(temp_path):
        os.unlink(temp_path)


def test_create_parser():
    """Test that the argument parser is created correctly."""
    parser = create_parser()

    assert parser is not None
    assert parser.prog == 'soundkey'


def test_cli_no_arguments():
    """Test CLI with no arguments shows help."""
    exit_code = main([])
    assert exit_code == 0


def test_cli_encode_command(capsys):
    """Test the encode command."""
    exit_code = main(['encode', 'Smith', 'Schmidt'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'SM0' in captured.out
    assert 'XMT' in captured.out
    assert 'SMT' in captured.out


def test_cli_encode_explain(capsys):
    """Test that --explain lists the fired rules."""
    exit_code = main(['encode', '--explain', 'Thomas'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'TMS' in captured.out
    assert 'th' in captured.out


def test_cli_encode_max_length(capsys):
    """Test key truncation from the command line."""
    exit_code = main(['--max-length', '2', 'encode', 'Wasserman'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'AS' in captured.out
    assert 'ASRMN' not in captured.out


def test_cli_invalid_max_length(capsys):
    """Test that an invalid setting is reported as an error."""
    exit_code = main(['--max-length', '0', 'encode', 'Smith'])

    assert exit_code == 1

    captured = capsys.readouterr()
    assert 'Error' in captured.err


def test_cli_compare_match(capsys):
    """Test comparing names that sound alike."""
    exit_code = main(['compare', 'Smith', 'Schmidt'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'Match: normal' in captured.out


def test_cli_compare_no_match(capsys):
    """Test comparing names that do not sound alike."""
    exit_code = main(['compare', 'Smith', 'Jones'])

    assert exit_code == NO_MATCH

    captured = capsys.readouterr()
    assert 'No phonetic match' in captured.out


def test_cli_compare_primary_only():
    """Test that --primary-only ignores alternate keys."""
    assert main(['--primary-only', 'compare', 'Smith', 'Schmidt']) == NO_MATCH


def test_cli_group_command(sample_name_file, capsys):
    """Test the group command."""
    exit_code = main(['group', sample_name_file])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'Loaded 4 names' in captured.out
    assert 'SM0: Smith, Smyth' in captured.out


def test_cli_group_missing_file(capsys):
    """Test the group command with a missing file."""
    exit_code = main(['group', '/nonexistent/names.txt'])

    assert exit_code == 1

    captured = capsys.readouterr()
    assert 'File not found' in captured.err


def test_cli_encode_keeps_titles(capsys):
    """Test that encode prints keys for words that double as titles."""
    exit_code = main(['encode', 'Don', 'Lord'])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert 'TN' in captured.out
    assert 'LRT' in captured.out


def test_cli_encode_marks_ambiguous(capsys):
    """Test that words with an alternate reading are flagged."""
    main(['encode', 'Smith', 'Thomas'])

    lines = capsys.readouterr().out.splitlines()
    assert '(ambiguous)' in lines[0]
    assert '(ambiguous)' not in lines[1]
