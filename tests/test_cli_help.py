import pytest

from redistool.cli_help import print_usage, usage_text
from redistool.version import redis_cli_version


def test_usage_starts_with_version_then_blank_line():
    lines = usage_text().splitlines()
    assert lines[0] == redis_cli_version()
    assert lines[1] == ""
    assert lines[2].startswith("Usage: redis-cli [OPTIONS]")


def test_usage_fills_placeholders():
    text = usage_text()
    assert "{" not in text and "}" not in text
    assert text.count("REDISCLI_AUTH") == 2
    assert "Default timeout: 30. Use 0 to wait forever." in text


def test_usage_keeps_escaped_sequences_literal():
    text = usage_text()
    assert "(default: \\n)." in text
    assert "'\"null-\\x00-separated\"'" in text


def test_usage_omits_tls_options():
    assert "--tls" not in usage_text()


def test_usage_ends_with_interactive_note():
    assert usage_text().endswith("and settings.\n")


def test_print_usage_success_goes_to_stdout(capsys):
    with pytest.raises(SystemExit) as excinfo:
        print_usage(0)
    assert excinfo.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == usage_text() + "\n"
    assert captured.err == ""


def test_print_usage_failure_goes_to_stderr(capsys):
    with pytest.raises(SystemExit) as excinfo:
        print_usage(1)
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.err == usage_text()
    assert captured.out == ""