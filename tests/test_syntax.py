import pytest

from minisyn.syntax import (
    ShellSyntaxError,
    check_redirections,
    is_blank,
    validate_input,
)


def _token_for(line):
    with pytest.raises(ShellSyntaxError) as info:
        check_redirections(line)
    return info.value.token


@pytest.mark.parametrize("line", ["", "   ", "\t \t", "  \nls", "\n"])
def test_blank_lines(line):
    assert is_blank(line) is True


@pytest.mark.parametrize("line", ["ls", "  x", "\techo hi"])
def test_non_blank_lines(line):
    assert is_blank(line) is False


def test_validate_blank_is_false():
    assert validate_input("    ") is False


@pytest.mark.parametrize(
    "line",
    [
        "ls -l",
        "cat < in | wc > out",
        "echo hi >> log",
        "cat << EOF",
        "> out",
        "< in cat",
        "echo '|' \"> <\"",
    ],
)
def test_valid_lines(line):
    assert validate_input(line) is True


def test_trailing_pipe_reports_newline():
    assert _token_for("ls |") == "newline"


def test_leading_pipe():
    assert _token_for("| ls") == "|"


def test_trailing_redirection_reports_newline():
    assert _token_for("cat <") == "newline"
    assert _token_for("echo hi >>") == "newline"


def test_redirection_followed_by_pipe():
    assert _token_for("cat < | wc") == "|"


def test_input_followed_by_output():
    assert _token_for("cat < > f") == ">"


def test_double_operator_reported_twice():
    assert _token_for("ls >> >> f") == ">>"


def test_leading_input_then_append():
    assert _token_for("<>>") == ">>"


def test_triple_greater():
    assert _token_for(">>>") == ">"


def test_triple_less():
    assert _token_for("a <<< b") == "<"


def test_double_pipe():
    assert _token_for("a || b") == "|"


def test_checking_stops_at_newline():
    assert validate_input("ls\n|") is True


def test_text_after_nul_is_ignored():
    assert validate_input("ls\0|") is True


def test_error_message_and_status():
    with pytest.raises(ShellSyntaxError) as info:
        validate_input("ls |")
    assert str(info.value) == "syntax error near unexpected token `newline'"
    assert info.value.exit_status == 2
    assert isinstance(info.value, ValueError)


def test_error_message_names_token():
    err = ShellSyntaxError(">>")
    assert str(err) == "syntax error near unexpected token `>>'"
    assert err.token == ">>"