from minisyn.session import Session
from minisyn.tokens import TokenType, tokenize


def test_valid_line_gives_tokens_and_history():
    session = Session()
    line = "cat < in | wc"
    tokens = session.accept(line)
    assert tokens == tokenize(line)
    assert session.history == [line]
    assert [t.type for t in tokens if t.type is TokenType.PIPE] == [TokenType.PIPE]


def test_blank_line_not_in_history():
    session = Session()
    assert session.accept("   ") == []
    assert session.history == []


def test_empty_line_sets_exit_code_zero():
    session = Session()
    session.accept("ls |")
    assert session.exit_code == 2
    session.accept("")
    assert session.exit_code == 0


def test_syntax_error_reported(capsys):
    session = Session()
    assert session.accept("ls |") == []
    err = capsys.readouterr().err
    assert err == "syntax error near unexpected token `newline'\n"
    assert session.exit_code == 2
    assert session.history == ["ls |"]


def test_unbalanced_quotes(capsys):
    session = Session()
    assert session.accept("echo 'abc") == []
    assert capsys.readouterr().err == "Unequal amount of quotes\n"
    assert session.history == []
    assert session.unequal_quotes is False
    assert session.blank is False


def test_loop_count_increases():
    session = Session()
    for line in ["ls", "", "echo hi"]:
        session.accept(line)
    assert session.loop_count == 3
    assert session.history == ["ls", "echo hi"]


def test_reset_clears_flags(capsys):
    session = Session()
    session.blank = True
    session.unequal_quotes = True
    session.reset()
    assert session.blank is False
    assert session.unequal_quotes is False
    assert capsys.readouterr().err == "Unequal amount of quotes\n"


def test_reset_silent_without_quote_problem(capsys):
    session = Session()
    session.reset()
    assert capsys.readouterr().err == ""


def test_state_does_not_leak_between_lines():
    session = Session()
    session.accept("echo \"open")
    tokens = session.accept("echo done")
    assert tokens == tokenize("echo done")
    assert session.history == ["echo done"]