import pytest

from hulk.scanner import DFAScanner, main, scan
from hulk.tokens import TokenType


def kinds(source):
    return [token.type for token in scan(source)]


def lexemes(source):
    return [token.lexeme for token in scan(source)]


@pytest.mark.parametrize(
    "word, kind",
    [
        ("if", TokenType.IF),
        ("else", TokenType.ELSE),
        ("while", TokenType.WHILE),
        ("for", TokenType.FOR),
        ("print", TokenType.PRINT),
        ("let", TokenType.LET),
        ("in", TokenType.IN),
        ("elif", TokenType.ELIF),
        ("function", TokenType.FUNCTION),
        ("True", TokenType.TRUE),
        ("False", TokenType.FALSE),
        ("type", TokenType.TYPE),
        ("protocol", TokenType.PROTOCOL),
        ("inherits", TokenType.INHERITS),
        ("invoke", TokenType.INVOKE),
        ("sin", TokenType.SIN),
        ("cos", TokenType.COS),
        ("sqrt", TokenType.SQRT),
        ("exp", TokenType.EXP),
        ("log", TokenType.LOG),
        ("rand", TokenType.RAND),
        ("range", TokenType.RANGE),
        ("extends", TokenType.EXTENDS),
        ("other", TokenType.OTHER),
        ("new", TokenType.NEW),
        ("base", TokenType.BASE),
        ("is", TokenType.IS),
        ("as", TokenType.AS),
    ],
)
def test_keywords(word, kind):
    assert kinds(word) == [kind, TokenType.TOKEN_EOF]


@pytest.mark.parametrize("word", ["foo_bar1", "_x", "PI", "true", "letter", "E"])
def test_identifiers(word):
    tokens = scan(word)
    assert [t.type for t in tokens] == [TokenType.IDENTIFIER, TokenType.TOKEN_EOF]
    assert tokens[0].lexeme == word


@pytest.mark.parametrize("text", ["42", "3.14", "0", "007.5"])
def test_numbers(text):
    tokens = scan(text)
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.TOKEN_EOF]
    assert tokens[0].lexeme == text


def test_number_with_trailing_dot_is_dropped():
    assert kinds("12.") == [TokenType.TOKEN_EOF]


def test_number_stops_at_second_dot():
    assert kinds("12.5.3") == [TokenType.NUMBER, TokenType.DOT, TokenType.NUMBER, TokenType.TOKEN_EOF]
    assert lexemes("12.5.3") == ["12.5", ".", "3", ""]


def test_number_followed_by_identifier():
    assert kinds("123abc") == [TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.TOKEN_EOF]
    assert lexemes("123abc") == ["123", "abc", ""]


@pytest.mark.parametrize(
    "text, kind",
    [
        ("==", TokenType.EQ),
        ("!=", TokenType.NEQ),
        ("<=", TokenType.LTE),
        (">=", TokenType.GTE),
        (":=", TokenType.DESTRUCTIVE_ASSIGN),
        ("=>", TokenType.ARROW),
        ("->", TokenType.SIMPLE_ARROW),
        ("::", TokenType.DOUBLE_COLON),
    ],
)
def test_two_character_operators(text, kind):
    tokens = scan(text)
    assert [t.type for t in tokens] == [kind, TokenType.TOKEN_EOF]
    assert tokens[0].lexeme == text


@pytest.mark.parametrize(
    "text, kind",
    [
        ("+", TokenType.PLUS),
        ("*", TokenType.MULT),
        ("%", TokenType.MOD),
        ("^", TokenType.POW),
        ("&", TokenType.AND),
        ("|", TokenType.OR),
        ("@", TokenType.AT),
        ("(", TokenType.LPAREN),
        (")", TokenType.RPAREN),
        ("[", TokenType.LBRACKET),
        ("]", TokenType.RBRACKET),
        ("{", TokenType.LBRACE),
        ("}", TokenType.RBRACE),
        (",", TokenType.COMMA),
        (";", TokenType.SEMICOLON),
        (".", TokenType.DOT),
        ("/", TokenType.DIV),
    ],
)
def test_single_character_symbols(text, kind):
    assert kinds(text) == [kind, TokenType.TOKEN_EOF]


@pytest.mark.parametrize("text", ["-", "=", "<", ">", "!", ":"])
def test_lone_operator_prefix_is_dropped(text):
    assert kinds(text) == [TokenType.TOKEN_EOF]


@pytest.mark.parametrize("text", ["<>", "-=", ">>", "=:"])
def test_unlisted_operator_pair_is_comment(text):
    tokens = scan(text)
    assert [t.type for t in tokens] == [TokenType.COMMENT, TokenType.TOKEN_EOF]
    assert tokens[0].lexeme == text


def test_double_slash_yields_two_divisions():
    assert kinds("//") == [TokenType.DIV, TokenType.DIV, TokenType.TOKEN_EOF]
    assert lexemes("//") == ["/", "/", ""]


def test_string_literal():
    source = '"hello world"'
    tokens = scan(source)
    assert [t.type for t in tokens] == [TokenType.STRING, TokenType.TOKEN_EOF]
    assert tokens[0].lexeme == source


@pytest.mark.parametrize("source", [r'"a\"b"', r'"tab\there"', r'"x\\y"', r'"line\n"', r'"cr\r"'])
def test_string_escapes(source):
    tokens = scan(source)
    assert tokens[0].type is TokenType.STRING
    assert tokens[0].lexeme == source


def test_unterminated_string_is_dropped():
    assert kinds('"abc') == [TokenType.TOKEN_EOF]


def test_invalid_escape_drops_string_prefix():
    tokens = scan(r'"\q"')
    assert [t.type for t in tokens] == [TokenType.IDENTIFIER, TokenType.TOKEN_EOF]
    assert tokens[0].lexeme == "q"


def test_whitespace_is_skipped():
    assert lexemes("  let \t x  ") == ["let", "x", ""]


def test_columns_locate_lexemes_on_single_line():
    source = "let x = 42 + y; print(x) == 3.5 -> z"
    tokens = scan(source)[:-1]
    for token in tokens:
        start = token.col - 1
        assert source[start:start + len(token.lexeme)] == token.lexeme
    columns = [t.col for t in tokens]
    assert columns == sorted(set(columns))
    assert len({t.line for t in tokens}) == 1


def test_newline_moves_to_next_line():
    tokens = scan("a\nb")
    assert (tokens[1].line, tokens[1].col) == (2, 1)


def test_crlf_counts_as_one_line_break():
    tokens = scan("a\r\nb")
    assert [t.lexeme for t in tokens] == ["a", "b", ""]
    assert (tokens[1].line, tokens[1].col) == (2, 1)


def test_crlf_and_lf_give_same_positions():
    unix = scan("let x\nin x;\nprint(x)")
    windows = scan("let x\r\nin x;\r\nprint(x)")
    assert [(t.type, t.lexeme, t.line, t.col) for t in unix] == [
        (t.type, t.lexeme, t.line, t.col) for t in windows
    ]


def test_string_spanning_lines_advances_line_count():
    tokens = scan('"a\nb" c')
    assert tokens[0].type is TokenType.STRING
    assert tokens[1].line == tokens[0].line + 1


def test_empty_source_gives_only_eof():
    tokens = scan("")
    assert [t.type for t in tokens] == [TokenType.TOKEN_EOF]
    assert tokens[0].lexeme == ""


def test_scanner_class_matches_scan():
    source = "function f(x) => x ^ 2;"
    assert DFAScanner(source).scan_tokens() == scan(source)


def test_unknown_characters_never_appear():
    tokens = scan("let $ x ? # y ~")
    assert all(t.type is not TokenType.UNKNOWN for t in tokens)
    assert [t.lexeme for t in tokens] == ["let", "x", "y", ""]


def test_main_prints_tokens(tmp_path, capsys):
    source = 'let msg = "hi" in print(msg);'
    path = tmp_path / "prog.hulk"
    path.write_text(source, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [str(t) for t in scan(source)]


def test_main_reads_default_file(tmp_path, capsys, monkeypatch):
    source = "print(1 + 2);"
    (tmp_path / "example.hulk").write_text(source, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [str(t) for t in scan(source)]


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.hulk")]) == 1
    captured = capsys.readouterr()
    assert "Error" in captured.err
    assert captured.out == ""