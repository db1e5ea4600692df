"""Table-driven DFA scanner for HULK source text."""

from __future__ import annotations

import argparse
import string
import sys
from enum import Enum, auto

from hulk.tokens import Token, TokenType


class _State(Enum):
    START = auto()
    IN_IDENTIFIER = auto()
    IN_NUMBER = auto()
    IN_NUMBER_DECIMAL = auto()
    IN_STRING = auto()
    IN_STRING_ESCAPE = auto()
    IN_COMMENT = auto()
    IN_FIRST_SLASH = auto()
    IN_OPERATOR = auto()
    ACCEPT = auto()


def _build_table() -> dict[_State, dict[str, _State]]:
    letters = string.ascii_letters + "_"
    digits = string.digits

    start = dict.fromkeys(letters, _State.IN_IDENTIFIER)
    start.update(dict.fromkeys(digits, _State.IN_NUMBER))
    start['"'] = _State.IN_STRING
    start.update(dict.fromkeys("-=><!:", _State.IN_OPERATOR))
    start.update(dict.fromkeys(".;,+*%^&|@()[]{}", _State.ACCEPT))
    start["/"] = _State.IN_FIRST_SLASH

    in_string = {
        chr(code): _State.IN_STRING
        for code in range(128)
        if chr(code) not in '"\\'
    }
    in_string['"'] = _State.ACCEPT
    in_string["\\"] = _State.IN_STRING_ESCAPE

    return {
        _State.START: start,
        _State.IN_FIRST_SLASH: {"/": _State.IN_COMMENT},
        _State.IN_OPERATOR: dict.fromkeys("=>:", _State.ACCEPT),
        _State.IN_IDENTIFIER: dict.fromkeys(letters + digits, _State.IN_IDENTIFIER),
        _State.IN_NUMBER: {
            **dict.fromkeys(digits, _State.IN_NUMBER),
            ".": _State.IN_NUMBER_DECIMAL,
        },
        _State.IN_NUMBER_DECIMAL: dict.fromkeys(digits, _State.IN_NUMBER_DECIMAL),
        _State.IN_STRING: in_string,
        _State.IN_STRING_ESCAPE: dict.fromkeys('nt"\\r', _State.IN_STRING),
    }


_TRANSITIONS = _build_table()

_KEYWORDS = {
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "print": TokenType.PRINT,
    "let": TokenType.LET,
    "in": TokenType.IN,
    "elif": TokenType.ELIF,
    "function": TokenType.FUNCTION,
    "True": TokenType.TRUE,
    "False": TokenType.FALSE,
    "type": TokenType.TYPE,
    "protocol": TokenType.PROTOCOL,
    "inherits": TokenType.INHERITS,
    "invoke": TokenType.INVOKE,
    "sin": TokenType.SIN,
    "cos": TokenType.COS,
    "sqrt": TokenType.SQRT,
    "exp": TokenType.EXP,
    "log": TokenType.LOG,
    "rand": TokenType.RAND,
    "range": TokenType.RANGE,
    "extends": TokenType.EXTENDS,
    "other": TokenType.OTHER,
    "new": TokenType.NEW,
    "base": TokenType.BASE,
    "is": TokenType.IS,
    "as": TokenType.AS,
}

_SYMBOLS = {
    "==": TokenType.EQ,
    "!=": TokenType.NEQ,
    "<=": TokenType.LTE,
    ">=": TokenType.GTE,
    ":=": TokenType.DESTRUCTIVE_ASSIGN,
    "=>": TokenType.ARROW,
    "->": TokenType.SIMPLE_ARROW,
    "::": TokenType.DOUBLE_COLON,
    "=": TokenType.ASSIGN,
    "!": TokenType.NOT,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULT,
    ":": TokenType.COLON,
    ".": TokenType.DOT,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "@": TokenType.AT,
    "%": TokenType.MOD,
    "&": TokenType.AND,
    "|": TokenType.OR,
    "^": TokenType.POW,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}


def _is_accepting(state: _State) -> bool:
    return state is _State.ACCEPT or state in _TRANSITIONS


def _token_type(state: _State, lexeme: str) -> TokenType:
    if state is _State.IN_IDENTIFIER:
        return _KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
    if state is _State.IN_NUMBER:
        return TokenType.NUMBER
    if state is _State.IN_NUMBER_DECIMAL:
        return TokenType.UNKNOWN if lexeme.endswith(".") else TokenType.NUMBER
    if state is _State.ACCEPT:
        symbol = _SYMBOLS.get(lexeme)
        if symbol is not None:
            return symbol
        if lexeme.startswith('"') and lexeme.endswith('"'):
            return TokenType.STRING
        return TokenType.COMMENT
    if state is _State.IN_COMMENT:
        return TokenType.COMMENT
    if state is _State.IN_FIRST_SLASH:
        return TokenType.DIV
    return TokenType.UNKNOWN


class DFAScanner:
    """Splits source text into tokens using longest accepted match."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self) -> str:
        return "" if self._at_end() else self._source[self._pos]

    def _advance(self) -> str:
        char = self._source[self._pos]
        self._pos += 1
        if char == "\r":
            if self._peek() == "\n":
                self._pos += 1
            self._line += 1
            self._column = 1
        elif char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    def _next_token(self) -> Token:
        start_line, start_column = self._line, self._column
        start_pos = self._pos
        state = _State.START
        last_state: _State | None = None
        last_pos = start_pos

        while not self._at_end():
            next_state = _TRANSITIONS.get(state, {}).get(self._peek())
            if next_state is None:
                break
            self._advance()
            state = next_state
            if _is_accepting(state):
                last_state = state
                last_pos = self._pos

        if last_state is not None:
            lexeme = self._source[start_pos:last_pos]
            self._pos = last_pos
            return Token(_token_type(last_state, lexeme), lexeme, start_line, start_column)

        char = self._advance()
        return Token(TokenType.UNKNOWN, char, self._line, self._column - 1)

    def scan_tokens(self) -> list[Token]:
        """Scan the remaining input and return its tokens, ending with TOKEN_EOF."""
        tokens = []
        while not self._at_end():
            token = self._next_token()
            if token.type is not TokenType.UNKNOWN:
                tokens.append(token)
            if not self._at_end() and self._peek() == "\n":
                self._advance()
        tokens.append(Token(TokenType.TOKEN_EOF, "", self._line, self._column))
        return tokens


def scan(source: str) -> list[Token]:
    """Return the tokens of ``source``."""
    return DFAScanner(source).scan_tokens()


def main(argv: list[str] | None = None) -> int:
    """Print the tokens of a HULK source file, one per line."""
    parser = argparse.ArgumentParser(prog="hulk-lex", description="Tokenize a HULK source file.")
    parser.add_argument("path", nargs="?", default="example.hulk", help="source file to scan")
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8", errors="replace", newline="") as handle:
            code = handle.read()
    except OSError:
        print("Error: could not open the file.", file=sys.stderr)
        return 1

    for token in scan(code):
        print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())