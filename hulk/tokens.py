"""Token kinds and the token record produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of lexical tokens; the numeric values are part of the output format."""

    # Keywords
    PRINT = 0
    LET = 1
    IN = 2
    IF = 3
    ELSE = 4
    ELIF = 5
    WHILE = 6
    FOR = 7
    FUNCTION = 8
    TRUE = 9
    FALSE = 10

    TYPE = 11
    PROTOCOL = 12
    EXTENDS = 13
    OTHER = 14
    NEW = 15
    INHERITS = 16
    BASE = 17
    IS = 18
    AS = 19

    START = 20

    INVOKE = 21

    # Built-in functions
    SIN = 22
    COS = 23
    SQRT = 24
    EXP = 25
    LOG = 26
    RAND = 27

    RANGE = 28

    # Literals
    IDENTIFIER = 29
    AUTOMATIC_PARAMETER = 30
    NUMBER = 31
    STRING = 32

    # Constants
    PI = 33
    E = 34

    # Operators
    PLUS = 35
    MINUS = 36
    MULT = 37
    DIV = 38
    MOD = 39
    POW = 40
    EQ = 41
    NEQ = 42
    LT = 43
    GT = 44
    LTE = 45
    GTE = 46
    AND = 47
    OR = 48

    NOT = 49
    ASSIGN = 50
    AT = 51

    DESTRUCTIVE_ASSIGN = 52
    ARROW = 53
    SIMPLE_ARROW = 54
    COLON = 55
    DOUBLE_COLON = 56

    # Delimiters
    LPAREN = 57
    RPAREN = 58
    LBRACE = 59
    RBRACE = 60
    LBRACKET = 61
    RBRACKET = 62
    COMMA = 63
    SEMICOLON = 64
    DOT = 65

    COMMENT = 66

    END_OF_FILE = 67
    TOKEN_EOF = 68

    UNKNOWN = 69


@dataclass(frozen=True)
class Token:
    """A lexeme with its kind and the line and column where it starts."""

    type: TokenType
    lexeme: str
    line: int
    col: int

    def __str__(self) -> str:
        return f"{int(self.type)} {self.lexeme} {self.line} {self.col}"