"""Token kinds and the Token dataclass for the TimeScript scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Any, Mapping


class TokenKind(Enum):
    """Every distinct token the TimeScript scanner can produce."""

    # Structure
    INDENT = auto()
    DEDENT = auto()
    NEWLINE = auto()
    EOF = auto()

    # Keywords
    START = auto()
    SET = auto()
    SHOW = auto()
    LISTEN = auto()
    IF = auto()
    ELSE = auto()
    LOOP = auto()
    TICK = auto()
    END = auto()

    # Type names
    HOUR = auto()
    MINUTE = auto()
    TEXT = auto()
    FLAG = auto()

    # Literals & identifiers
    IDENTIFIER = auto()
    NUMBER = auto()         # raw digit text, converted later
    STRING = auto()         # decoded, without quotes
    BOOLEAN = auto()        # True / False

    # Operators & punctuation
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    ASSIGN = auto()         # =
    EQ = auto()             # ==
    NEQ = auto()            # !=
    LT = auto()
    GT = auto()
    LE = auto()
    GE = auto()
    LPAREN = auto()
    RPAREN = auto()
    COLON = auto()
    COMMA = auto()

    # Misc
    COMMENT = auto()        # # ...


STRUCTURAL_KINDS = frozenset({
    TokenKind.INDENT,
    TokenKind.DEDENT,
    TokenKind.NEWLINE,
    TokenKind.EOF,
})

KEYWORD_KINDS = frozenset({
    TokenKind.START,
    TokenKind.SET,
    TokenKind.SHOW,
    TokenKind.LISTEN,
    TokenKind.IF,
    TokenKind.ELSE,
    TokenKind.LOOP,
    TokenKind.TICK,
    TokenKind.END,
})

TYPE_KINDS = frozenset({
    TokenKind.HOUR,
    TokenKind.MINUTE,
    TokenKind.TEXT,
    TokenKind.FLAG,
})

OPERATOR_KINDS = frozenset({
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.STAR,
    TokenKind.SLASH,
    TokenKind.ASSIGN,
    TokenKind.EQ,
    TokenKind.NEQ,
    TokenKind.LT,
    TokenKind.GT,
    TokenKind.LE,
    TokenKind.GE,
})


# Exact-case: keywords and types are lowercase, booleans are capitalized.
KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "start": TokenKind.START,
    "set": TokenKind.SET,
    "show": TokenKind.SHOW,
    "listen": TokenKind.LISTEN,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "loop": TokenKind.LOOP,
    "tick": TokenKind.TICK,
    "end": TokenKind.END,
    "hour": TokenKind.HOUR,
    "minute": TokenKind.MINUTE,
    "text": TokenKind.TEXT,
    "flag": TokenKind.FLAG,
    "True": TokenKind.BOOLEAN,
    "False": TokenKind.BOOLEAN,
})


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the scanner.

    Tokens are immutable values. ``line`` and ``column`` are 1-based and
    point at the first character of the token; synthetic INDENT/DEDENT
    tokens sit at column 1 of the line that produced them.
    """

    kind: TokenKind
    lexeme: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.kind.name}({self.lexeme!r}) @ {self.line}:{self.column}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.name,
            "lexeme": self.lexeme,
            "line": self.line,
            "column": self.column,
        }
