"""TimeScript scanner: hand-written tokenizer with indentation-sensitive scanning.

Design decisions:
- Indentation depth is the number of leading spaces or tabs; each
  character counts as one unit (no tab stops).
- The first indentation character in a file (space or tab) is the only one
  allowed for the rest of that file.
- INDENT/DEDENT tokens emitted for each level change; blank lines are
  transparent to indentation.
- Comments (# ...) are kept as COMMENT tokens; filtering is up to the consumer.
- The first lexical fault aborts the scan; there is no recovery.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from timescript.lexer.tokens import KEYWORDS, Token, TokenKind

logger = logging.getLogger(__name__)


_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    "=": TokenKind.ASSIGN,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
}

_TWO_CHAR_TOKENS: dict[str, TokenKind] = {
    "==": TokenKind.EQ,
    "!=": TokenKind.NEQ,
    "<=": TokenKind.LE,
    ">=": TokenKind.GE,
}

_ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

_INDENT_CHARS = (" ", "\t")
_LINE_BREAKS = ("\n", "\r")


def _is_identifier_char(ch: str) -> bool:
    # Decimal digits only; superscripts and fractions are not part of names
    return ch.isalpha() or ch.isdecimal() or ch == "_"


class LexicalError(Exception):
    """Raised on the first lexical fault, with its source location."""

    def __init__(self, message: str, line: int, column: int) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message} (Line {line}, Column {column})")


class Scanner:
    """Tokenizes TimeScript source code into a list of `Token` objects.

    Usage::

        tokens = Scanner(source_text).scan()

    All cursor and indentation state is reset by each call to `scan`, so an
    instance can be reused. A single instance must not be shared between
    threads.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._reset()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan(self) -> list[Token]:
        """Scan the entire source and return the token list.

        Raises:
            LexicalError: on the first malformed construct.
        """
        self._reset()
        logger.debug("Scanning %d characters", len(self.source))

        while not self._at_end():
            if self.at_line_start:
                self._process_indentation()
                continue
            self._scan_token()

        # Flush the last logical line if the source lacks a final line break
        if not self.tokens or self.tokens[-1].kind is not TokenKind.NEWLINE:
            self._emit(TokenKind.NEWLINE, "")

        while len(self.indent_stack) > 1:
            self.indent_stack.pop()
            self._emit(TokenKind.DEDENT, "")

        self._emit(TokenKind.EOF, "")
        logger.debug("Scanned %d tokens over %d line(s)", len(self.tokens), self.line)
        return list(self.tokens)

    # ------------------------------------------------------------------
    # Indentation
    # ------------------------------------------------------------------

    def _process_indentation(self) -> None:
        """Measure leading whitespace and emit INDENT/DEDENT for this line."""
        start_line = self.line
        start_col = self.column
        depth = 0

        while not self._at_end() and self._peek() in _INDENT_CHARS:
            ch = self._peek()
            if self.indent_char is None:
                self.indent_char = ch
            elif ch != self.indent_char:
                self._error("Mixing tabs and spaces is not allowed.")
            depth += 1
            self._advance()

        # Blank lines leave the indentation stack untouched
        if self._at_end():
            # Whitespace-only last line: flush it like any unterminated line
            self._emit(TokenKind.NEWLINE, "")
            self.at_line_start = False
            return
        if self._peek() in _LINE_BREAKS:
            self._scan_newline()
            return

        self.at_line_start = False
        current = self.indent_stack[-1]
        if depth > current:
            self.indent_stack.append(depth)
            self.tokens.append(Token(TokenKind.INDENT, "", start_line, start_col))
        elif depth < current:
            while self.indent_stack[-1] > depth:
                self.indent_stack.pop()
                self.tokens.append(Token(TokenKind.DEDENT, "", start_line, start_col))
            if self.indent_stack[-1] != depth:
                self._error(
                    "Inconsistent dedent (unmatched indentation level).",
                    start_line, start_col,
                )

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Scan a single token (or skip whitespace) at the current position."""
        ch = self._peek()

        if ch in _INDENT_CHARS:
            self._advance()
            return

        if ch == "#":
            self._scan_comment()
            return

        if ch in _LINE_BREAKS:
            self._scan_newline()
            return

        if ch.isalpha() or ch == "_":
            self._scan_identifier()
            return

        if ch.isdecimal():
            self._scan_number()
            return

        if ch == '"':
            self._scan_string()
            return

        self._scan_operator()

    def _scan_operator(self) -> None:
        ch = self._peek()
        pair = ch + (self._peek_ahead(1) or "")

        if pair in _TWO_CHAR_TOKENS:
            self._emit(_TWO_CHAR_TOKENS[pair], pair)
            self._advance()
            self._advance()
            return

        if ch in _SINGLE_CHAR_TOKENS:
            self._emit(_SINGLE_CHAR_TOKENS[ch], ch)
            self._advance()
            return

        if ch == "!":
            self._error("Unexpected character '!'. Did you mean '!='?")

        self._error(f"Unexpected character '{ch}'")

    def _scan_newline(self) -> None:
        """Consume one line break (\\n, \\r\\n or \\r) and emit NEWLINE."""
        line = self.line
        col = self.column
        lexeme = self._advance()
        if lexeme == "\r" and self._peek_ahead(0) == "\n":
            lexeme += self._advance()
        self.tokens.append(Token(TokenKind.NEWLINE, lexeme, line, col))
        self.at_line_start = True

    def _scan_comment(self) -> None:
        """Scan from # to end of line; the line break is left in place."""
        start_col = self.column
        self._advance()  # consume '#'
        chars: list[str] = []

        while not self._at_end() and self._peek() not in _LINE_BREAKS:
            chars.append(self._advance())

        self.tokens.append(Token(TokenKind.COMMENT, "".join(chars), self.line, start_col))

    def _scan_identifier(self) -> None:
        """Scan an identifier, keyword, type name or boolean."""
        start_col = self.column
        chars: list[str] = []

        while not self._at_end() and _is_identifier_char(self._peek()):
            chars.append(self._advance())

        word = "".join(chars)
        kind = KEYWORDS.get(word, TokenKind.IDENTIFIER)
        self.tokens.append(Token(kind, word, self.line, start_col))

    def _scan_number(self) -> None:
        """Scan digits with at most one decimal point; a second '.' ends it."""
        start_col = self.column
        chars: list[str] = []
        seen_dot = False

        while not self._at_end():
            ch = self._peek()
            if ch.isdecimal():
                chars.append(self._advance())
            elif ch == "." and not seen_dot:
                seen_dot = True
                chars.append(self._advance())
            else:
                break

        self.tokens.append(Token(TokenKind.NUMBER, "".join(chars), self.line, start_col))

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal, decoding escapes."""
        start_line = self.line
        start_col = self.column
        self._advance()  # consume opening quote
        chars: list[str] = []

        while True:
            if self._at_end():
                self._error("Unterminated string literal (EOF reached).")
            ch = self._peek()
            if ch == '"':
                self._advance()
                break
            if ch in _LINE_BREAKS:
                self._error("Unterminated string literal (newline encountered inside string).")
            if ch == "\\":
                self._advance()  # consume backslash
                if self._at_end():
                    self._error("Unterminated string literal (EOF reached).")
                escaped = self._advance()
                chars.append(_ESCAPES.get(escaped, escaped))
                continue
            chars.append(self._advance())

        self.tokens.append(Token(TokenKind.STRING, "".join(chars), start_line, start_col))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        self.indent_stack: list[int] = [0]
        self.at_line_start = True
        self.indent_char: str | None = None

    def _peek(self) -> str:
        """Return the current character without consuming it."""
        return self.source[self.pos]

    def _peek_ahead(self, offset: int) -> str | None:
        """Return a character at an offset ahead, or None if past end."""
        idx = self.pos + offset
        if idx >= len(self.source):
            return None
        return self.source[idx]

    def _advance(self) -> str:
        """Consume and return the current character, tracking line/column."""
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n" or (ch == "\r" and self._peek_ahead(0) != "\n"):
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _emit(self, kind: TokenKind, lexeme: str) -> None:
        self.tokens.append(Token(kind, lexeme, self.line, self.column))

    def _error(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> NoReturn:
        line = self.line if line is None else line
        column = self.column if column is None else column
        logger.debug("Lexical error at %d:%d: %s", line, column, message)
        raise LexicalError(message, line, column)


def scan(source: str) -> list[Token]:
    """Scan *source* with a fresh `Scanner` and return its tokens."""
    return Scanner(source).scan()
