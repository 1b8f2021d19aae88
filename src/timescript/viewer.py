"""Colour-coded token listing for the TimeScript CLI.

Renders a scanned token stream as a rich table, one row per token, with a
colour per token category. Also renders lexical and unexpected errors.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.text import Text

from timescript.lexer.tokens import (
    KEYWORD_KINDS,
    OPERATOR_KINDS,
    STRUCTURAL_KINDS,
    TYPE_KINDS,
    Token,
    TokenKind,
)

STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "rule": Style(color="bright_black"),
    "number": Style(color="bright_green"),
    "string": Style(color="yellow"),
    "identifier": Style(color="white", dim=True),
    "keyword": Style(color="cyan", bold=True),
    "type": Style(color="magenta"),
    "operator": Style(color="bright_magenta"),
    "structural": Style(color="bright_black"),
    "comment": Style(color="bright_black", italic=True),
    "default": Style(color="white"),
    "position": Style(color="bright_black"),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "error_detail": Style(color="bright_red"),
    "warning": Style(color="yellow", bold=True),
}


def style_for(kind: TokenKind) -> Style:
    """Return the display style for a token kind."""
    if kind is TokenKind.NUMBER:
        return STYLES["number"]
    if kind is TokenKind.STRING:
        return STYLES["string"]
    if kind is TokenKind.IDENTIFIER:
        return STYLES["identifier"]
    if kind is TokenKind.COMMENT:
        return STYLES["comment"]
    if kind in KEYWORD_KINDS or kind is TokenKind.BOOLEAN:
        return STYLES["keyword"]
    if kind in TYPE_KINDS:
        return STYLES["type"]
    if kind in OPERATOR_KINDS:
        return STYLES["operator"]
    if kind in STRUCTURAL_KINDS:
        return STYLES["structural"]
    return STYLES["default"]


def make_console(color: bool = True) -> Console:
    """Build the console used for all CLI output."""
    return Console(no_color=not color, highlight=False)


def render_tokens(
    console: Console,
    tokens: list[Token],
    hide_comments: bool = False,
) -> None:
    """Print the token listing, framed by a header and a total."""
    shown: list[Token] = tokens
    if hide_comments:
        shown = [t for t in tokens if t.kind is not TokenKind.COMMENT]

    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Lexeme")
    table.add_column("Line", justify="right", style=STYLES["position"])
    table.add_column("Col", justify="right", style=STYLES["position"])

    for tok in shown:
        table.add_row(
            Text(tok.kind.name, style=style_for(tok.kind)),
            Text(repr(tok.lexeme)),
            str(tok.line),
            str(tok.column),
        )

    console.print(Text("LEXICAL ANALYSIS RESULT", style=STYLES["title"]))
    console.print(Rule(style=STYLES["rule"]))
    console.print(table)
    console.print(Rule(style=STYLES["rule"]))
    footer = f"Total Tokens: {len(tokens)}"
    hidden = len(tokens) - len(shown)
    if hidden:
        footer += f" ({hidden} comment(s) hidden)"
    console.print(Text(footer, style=STYLES["success"]))


def render_error(console: Console, title: str, message: str) -> None:
    """Print an error block such as LEXICAL ERROR or UNEXPECTED ERROR."""
    console.print(Text(f"{title}:", style=STYLES["error"]))
    console.print(Text(message, style=STYLES["error_detail"]))


def render_warning(console: Console, message: str) -> None:
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))
