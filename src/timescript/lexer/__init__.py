"""TimeScript lexer: token model and indentation-sensitive scanner."""

from timescript.lexer.tokens import KEYWORDS, Token, TokenKind
from timescript.lexer.scanner import LexicalError, Scanner, scan

__all__ = ["KEYWORDS", "Token", "TokenKind", "LexicalError", "Scanner", "scan"]
