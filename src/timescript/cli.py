"""TimeScript command-line entry point.

Usage:
    timescript tokenize <file.ts | ->   Display the token stream

Options:
    --json            Print tokens as a JSON array
    --no-color        Disable coloured output
    --hide-comments   Leave COMMENT tokens out of the listing
    -v, --verbose     Enable debug logging on stderr
    -h, --help        Show this message
    --version         Show the version
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from timescript.lexer.scanner import LexicalError, Scanner
from timescript.lexer.tokens import TokenKind
from timescript.viewer import make_console, render_error, render_tokens, render_warning

logger = logging.getLogger(__name__)

_FLAGS = {"--json", "--no-color", "--hide-comments", "-v", "--verbose"}
_STANDALONE = {"-", "-h", "--help", "--version"}


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    flags = {a for a in args if a in _FLAGS}
    positional = [a for a in args if a not in _FLAGS]
    unknown = [a for a in positional if a.startswith("-") and a not in _STANDALONE]

    logging.basicConfig(
        level=logging.DEBUG if flags & {"-v", "--verbose"} else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if unknown:
        print(f"Error: unknown option '{unknown[0]}'")
        print(__doc__.strip())
        return 1

    if len(positional) < 1:
        print(__doc__.strip())
        return 1

    command = positional[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from timescript import __version__
        print(f"timescript {__version__}")
        return 0

    if command != "tokenize":
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1

    if len(positional) < 2:
        print(f"Error: command '{command}' requires a file argument")
        return 1

    source = _read_source(positional[1])
    if source is None:
        return 1

    return _cmd_tokenize(
        source,
        as_json="--json" in flags,
        color="--no-color" not in flags,
        hide_comments="--hide-comments" in flags,
    )


def _read_source(path_arg: str) -> str | None:
    if path_arg == "-":
        return sys.stdin.read()

    filepath = Path(path_arg)
    if not filepath.exists():
        print(f"Error: file not found: {filepath}")
        return None
    logger.debug("Reading %s", filepath)
    try:
        return filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s", filepath, exc_info=True)
        print(f"Error: cannot read {filepath}: {e}")
        return None


def _cmd_tokenize(source: str, as_json: bool, color: bool, hide_comments: bool) -> int:
    """Scan the source and display the token stream."""
    console = make_console(color=color)

    if not source.strip():
        render_warning(console, "Please enter some TimeScript code before running.")
        return 1

    try:
        tokens = Scanner(source).scan()
    except LexicalError as e:
        render_error(console, "LEXICAL ERROR", str(e))
        return 1
    except Exception as e:
        logger.debug("Scanner failed unexpectedly", exc_info=True)
        render_error(console, "UNEXPECTED ERROR", str(e))
        return 1

    if as_json:
        shown = [t for t in tokens if not (hide_comments and t.kind is TokenKind.COMMENT)]
        print(json.dumps([t.to_dict() for t in shown], indent=2))
        return 0

    render_tokens(console, tokens, hide_comments=hide_comments)
    return 0


if __name__ == "__main__":
    sys.exit(main())
