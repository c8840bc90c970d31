#!/usr/bin/env python
"""Print the token stream of an hs_err report."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from hserrpy.lexer import Lexer, dump_tokens
from hserrpy.parser import ParseMode, ParserOptions


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump classified tokens of an hs_err report")
    parser.add_argument("path", type=Path, help="hs_err_pid*.log file")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.STRICT,
        help="Title recognition mode (default: strict)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = args.path.read_text(encoding="utf-8", errors="replace")
    lexer = Lexer(text, vocabulary=ParserOptions.for_mode(args.mode).vocabulary())
    tokens = lexer.lex()
    dump_tokens(tokens, text, lexer.diagnostics)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
