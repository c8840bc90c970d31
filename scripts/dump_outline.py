#!/usr/bin/env python
"""Print the intro/section/subsection outline of an hs_err report."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from hserrpy.document import DocSubsection
from hserrpy.parser import ParseMode, parse_result


def main() -> int:
    parser = argparse.ArgumentParser(description="Show the structure recognized in an hs_err report")
    parser.add_argument("path", type=Path, help="hs_err_pid*.log file")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.STRICT,
        help="Title recognition mode (default: strict)",
    )
    parser.add_argument("--offset", type=int, help="Also print the outline path enclosing this character offset")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = args.path.read_text(encoding="utf-8", errors="replace")
    result = parse_result(text, mode=args.mode)
    document = result.document()
    lines = result.line_index()

    intro = document.intro.presentation(lines)
    print(f"{intro.label} ({intro.location}, {len(document.intro.tokens)} tokens)")
    for section in document.sections:
        shown = section.presentation(lines)
        print(f"{shown.label or '<unnamed>'} ({shown.location})")
        for child in section.children:
            if isinstance(child, DocSubsection):
                sub = child.presentation(lines)
                print(f"    {sub.label or '<unnamed>'} ({sub.location})")
            else:
                print(f"    [{len(child.significant_tokens())} content tokens]")

    if document.trailer:
        print(f"TRAILER ({len(document.trailer)} tokens)")

    if args.offset is not None:
        path = result.structure_path(args.offset)
        print(" > ".join(step.label or "<unnamed>" for step in path) or "<outside structure>")

    for diagnostic in result.diagnostics:
        line = lines.line_of(diagnostic.range.start)
        print(f"- {diagnostic.severity.upper()} {diagnostic.code} line {line}: {diagnostic.message}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
