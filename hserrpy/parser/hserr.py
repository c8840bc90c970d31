"""High-level parse entrypoint for hs_err report text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hserrpy.diagnostics import collect_diagnostics
from hserrpy.lexer import Lexer
from hserrpy.parser.event import StartEvent
from hserrpy.parser.grammar import parse_document
from hserrpy.parser.options import ParseMode, ParserOptions
from hserrpy.parser.parse import build_lossless_tree
from hserrpy.parser.parser import ParseCancelledError, Parser
from hserrpy.parser.token_source import TokenSource
from hserrpy.parser.tree_sink import ParsedGreenTree
from hserrpy.syntax import HsErrSyntaxKind

if TYPE_CHECKING:
    from hserrpy.pipeline import HsErrParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedGreenTree:
    resolved_options = _resolve_options(options=options, mode=mode)

    lexer = Lexer(text, vocabulary=resolved_options.vocabulary())
    source = TokenSource(lexer)
    parser = Parser(source, options=resolved_options)

    try:
        parse_document(parser)
    except ParseCancelledError:
        logger.debug("parse cancelled after %d tokens", source.consumed)
        raise

    events, parser_diagnostics = parser.finish()
    lexer_diagnostics = source.finish()
    diagnostics = collect_diagnostics(lexer_diagnostics, parser_diagnostics)
    sections = sum(1 for event in events if isinstance(event, StartEvent) and event.kind == HsErrSyntaxKind.SECTION)

    logger.debug(
        "parsed %d characters into %d tokens and %d sections (%s mode, %d diagnostics)",
        len(text),
        source.consumed,
        sections,
        resolved_options.mode,
        len(diagnostics),
    )
    return build_lossless_tree(
        text=text,
        events=events,
        diagnostics=diagnostics,
    )


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> HsErrParseResult:
    from hserrpy.pipeline import HsErrParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    parsed = parse(text, options=resolved_options)
    return HsErrParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
    )
