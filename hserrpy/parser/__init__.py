"""Parser infrastructure (token source + event-based parser + tree sink)."""

from hserrpy.parser.event import (
    Event,
    FinishEvent,
    StartEvent,
    TokenEvent,
    process_events,
)
from hserrpy.parser.grammar import (
    CONTENT_TOKEN_KINDS,
    parse_content,
    parse_document,
    parse_intro,
    parse_section,
    parse_subsection,
    parse_trailer,
)
from hserrpy.parser.hserr import parse, parse_result
from hserrpy.parser.marker import CompletedMarker, Marker
from hserrpy.parser.options import DEFAULT_MAX_DEPTH, ParseMode, ParserOptions
from hserrpy.parser.parse import build_lossless_tree
from hserrpy.parser.parse_lists import ParseNodeList
from hserrpy.parser.parsed_syntax import ParsedSyntax
from hserrpy.parser.parser import ParseCancelledError, Parser, ParserProgress
from hserrpy.parser.token_source import TokenSource
from hserrpy.parser.tree_sink import LosslessTreeSink, ParsedGreenTree

__all__ = [
    "CONTENT_TOKEN_KINDS",
    "DEFAULT_MAX_DEPTH",
    "CompletedMarker",
    "Event",
    "FinishEvent",
    "LosslessTreeSink",
    "Marker",
    "ParseCancelledError",
    "ParseMode",
    "ParseNodeList",
    "ParsedGreenTree",
    "ParsedSyntax",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "StartEvent",
    "TokenEvent",
    "TokenSource",
    "build_lossless_tree",
    "parse",
    "parse_content",
    "parse_document",
    "parse_intro",
    "parse_result",
    "parse_section",
    "parse_subsection",
    "parse_trailer",
    "process_events",
]
