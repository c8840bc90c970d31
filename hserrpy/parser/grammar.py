"""Recursive-descent grammar for hs_err reports.

    document   := intro section* trailer
    intro      := content*
    content    := (classified | WHITE_SPACE)+
    section    := SECTION_HDR (subsection | content | <empty>)*
    subsection := SUBTITLE paragraph?
    paragraph  := content up to the first blank line
    trailer    := any*

Every rule receives its nesting `level`; `Parser.recursion_guard` turns a
rule into a local failure once the level exceeds `ParserOptions.max_depth`.
"""

from typing import Final

from hserrpy.diagnostics.codes import PARSER_UNSTRUCTURED_TRAILER
from hserrpy.lexer import CLASSIFIED_TOKEN_KINDS, TokenKind
from hserrpy.parser.parse_lists import ParseNodeList
from hserrpy.parser.parsed_syntax import ParsedSyntax
from hserrpy.parser.parser import Parser
from hserrpy.syntax import HsErrSyntaxKind
from hserrpy.text import TextRange

CONTENT_TOKEN_KINDS: Final[frozenset[TokenKind]] = CLASSIFIED_TOKEN_KINDS | {TokenKind.WHITE_SPACE}

DOCUMENT_LEVEL: Final[int] = 1


def parse_document(parser: Parser) -> None:
    marker = parser.start()
    parse_intro(parser, DOCUMENT_LEVEL + 1)
    _SECTION_LIST.parse_list(parser, DOCUMENT_LEVEL + 1)
    parse_trailer(parser)
    marker.complete(parser, HsErrSyntaxKind.DOCUMENT)


def parse_intro(parser: Parser, level: int) -> ParsedSyntax:
    """Always present, possibly empty."""
    marker = parser.start()
    consumed = 0
    if parser.recursion_guard(level, "intro"):
        consumed = _CONTENT_LIST.parse_list(parser, level + 1).consumed
    marker.complete(parser, HsErrSyntaxKind.INTRO)
    return ParsedSyntax.present(consumed)


def parse_content(parser: Parser, level: int, *, stop_at_blank_line: bool = False) -> ParsedSyntax:
    if not parser.recursion_guard(level, "content"):
        return ParsedSyntax.absent()
    if not _at_content(parser, stop_at_blank_line):
        return ParsedSyntax.absent()

    marker = parser.start()
    consumed = 0
    while _at_content(parser, stop_at_blank_line):
        parser.bump()
        consumed += 1
    marker.complete(parser, HsErrSyntaxKind.CONTENT)
    return ParsedSyntax.present(consumed)


def _at_content(parser: Parser, stop_at_blank_line: bool) -> bool:
    if not parser.at_set(CONTENT_TOKEN_KINDS):
        return False
    return not (stop_at_blank_line and parser.at(TokenKind.WHITE_SPACE) and is_blank_line(parser.current_text))


def is_blank_line(whitespace: str) -> bool:
    """True when a whitespace run spans at least two line breaks."""
    return whitespace.count("\n") + whitespace.count("\r") - whitespace.count("\r\n") >= 2


def parse_section(parser: Parser, level: int) -> ParsedSyntax:
    if not parser.recursion_guard(level, "section"):
        return ParsedSyntax.absent()
    if not parser.at(TokenKind.SECTION_HDR):
        return ParsedSyntax.absent()

    marker = parser.start()
    parser.bump()
    body = _SECTION_BODY.parse_list(parser, level + 1)
    marker.complete(parser, HsErrSyntaxKind.SECTION)
    return ParsedSyntax.present(1 + body.consumed)


def parse_section_element(parser: Parser, level: int) -> ParsedSyntax:
    """subsection | content | <empty>"""
    if not parser.recursion_guard(level, "section element"):
        return ParsedSyntax.absent()

    subsection = parse_subsection(parser, level + 1)
    if subsection.is_present():
        return subsection

    content = parse_content(parser, level + 1)
    if content.is_present():
        return content

    return ParsedSyntax.present()


def parse_subsection(parser: Parser, level: int) -> ParsedSyntax:
    if not parser.recursion_guard(level, "subsection"):
        return ParsedSyntax.absent()
    if not parser.at(TokenKind.SUBTITLE):
        return ParsedSyntax.absent()

    marker = parser.start()
    parser.bump()
    content = parse_content(parser, level + 1, stop_at_blank_line=True)
    marker.complete(parser, HsErrSyntaxKind.SUBSECTION)
    return ParsedSyntax.present(1 + content.consumed)


def parse_trailer(parser: Parser) -> ParsedSyntax:
    """Absorb every remaining token, whatever its kind."""
    marker = parser.start()
    consumed = 0
    unstructured: TextRange | None = None
    while not parser.at(TokenKind.EOF):
        if not parser.at(TokenKind.WHITE_SPACE):
            rng = parser.current_range
            unstructured = rng if unstructured is None else unstructured.cover(rng)
        parser.bump()
        consumed += 1
    marker.complete(parser, HsErrSyntaxKind.TRAILER)

    if unstructured is not None:
        parser.error(PARSER_UNSTRUCTURED_TRAILER.at(unstructured))
    return ParsedSyntax.present(consumed)


_CONTENT_LIST: Final[ParseNodeList] = ParseNodeList(parse_element=parse_content)
_SECTION_BODY: Final[ParseNodeList] = ParseNodeList(parse_element=parse_section_element)
_SECTION_LIST: Final[ParseNodeList] = ParseNodeList(
    parse_element=parse_section,
    before_element=Parser.check_cancelled,
)
