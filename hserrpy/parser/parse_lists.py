"""Reusable `*` repetition loop with a forced-progress guard."""

from collections.abc import Callable
from dataclasses import dataclass

from hserrpy.lexer import TokenKind
from hserrpy.parser.parsed_syntax import ParsedSyntax
from hserrpy.parser.parser import Parser, ParserProgress


@dataclass(slots=True)
class ParseNodeList:
    """Runs `parse_element` until it is absent, input ends, or an iteration consumes nothing.

    Elements attach directly to whatever node the caller has open.
    `before_element` runs at the top of every iteration.
    """

    parse_element: Callable[[Parser, int], ParsedSyntax]
    before_element: Callable[[Parser], None] | None = None

    def parse_list(self, parser: Parser, level: int) -> ParsedSyntax:
        consumed_before = parser.tokens_consumed
        progress = ParserProgress()

        while not parser.at(TokenKind.EOF):
            if not progress.has_progressed(parser):
                break
            if self.before_element is not None:
                self.before_element(parser)
            parsed_element = self.parse_element(parser, level)
            if parsed_element.is_absent():
                break

        return ParsedSyntax.present(parser.tokens_consumed - consumed_before)
