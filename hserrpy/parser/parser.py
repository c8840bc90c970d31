"""Event-based parser core."""

from dataclasses import dataclass

from hserrpy.diagnostics import Diagnostic
from hserrpy.diagnostics.codes import PARSER_RECURSION_LIMIT
from hserrpy.lexer import TokenKind
from hserrpy.parser.event import Event, StartEvent, TokenEvent
from hserrpy.parser.marker import Marker
from hserrpy.parser.options import ParserOptions
from hserrpy.parser.token_source import TokenSource
from hserrpy.syntax import HsErrSyntaxKind
from hserrpy.text import TextRange, TextSize, slice_text_range


class ParseCancelledError(Exception):
    """Raised when `ParserOptions.is_cancelled` asks a running parse to stop."""

    def __init__(self, position: TextSize) -> None:
        super().__init__(f"Parse cancelled at offset {position.value}")
        self.position = position


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: TextSize | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed


class Parser:
    """Event-based parser."""

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._events: list[Event] = []
        self._diagnostics: list[Diagnostic] = []
        self._depth_limit_hit = False

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def events(self) -> list[Event]:
        return self._events

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def current_text(self) -> str:
        return slice_text_range(self._source.text, self._source.current_range)

    @property
    def position(self) -> TextSize:
        return self._source.position

    @property
    def tokens_consumed(self) -> int:
        return self._source.consumed

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def start(self) -> Marker:
        pos = len(self._events)
        self._events.append(StartEvent.tombstone())
        return Marker(pos=pos, start=self.position)

    def bump(self) -> None:
        if self.current == TokenKind.EOF:
            return
        self._events.append(
            TokenEvent(
                kind=HsErrSyntaxKind.from_token_kind(self.current),
                end=self.current_range.end,
            )
        )
        self._source.bump()

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.code == diagnostic.code and previous.range.start == diagnostic.range.start:
                return
        self._diagnostics.append(diagnostic)

    def recursion_guard(self, level: int, rule: str) -> bool:
        """Return False when `rule` at nesting `level` exceeds the configured depth."""
        if level <= self._options.max_depth:
            return True
        if not self._depth_limit_hit:
            self._depth_limit_hit = True
            spec = PARSER_RECURSION_LIMIT
            self.error(
                Diagnostic(
                    code=spec.code,
                    message=f"{spec.message} (rule `{rule}` at depth {level})",
                    range=self.current_range,
                    severity=spec.severity,
                    hint=spec.hint,
                    category=spec.category,
                )
            )
        return False

    def check_cancelled(self) -> None:
        is_cancelled = self._options.is_cancelled
        if is_cancelled is not None and is_cancelled():
            raise ParseCancelledError(self.position)

    def finish(self) -> tuple[list[Event], list[Diagnostic]]:
        return self._events, self._diagnostics
