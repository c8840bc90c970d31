"""Parser events."""

from dataclasses import dataclass
from typing import Protocol

from hserrpy.diagnostics import Diagnostic
from hserrpy.syntax import HsErrSyntaxKind
from hserrpy.text import TextSize


@dataclass(frozen=True, slots=True)
class StartEvent:
    kind: HsErrSyntaxKind

    @staticmethod
    def tombstone() -> "StartEvent":
        return StartEvent(kind=HsErrSyntaxKind.TOMBSTONE)

    @property
    def is_tombstone(self) -> bool:
        return self.kind == HsErrSyntaxKind.TOMBSTONE


@dataclass(frozen=True, slots=True)
class FinishEvent:
    pass


@dataclass(frozen=True, slots=True)
class TokenEvent:
    kind: HsErrSyntaxKind
    end: TextSize


Event = StartEvent | FinishEvent | TokenEvent


class TreeSink(Protocol):
    def token(self, kind: HsErrSyntaxKind, end: TextSize) -> None: ...

    def start_node(self, kind: HsErrSyntaxKind) -> None: ...

    def finish_node(self) -> None: ...

    def errors(self, errors: list[Diagnostic]) -> None: ...


def process_events(
    sink: TreeSink,
    events: list[Event],
    errors: list[Diagnostic],
) -> None:
    """Replay parser events into a sink. Abandoned markers are skipped."""
    sink.errors(errors)
    for event in events:
        if isinstance(event, StartEvent):
            if event.is_tombstone:
                continue
            sink.start_node(event.kind)
        elif isinstance(event, FinishEvent):
            sink.finish_node()
        else:
            sink.token(event.kind, event.end)
