"""Lossless tree sink for parser events."""

from dataclasses import dataclass

from hserrpy.cst import GreenNode, TreeBuilder
from hserrpy.diagnostics import Diagnostic
from hserrpy.syntax import HsErrSyntaxKind
from hserrpy.text import TextSize


@dataclass(frozen=True, slots=True)
class ParsedGreenTree:
    root: GreenNode
    diagnostics: list[Diagnostic]


class LosslessTreeSink:
    """Converts parser events into a green CST whose tokens cover the whole text."""

    def __init__(self, text: str, builder: TreeBuilder | None = None) -> None:
        self._text = text
        self._text_pos = TextSize.from_int(0)
        self._parents_count = 0
        self._errors: list[Diagnostic] = []
        self._builder = builder if builder is not None else TreeBuilder()

    def token(self, kind: HsErrSyntaxKind, end: TextSize) -> None:
        if end <= self._text_pos:
            raise RuntimeError(f"Empty or backwards token {kind.name} at {self._text_pos.value}")
        self._builder.token(kind, self._text[self._text_pos.value : end.value])
        self._text_pos = end

    def start_node(self, kind: HsErrSyntaxKind) -> None:
        self._builder.start_node(kind)
        self._parents_count += 1

    def finish_node(self) -> None:
        self._parents_count -= 1
        if self._parents_count < 0:
            raise RuntimeError("finish_node called more often than start_node")
        self._builder.finish_node()

    def errors(self, errors: list[Diagnostic]) -> None:
        self._errors = list(errors)

    def finish(self) -> ParsedGreenTree:
        if self._text_pos.value != len(self._text):
            raise RuntimeError(
                f"Tree covers {self._text_pos.value} of {len(self._text)} characters"
            )
        return ParsedGreenTree(root=self._builder.finish(), diagnostics=self._errors)
