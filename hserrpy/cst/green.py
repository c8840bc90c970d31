"""Minimal immutable green CST representation."""

from dataclasses import dataclass
from typing import TypeAlias

from hserrpy.syntax import HsErrSyntaxKind
from hserrpy.text import TextSize


@dataclass(frozen=True, slots=True)
class GreenToken:
    kind: HsErrSyntaxKind
    text: str

    @property
    def text_len(self) -> TextSize:
        return TextSize.from_int(len(self.text))


@dataclass(frozen=True, slots=True)
class GreenNode:
    kind: HsErrSyntaxKind
    children: tuple["GreenElement", ...]

    @property
    def text_len(self) -> TextSize:
        total = 0
        for child in self.children:
            total += child.text_len.value
        return TextSize.from_int(total)


GreenElement: TypeAlias = GreenNode | GreenToken


class TreeBuilder:
    """Stack-based builder producing immutable green nodes."""

    def __init__(self) -> None:
        self._stack: list[tuple[HsErrSyntaxKind, list[GreenElement]]] = []
        self._roots: list[GreenElement] = []

    def start_node(self, kind: HsErrSyntaxKind) -> None:
        self._stack.append((kind, []))

    def token(self, kind: HsErrSyntaxKind, text: str) -> None:
        self._push_element(GreenToken(kind=kind, text=text))

    def finish_node(self) -> None:
        if not self._stack:
            raise RuntimeError("finish_node called with empty builder stack")

        kind, children = self._stack.pop()
        node = GreenNode(kind=kind, children=tuple(children))
        self._push_element(node)

    def finish(self) -> GreenNode:
        if self._stack:
            raise RuntimeError("Cannot finish tree: unclosed nodes remain on stack")

        if len(self._roots) == 1 and isinstance(self._roots[0], GreenNode):
            root = self._roots[0]
            if root.kind == HsErrSyntaxKind.DOCUMENT:
                return root

        return GreenNode(
            kind=HsErrSyntaxKind.DOCUMENT,
            children=tuple(self._roots),
        )

    def _push_element(self, element: GreenElement) -> None:
        if self._stack:
            self._stack[-1][1].append(element)
            return
        self._roots.append(element)
