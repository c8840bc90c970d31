"""Red CST wrappers over immutable green nodes/tokens."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

from hserrpy.cst.green import GreenNode
from hserrpy.syntax import HsErrSyntaxKind
from hserrpy.text import TextRange


class SyntaxToken:
    __slots__ = (
        "kind",
        "text",
        "parent",
        "_start",
        "_end",
    )

    def __init__(
        self,
        *,
        kind: HsErrSyntaxKind,
        text: str,
        parent: SyntaxNode,
        start: int,
    ) -> None:
        self.kind = kind
        self.text = text
        self.parent = parent
        self._start = start
        self._end = start + len(text)

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def range(self) -> TextRange:
        return TextRange(self._start, self._end)

    def __repr__(self) -> str:
        return f"SyntaxToken({self.kind.name}, {self._start}..{self._end}, {self.text!r})"


class SyntaxNode:
    __slots__ = (
        "kind",
        "parent",
        "_children",
        "_source",
        "_start",
        "_end",
    )

    def __init__(
        self,
        *,
        kind: HsErrSyntaxKind,
        parent: SyntaxNode | None,
        source: str,
        start: int,
    ) -> None:
        self.kind = kind
        self.parent = parent
        self._source = source
        self._start = start
        self._end = start
        self._children: tuple[SyntaxElement, ...] = ()

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def range(self) -> TextRange:
        return TextRange(self._start, self._end)

    @property
    def text(self) -> str:
        if self._source:
            return self._source[self._start : self._end]
        return "".join(token.text for token in self.descendants_tokens())

    @property
    def children(self) -> tuple[SyntaxElement, ...]:
        return self._children

    def child_nodes(self) -> tuple[SyntaxNode, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxNode))

    def first_child_node(self, kind: HsErrSyntaxKind) -> SyntaxNode | None:
        for child in self._children:
            if isinstance(child, SyntaxNode) and child.kind == kind:
                return child
        return None

    def first_child_token(self, kind: HsErrSyntaxKind) -> SyntaxToken | None:
        for child in self._children:
            if isinstance(child, SyntaxToken) and child.kind == kind:
                return child
        return None

    def descendants_tokens(self) -> tuple[SyntaxToken, ...]:
        tokens: list[SyntaxToken] = []

        def walk(node: SyntaxNode) -> None:
            for child in node.children:
                if isinstance(child, SyntaxToken):
                    tokens.append(child)
                else:
                    walk(child)

        walk(self)
        return tuple(tokens)

    def token_at_offset(self, offset: int) -> SyntaxToken | None:
        """Token whose range holds `offset`, or None outside this node."""
        node = self
        while True:
            for child in node.children:
                if child.start <= offset < child.end:
                    break
            else:
                return None
            if isinstance(child, SyntaxToken):
                return child
            node = child

    def ancestors(self) -> Iterator[SyntaxNode]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def __repr__(self) -> str:
        return f"SyntaxNode({self.kind.name}, {self._start}..{self._end})"


SyntaxElement: TypeAlias = SyntaxNode | SyntaxToken


def from_green(root: GreenNode, source: str = "") -> SyntaxNode:
    red_root, _ = _build_node(
        green=root,
        parent=None,
        source=source,
        start=0,
    )
    return red_root


def _build_node(
    *,
    green: GreenNode,
    parent: SyntaxNode | None,
    source: str,
    start: int,
) -> tuple[SyntaxNode, int]:
    node = SyntaxNode(
        kind=green.kind,
        parent=parent,
        source=source,
        start=start,
    )

    current = start
    children: list[SyntaxElement] = []
    for child in green.children:
        if isinstance(child, GreenNode):
            red_child, next_offset = _build_node(
                green=child,
                parent=node,
                source=source,
                start=current,
            )
            children.append(red_child)
            current = next_offset
            continue

        token = SyntaxToken(
            kind=child.kind,
            text=child.text,
            parent=node,
            start=current,
        )
        children.append(token)
        current = token.end

    node._children = tuple(children)
    node._end = current
    return node, current


__all__ = [
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "from_green",
]
