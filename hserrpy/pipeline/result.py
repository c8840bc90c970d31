"""Parse-once carrier with lazily built syntax and document views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hserrpy.cst import from_green
from hserrpy.parser.options import ParserOptions
from hserrpy.parser.tree_sink import ParsedGreenTree
from hserrpy.text import LineIndex

if TYPE_CHECKING:
    from hserrpy.cst import GreenNode, SyntaxNode
    from hserrpy.diagnostics import Diagnostic
    from hserrpy.document import Document, Presentation


@dataclass(slots=True)
class HsErrParseResult:
    """Parse result exposing green/red trees, the document model and diagnostics."""

    source_text: str
    parsed: ParsedGreenTree
    options: ParserOptions
    _syntax_root: SyntaxNode | None = field(default=None, init=False, repr=False)
    _document: Document | None = field(default=None, init=False, repr=False)
    _line_index: LineIndex | None = field(default=None, init=False, repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    def green_root(self) -> GreenNode:
        return self.parsed.root

    def syntax_root(self) -> SyntaxNode:
        if self._syntax_root is None:
            self._syntax_root = from_green(self.parsed.root, self.source_text)
        return self._syntax_root

    def document(self) -> Document:
        if self._document is None:
            from hserrpy.document.lower import lower_syntax_tree

            self._document = lower_syntax_tree(self.syntax_root())
        return self._document

    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex(self.source_text)
        return self._line_index

    def structure_path(self, offset: int) -> tuple[Presentation, ...]:
        """Outline path (intro, section, subsection) enclosing `offset`, with line locations."""
        from hserrpy.document.navigation import structure_path

        return structure_path(self.syntax_root(), offset, self.line_index())
