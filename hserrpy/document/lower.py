"""Lower a report CST into the document tree model."""

from __future__ import annotations

from hserrpy.cst import SyntaxNode, SyntaxToken
from hserrpy.document.model import (
    DocContent,
    DocIntro,
    DocSection,
    DocSubsection,
    DocToken,
    Document,
    SectionChild,
)
from hserrpy.parser import ParseMode, ParserOptions, parse_result
from hserrpy.syntax import HsErrSyntaxKind
from hserrpy.text import TextRange


def parse_document(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Document:
    """Parse report text into a `Document`. Never fails for any input text."""
    return parse_result(text, options, mode=mode).document()


def lower_syntax_tree(root: SyntaxNode) -> Document:
    intro_node = root.first_child_node(HsErrSyntaxKind.INTRO)
    if intro_node is None:
        intro = DocIntro(tokens=(), range=TextRange(root.start, root.start))
    else:
        intro = DocIntro(tokens=_lower_tokens(intro_node), range=intro_node.range)

    sections = tuple(
        _lower_section(child)
        for child in root.child_nodes()
        if child.kind == HsErrSyntaxKind.SECTION
    )

    trailer_node = root.first_child_node(HsErrSyntaxKind.TRAILER)
    trailer = _lower_tokens(trailer_node) if trailer_node is not None else ()
    return Document(intro=intro, sections=sections, trailer=trailer)


def _lower_section(node: SyntaxNode) -> DocSection:
    header = node.first_child_token(HsErrSyntaxKind.SECTION_HDR)
    if header is None:
        raise ValueError(f"Section node without header at {node.start}")

    children: list[SectionChild] = []
    for child in node.child_nodes():
        if child.kind == HsErrSyntaxKind.SUBSECTION:
            children.append(_lower_subsection(child))
        elif child.kind == HsErrSyntaxKind.CONTENT:
            children.append(_lower_content(child))

    return DocSection(header=_lower_token(header), children=tuple(children), range=node.range)


def _lower_subsection(node: SyntaxNode) -> DocSubsection:
    title = node.first_child_token(HsErrSyntaxKind.SUBTITLE)
    if title is None:
        raise ValueError(f"Subsection node without title at {node.start}")

    content_node = node.first_child_node(HsErrSyntaxKind.CONTENT)
    content = _lower_content(content_node) if content_node is not None else None
    return DocSubsection(title=_lower_token(title), content=content, range=node.range)


def _lower_content(node: SyntaxNode) -> DocContent:
    return DocContent(tokens=_lower_tokens(node), range=node.range)


def _lower_tokens(node: SyntaxNode) -> tuple[DocToken, ...]:
    return tuple(_lower_token(token) for token in node.descendants_tokens())


def _lower_token(token: SyntaxToken) -> DocToken:
    return DocToken(kind=token.kind.to_token_kind(), range=token.range, text=token.text)
