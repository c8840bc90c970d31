"""Outline path of the structure enclosing a text offset."""

from hserrpy.cst import SyntaxNode
from hserrpy.document.model import Presentation, line_location
from hserrpy.document.names import INTRO_LABEL, derive_name, section_label
from hserrpy.syntax import HsErrSyntaxKind
from hserrpy.text import LineIndex


def structure_path(
    root: SyntaxNode,
    offset: int,
    line_index: LineIndex | None = None,
) -> tuple[Presentation, ...]:
    """Presentations of the intro, section and subsection holding `offset`, outermost first.

    Offsets in the trailer or outside the text give an empty path.
    """
    token = root.token_at_offset(offset)
    if token is None:
        return ()

    path: list[Presentation] = []
    for node in (token.parent, *token.parent.ancestors()):
        presentation = _presentation(node, line_index)
        if presentation is not None:
            path.append(presentation)
    path.reverse()
    return tuple(path)


def _presentation(node: SyntaxNode, line_index: LineIndex | None) -> Presentation | None:
    match node.kind:
        case HsErrSyntaxKind.INTRO:
            label = INTRO_LABEL
        case HsErrSyntaxKind.SECTION:
            header = node.first_child_token(HsErrSyntaxKind.SECTION_HDR)
            label = section_label(header.text) if header is not None else None
        case HsErrSyntaxKind.SUBSECTION:
            title = node.first_child_token(HsErrSyntaxKind.SUBTITLE)
            label = derive_name(title.text) if title is not None else None
        case _:
            return None
    return Presentation(label=label, location=line_location(line_index, node.range))
