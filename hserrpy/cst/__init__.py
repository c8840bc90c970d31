"""Green and red CST structures."""

from hserrpy.cst.green import GreenElement, GreenNode, GreenToken, TreeBuilder
from hserrpy.cst.red import (
    SyntaxElement,
    SyntaxNode,
    SyntaxToken,
    from_green,
)

__all__ = [
    "GreenElement",
    "GreenNode",
    "GreenToken",
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "TreeBuilder",
    "from_green",
]
