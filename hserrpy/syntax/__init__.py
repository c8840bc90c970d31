"""Syntax kinds shared by the parser and the CST."""

from hserrpy.syntax.kind import HsErrSyntaxKind

__all__ = ["HsErrSyntaxKind"]
