"""Diagnostics."""

from hserrpy.diagnostics.codes import (
    LEXER_UNTERMINATED_STRING,
    PARSER_RECURSION_LIMIT,
    PARSER_UNSTRUCTURED_TRAILER,
    DiagnosticSpec,
)
from hserrpy.diagnostics.diagnostic import Diagnostic, Severity
from hserrpy.diagnostics.report import collect_diagnostics, has_code

__all__ = [
    "LEXER_UNTERMINATED_STRING",
    "PARSER_RECURSION_LIMIT",
    "PARSER_UNSTRUCTURED_TRAILER",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_code",
]
