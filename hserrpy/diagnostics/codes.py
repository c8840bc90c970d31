"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from hserrpy.diagnostics.diagnostic import Diagnostic, Severity
from hserrpy.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "warning"
    category: str | None = None

    def at(self, range: TextRange) -> Diagnostic:
        return Diagnostic(
            code=self.code,
            message=self.message,
            range=range,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Opening quote has no closing quote on the same line; lexed as punctuation.",
    hint="Quoted values in crash reports never span lines.",
    severity="warning",
    category="lexer",
)

PARSER_RECURSION_LIMIT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_RECURSION_LIMIT",
    message="Nesting limit reached; the remaining input was kept as unstructured trailer.",
    hint="Raise ParserOptions.max_depth to recognize deeper structure.",
    severity="warning",
    category="parser",
)

PARSER_UNSTRUCTURED_TRAILER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNSTRUCTURED_TRAILER",
    message="Trailing text was not recognized as part of any section.",
    severity="warning",
    category="parser",
)
