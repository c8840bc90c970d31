"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from hserrpy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Degradation note recorded by the lexer or parser alongside the tree."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "warning"
    hint: str | None = None
    category: str | None = None
