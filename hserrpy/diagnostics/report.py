"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from hserrpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Merge diagnostic groups into one list ordered by source position."""
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    diagnostics.sort(key=lambda d: d.range.as_tuple())
    return diagnostics


def has_code(diagnostics: Iterable[Diagnostic], code: str) -> bool:
    return any(d.code == code for d in diagnostics)
