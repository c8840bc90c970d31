"""Parsed syntax marker utilities."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParsedSyntax:
    """Success/failure of a grammar rule plus how many tokens it consumed."""

    ok: bool
    consumed: int = 0

    @staticmethod
    def present(consumed: int = 0) -> "ParsedSyntax":
        return ParsedSyntax(ok=True, consumed=consumed)

    @staticmethod
    def absent() -> "ParsedSyntax":
        return ParsedSyntax(ok=False)

    def is_present(self) -> bool:
        return self.ok

    def is_absent(self) -> bool:
        return not self.ok
