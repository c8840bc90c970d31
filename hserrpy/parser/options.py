"""Parser modes and configuration options."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from hserrpy.lexer import DEFAULT_VOCABULARY, Vocabulary

DEFAULT_MAX_DEPTH = 1000


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Vocabulary extensions, nesting bound and cancellation hook for one parse."""

    mode: ParseMode = ParseMode.STRICT
    max_depth: int = DEFAULT_MAX_DEPTH
    extra_section_titles: frozenset[str] = frozenset()
    extra_subsection_titles: frozenset[str] = frozenset()
    extra_keywords: frozenset[str] = frozenset()
    extra_signals: frozenset[str] = frozenset()
    is_cancelled: Callable[[], bool] | None = None

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        return ParserOptions(mode=mode)

    @property
    def permissive_labels(self) -> bool:
        return self.mode == ParseMode.PERMISSIVE

    def vocabulary(self) -> Vocabulary:
        return DEFAULT_VOCABULARY.extended(
            section_titles=self.extra_section_titles,
            subsection_titles=self.extra_subsection_titles,
            keywords=self.extra_keywords,
            signals=self.extra_signals,
            permissive_labels=self.permissive_labels,
        )
