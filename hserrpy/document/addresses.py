"""Address lookup over NUMBER tokens.

Crash reports repeat the same addresses across sections (registers, stack
dumps, thread lists, library mappings). These helpers find every number in a
document that lies close to a given address.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import re
from typing import Final

from hserrpy.document.model import Document, DocToken
from hserrpy.lexer import TokenKind

DEFAULT_MAX_DISTANCE: Final[int] = 4096
MAX_ADDRESS: Final[int] = 0xFFFF_FFFF_FFFF_FFFF

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DEC_DIGITS = re.compile(r"[0-9]+")


class Proximity(StrEnum):
    EXACT = "exact"
    NEAR = "near"  # within 10% of the search distance
    FAR = "far"  # within 50%
    VERY_FAR = "very_far"


@dataclass(frozen=True, slots=True)
class AddressMatch:
    token: DocToken
    address: int
    distance: int
    proximity: Proximity


def parse_as_address(text: str) -> int | None:
    """Read `text` as an unsigned 64-bit address.

    `0x` and `00` prefixes mean hexadecimal; otherwise decimal is tried first
    and hexadecimal second. Returns None when neither applies.
    """
    if text.startswith("0x") or text.startswith("00"):
        value = _parse_digits(text[2:], _HEX_DIGITS, 16)
        if value is not None:
            return value
    else:
        value = _parse_digits(text, _DEC_DIGITS, 10)
        if value is not None:
            return value
    return _parse_digits(text, _HEX_DIGITS, 16)


def _parse_digits(text: str, pattern: re.Pattern[str], base: int) -> int | None:
    if not pattern.fullmatch(text):
        return None
    value = int(text, base)
    if value > MAX_ADDRESS:
        return None
    return value


def classify_distance(distance: int, max_distance: int) -> Proximity:
    if distance == 0:
        return Proximity.EXACT
    percent = int(distance * 100 / max_distance)
    if percent <= 10:
        return Proximity.NEAR
    if percent <= 50:
        return Proximity.FAR
    return Proximity.VERY_FAR


def tokens_near_address(
    document: Document,
    address: int,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> list[AddressMatch]:
    """NUMBER tokens whose value is strictly closer than `max_distance` to `address`."""
    if max_distance < 1:
        raise ValueError(f"max_distance must be positive, got {max_distance}")

    matches: list[AddressMatch] = []
    for token in document.iter_tokens():
        if token.kind != TokenKind.NUMBER:
            continue
        value = parse_as_address(token.text)
        if value is None:
            continue
        distance = abs(address - value)
        if distance < max_distance:
            matches.append(
                AddressMatch(
                    token=token,
                    address=value,
                    distance=distance,
                    proximity=classify_distance(distance, max_distance),
                )
            )
    return matches
