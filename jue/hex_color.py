"""Parser for ``#RRGGBB`` colour literals."""

from __future__ import annotations

from dataclasses import dataclass

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class HexColorError(ValueError):
    """Raised when text does not start with a ``#RRGGBB`` colour."""


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int


def _primary(text: str, start: int) -> int:
    pair = text[start:start + 2]
    if len(pair) != 2 or not all(c in _HEX_DIGITS for c in pair):
        raise HexColorError(f"expected two hex digits at offset {start}")
    return int(pair, 16)


def parse_hex_color(text: str) -> tuple[Color, str]:
    """Parse a leading ``#RRGGBB``; return the colour and the remaining text."""
    if not text.startswith("#"):
        raise HexColorError("expected '#' at offset 0")
    red, green, blue = (_primary(text, offset) for offset in (1, 3, 5))
    return Color(red, green, blue), text[7:]