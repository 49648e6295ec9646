"""
GTIN value type plus the length classifier and the digit normalizer.

GTINs come in 8, 12, 13 or 14 digits (GTIN-8, GTIN-12, GTIN-13, GTIN-14).
All of them fit in 14 digits once zero-padded on the left, so every parsed
GTIN is stored that way: index 0 is the most significant digit and index 13
is the check digit.
"""
from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from gtinmini.errors import InvalidDigit, InvalidLength

logger = logging.getLogger(__name__)

GTIN_LENGTH = 14
ISBN_X = 10  # value stored for the ISBN 'X' check character


class GtinKind(str, Enum):
    GTIN8 = "GTIN-8"
    GTIN12 = "GTIN-12"
    GTIN13 = "GTIN-13"
    GTIN14 = "GTIN-14"


_KIND_BY_LENGTH = {
    8: GtinKind.GTIN8,
    12: GtinKind.GTIN12,
    13: GtinKind.GTIN13,
    14: GtinKind.GTIN14,
}


class Gtin(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: GtinKind
    digits: tuple[int, ...]

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if len(v) != GTIN_LENGTH:
            raise ValueError(f"GTIN needs exactly {GTIN_LENGTH} digits, got {len(v)}.")
        if any(d < 0 or d > ISBN_X for d in v):
            raise ValueError("GTIN digits must be in the range 0-10.")
        return v

    def __str__(self) -> str:
        return to_string(self)


def classify_type(s: str) -> GtinKind:
    """Map the input length to a GTIN kind. Content is not inspected."""
    try:
        return _KIND_BY_LENGTH[len(s)]
    except KeyError:
        raise InvalidLength(len(s)) from None


def _digit_value(ch: str, pos: int) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if ch == "X":
        # ISBN check character
        return ISBN_X
    raise InvalidDigit(ch, pos)


def normalize(s: str) -> Gtin:
    """Right-align `s` into 14 digits, zero-padding on the left."""
    try:
        kind = classify_type(s)
        values = [_digit_value(ch, pos) for pos, ch in enumerate(s)]
    except (InvalidLength, InvalidDigit) as e:
        logger.debug("rejected GTIN input %r: %s", s, e)
        raise
    digits = (0,) * (GTIN_LENGTH - len(values)) + tuple(values)
    return Gtin(kind=kind, digits=digits)


def to_string(g: Gtin) -> str:
    """Canonical 14-character form; digit 10 renders as 'X'."""
    return "".join("X" if d == ISBN_X else str(d) for d in g.digits)
