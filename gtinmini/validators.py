# gtinmini/validators.py
from __future__ import annotations

import logging

from gtinmini.errors import CheckDigitMismatch, GtinError, RestrictedPrefix
from gtinmini.gtin import GTIN_LENGTH, Gtin, GtinKind, normalize

logger = logging.getLogger(__name__)

# https://www.gs1.org/services/how-calculate-check-digit-manually
WEIGHTS = (3, 1) * 6 + (3,)  # one per body digit of a 14-digit GTIN

RESTRICTED_PREFIX = "restricted prefix 02/04/2"
COUPON_PREFIX_98_99 = "coupon prefix 98-99"
COUPON_PREFIX_05 = "coupon prefix 05"


def _is_ascii_digits(s: str) -> bool:
    return s.isascii() and s.isdigit()


def clean_gtin(s: str) -> str:
    """Keep only ASCII digits and the ISBN 'X'; trims spaces/dashes/etc."""
    return "".join(ch for ch in str(s).strip() if ch in "0123456789X")


def _expected_check_digit(body: tuple[int, ...] | list[int]) -> int:
    checksum = sum(d * w for d, w in zip(body, WEIGHTS))
    return (10 - (checksum % 10)) % 10


def gtin_check_digit(body: str) -> int:
    """Check digit for a GTIN body (the code without its last digit)."""
    if len(body) >= GTIN_LENGTH or not _is_ascii_digits(body):
        raise ValueError(f"GTIN body must be 1-13 decimal digits, got {body!r}.")
    padded = body.zfill(GTIN_LENGTH - 1)  # left pad keeps weights aligned right→left
    return _expected_check_digit([int(ch) for ch in padded])


def check_check_digit(g: Gtin) -> None:
    expected = _expected_check_digit(g.digits[: GTIN_LENGTH - 1])
    actual = g.digits[GTIN_LENGTH - 1]
    if actual != expected:
        raise CheckDigitMismatch(expected, actual)


def is_valid_check_digit(g: Gtin) -> bool:
    try:
        check_check_digit(g)
    except CheckDigitMismatch:
        return False
    return True


def check_prefix(g: Gtin) -> None:
    """Raise RestrictedPrefix when the GS1 prefix is reserved or a coupon range.

    Only GTIN-13 and GTIN-14 carry a GS1 prefix. In a GTIN-14 the first digit
    is the packaging/measure indicator, so the prefix starts one digit later.
    """
    if g.kind not in (GtinKind.GTIN13, GtinKind.GTIN14):
        return

    p = 1 if g.kind is GtinKind.GTIN14 else 0
    first, second = g.digits[p], g.digits[p + 1]

    if first == 2 or (first == 0 and 2 <= second <= 4):
        raise RestrictedPrefix(RESTRICTED_PREFIX)
    if first == 9 and second in (8, 9):
        raise RestrictedPrefix(COUPON_PREFIX_98_99)
    if first == 0 and second == 5:
        raise RestrictedPrefix(COUPON_PREFIX_05)


def is_legal_prefix(g: Gtin) -> bool:
    try:
        check_prefix(g)
    except RestrictedPrefix:
        return False
    return True


def gtin_is_valid(s: str) -> bool:
    """Clean, parse and checksum in one go; never raises."""
    try:
        check_check_digit(normalize(clean_gtin(s)))
    except GtinError as e:
        logger.debug("GTIN %r is not valid: %s", s, e)
        return False
    return True


def complete_gtin(s: str) -> str | None:
    """Append or repair the check digit when the input looks like a GTIN body."""
    s = clean_gtin(s)
    if gtin_is_valid(s):
        return s
    if _is_ascii_digits(s) and len(s) in (7, 11, 12, 13):  # bodies
        body = s if len(s) in (7, 11, 12) else s[:-1]
        return body + str(gtin_check_digit(body))
    return None
