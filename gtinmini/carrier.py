# gtinmini/carrier.py
from __future__ import annotations

from enum import Enum

from gtinmini.gtin import Gtin


class Carrier(str, Enum):
    ITF14 = "ITF-14"
    EAN13 = "EAN-13"
    UPCA = "UPC-A"
    EAN8 = "EAN-8"
    UNKNOWN = "UNKNOWN"


# leading zeros -> symbology; anything missing here is UNKNOWN
_CARRIER_BY_ZEROES = {
    0: Carrier.ITF14,
    1: Carrier.EAN13,
    2: Carrier.UPCA,
    3: Carrier.UPCA,
    4: Carrier.UPCA,
    6: Carrier.EAN8,
}


def leading_zeroes(g: Gtin) -> int:
    n = 0
    for d in g.digits:
        if d != 0:
            break
        n += 1
    return n


def carrier_of(g: Gtin) -> Carrier:
    """Guess the barcode symbology from how deep the zero padding goes."""
    return _CARRIER_BY_ZEROES.get(leading_zeroes(g), Carrier.UNKNOWN)
