# gtinmini/report.py
from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from gtinmini.carrier import Carrier, carrier_of
from gtinmini.config import resolve_cfg
from gtinmini.errors import GtinError, RestrictedPrefix
from gtinmini.gtin import GtinKind, normalize, to_string
from gtinmini.validators import check_prefix, clean_gtin, complete_gtin, is_valid_check_digit

logger = logging.getLogger(__name__)


class GtinReport(BaseModel):
    raw: str
    canonical: str | None = None
    kind: GtinKind | None = None
    valid: bool = False
    legal: bool = False
    carrier: Carrier | None = None
    prefix_reason: str | None = None
    error: str | None = None


def inspect_gtin(raw: str, cfg: dict[str, Any] | None = None) -> GtinReport:
    """
    Run every check on `raw` and collect the outcomes instead of raising.

    `valid` (check digit) and `legal` (GS1 prefix) are reported independently;
    `error` is only set when the input cannot be parsed at all.
    """
    cfg = resolve_cfg(cfg)
    s = str(raw)
    if cfg["strip_separators"]:
        s = clean_gtin(s)
    if cfg["auto_fix_gtin"]:
        fixed = complete_gtin(s)
        if fixed:
            s = fixed

    try:
        g = normalize(s)
    except GtinError as e:
        return GtinReport(raw=str(raw), error=str(e))

    reason = None
    try:
        check_prefix(g)
    except RestrictedPrefix as e:
        reason = e.reason

    report = GtinReport(
        raw=str(raw),
        canonical=to_string(g),
        kind=g.kind,
        valid=is_valid_check_digit(g),
        legal=reason is None,
        carrier=carrier_of(g),
        prefix_reason=reason,
    )
    logger.debug("inspected %r -> %s", raw, report)
    return report
