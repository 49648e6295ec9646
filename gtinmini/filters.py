# gtinmini/filters.py
from __future__ import annotations

from typing import Any

import pandas as pd

from gtinmini.carrier import Carrier
from gtinmini.gtin import GtinKind
from gtinmini.report import inspect_gtin

_KINDS = {k.value for k in GtinKind}
_CARRIERS = {c.value for c in Carrier}


def _norm(s: str | None) -> str:
    return (s or "").strip()


def _as_text(v) -> str:
    if pd.isna(v):
        return ""
    if isinstance(v, float) and v.is_integer():
        return str(int(v))  # 8719076050360.0 from a float column
    return str(v)


def inspect_frame(
    df: pd.DataFrame,
    column: str = "gtin",
    cfg: dict[str, Any] | None = None,
) -> pd.DataFrame:
    """
    Return a copy of `df` with one report column per check, row-aligned.
    Read codes as text (e.g. pd.read_csv(..., dtype=str)); a numeric column
    has already lost its leading zeros, so GTIN-14s like 00614141000029 come
    back as the shorter kind.
    """
    res = df.copy()
    reports = [inspect_gtin(_as_text(v), cfg) for v in res[column]]

    res["canonical"] = [r.canonical for r in reports]
    res["kind"] = [r.kind.value if r.kind else None for r in reports]
    res["valid"] = [r.valid for r in reports]
    res["legal"] = [r.legal for r in reports]
    res["carrier"] = [r.carrier.value if r.carrier else None for r in reports]
    res["error"] = [r.error for r in reports]
    return res


def apply_filters(
    df: pd.DataFrame,
    kind: str | None = None,  # "GTIN-13"
    carrier: str | None = None,  # "EAN-13"
    valid_only: bool = False,
    legal_only: bool = False,
) -> tuple[pd.DataFrame, dict]:
    """
    Filter a frame produced by inspect_frame.
    Returns (filtered_df, warnings_dict).
    warnings_dict has keys 'kind' and/or 'carrier' when the name is unknown;
    an unknown name is ignored rather than matching nothing.
    """
    res = df.copy()
    warns: dict[str, str] = {}

    k = _norm(kind)
    if k:
        if k in _KINDS:
            res = res[res["kind"] == k]
        else:
            warns["kind"] = f"Unknown kind; use one of {sorted(_KINDS)}"

    c = _norm(carrier)
    if c:
        if c in _CARRIERS:
            res = res[res["carrier"] == c]
        else:
            warns["carrier"] = f"Unknown carrier; use one of {sorted(_CARRIERS)}"

    if valid_only:
        res = res[res["valid"].astype(bool)]
    if legal_only:
        res = res[res["legal"].astype(bool)]

    return res, warns
