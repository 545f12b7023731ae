"""Province-name resolution.

Guide and provider records carry free-form issuing places ("Tỉnh Thừa Thiên
Huế", "TP. Hồ Chí Minh", "Quảng Nam - cũ").  :func:`resolve_province_name`
maps such text onto one entry of the canonical province list.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Sequence

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9\s]")
_PREFIXES = re.compile(r"^(tinh|thanh pho)\s+")
_QUALIFIER_SPLIT = re.compile(r"[-,()]")


def normalize_province(value: str) -> str:
    """Strip diacritics and punctuation, lowercase, and trim *value*.

    ``đ``/``Đ`` have no decomposition and are dropped along with other
    non-ASCII letters; both sides of a comparison go through this so the
    loss is symmetric.
    """
    decomposed = unicodedata.normalize("NFD", value)
    stripped = _NON_ALNUM.sub("", _COMBINING_MARKS.sub("", decomposed))
    return stripped.lower().strip()


def _candidate(raw: str) -> str:
    head = _QUALIFIER_SPLIT.split(raw)[0]
    normalized = normalize_province(head if head.strip() else raw)
    return _PREFIXES.sub("", normalized).strip()


def resolve_province_name(raw: str, provinces: Sequence[str]) -> str:
    """Return the province in *provinces* that *raw* refers to.

    Qualifiers after ``-``, ``,`` or ``(`` are ignored.  An exact match on the
    normalised name wins; otherwise the first province whose name contains,
    or is contained in, the candidate.  Falls back to ``raw.strip()``.
    """
    if not raw:
        return ""
    if not provinces:
        return raw.strip()

    candidate = _candidate(raw)
    if not candidate:
        return raw.strip()
    normalized = [(name, normalize_province(name)) for name in provinces]

    for name, norm in normalized:
        if norm == candidate:
            return name

    for name, norm in normalized:
        if norm and (candidate in norm or norm in candidate):
            return name

    return raw.strip()
