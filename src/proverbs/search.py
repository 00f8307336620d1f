from __future__ import annotations
import re
import sys
from typing import List, Optional, Sequence

from . import config as CFG
from .models import Proverb, ProverbSet, Query, SearchResult
from .normalize import keywords, normalize

# Leading, optionally signed ASCII integer prefix: "12abc" -> 12, " 3" -> 3, "2.7" -> 2
_INT_PREFIX = re.compile(r"\s*([+-]?)([0-9]+)")

# Longer digit runs saturate instead of hitting int()'s digit limit
_MAX_DIGITS = 18


def parse_page_param(value: object, default: int) -> int:
    """
    Coerce a page/limit request value to int.
    None or "" -> default; no integer prefix -> 0; huge values saturate
    to +/- sys.maxsize. Never raises.
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value
    s = str(value)
    if s == "":
        return default
    m = _INT_PREFIX.match(s)
    if not m:
        return 0
    sign, digits = m.groups()
    digits = digits.lstrip("0") or "0"
    n = sys.maxsize if len(digits) > _MAX_DIGITS else int(digits)
    return -n if sign == "-" else n


def is_all_themes(theme: Optional[str]) -> bool:
    return not theme or theme in CFG.ALL_THEMES


# ---------- filters ----------

def filter_keywords(proverbs: Sequence[Proverb], search: Optional[str]) -> List[Proverb]:
    """AND across keywords; each one must be a substring of the record's haystack."""
    terms = keywords(search)
    if not terms:
        return list(proverbs)
    return [p for p in proverbs if all(t in p.haystack for t in terms)]


def filter_theme(proverbs: Sequence[Proverb], theme: Optional[str]) -> List[Proverb]:
    """Substring containment on the normalized theme, not equality."""
    if is_all_themes(theme):
        return list(proverbs)
    needle = normalize(theme)
    return [p for p in proverbs if needle in p.theme_norm]


def paginate(items: Sequence[Proverb], page: int, limit: int) -> tuple[Proverb, ...]:
    # /* ~~~ clamp both bounds into [0, n] so negative values give an empty page, not wrap-around ~~~ */
    n = len(items)
    start = page * limit
    end = start + limit
    start = min(max(start, 0), n)
    end = min(max(end, 0), n)
    return tuple(items[start:end])


# ---------- query ----------

def run_query(proverbs: ProverbSet, q: Query) -> SearchResult:
    """
    keyword filter -> theme filter -> page slice.
    `proverbs` is read-only here; every step works on a derived list.
    Precondition: q.page / q.limit are ints (see Query.from_params).
    """
    results: Sequence[Proverb] = proverbs.proverbs
    if q.search:
        results = filter_keywords(results, q.search)
    if not is_all_themes(q.theme):
        results = filter_theme(results, q.theme)

    return SearchResult(
        total_results=len(results),
        current_page=q.page,
        proverbs=paginate(results, q.page, q.limit),
    )


def distinct_themes(proverbs: ProverbSet) -> List[str]:
    """Raw theme labels in first-seen order, de-duplicated by normalized form."""
    seen: dict[str, str] = {}
    for p in proverbs:
        if p.theme_norm and p.theme_norm not in seen:
            seen[p.theme_norm] = p.theme
    return list(seen.values())
