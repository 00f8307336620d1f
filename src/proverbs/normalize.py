from __future__ import annotations
import re
import unicodedata
from typing import List, Optional

# Berber Latin letters folded to their plain ASCII letter before decomposition.
SPECIAL_LETTERS: dict[str, str] = {
    "ǧ": "g",
    "č": "c",
    "ṣ": "s",
    "ṭ": "t",
    "ẓ": "z",
}

# Combining Diacritical Marks block (U+0300..U+036F)
COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")

_SPECIAL = re.compile("[" + "".join(SPECIAL_LETTERS) + "]")

# Surrounding whitespace, BOM included
_EDGES = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def normalize(text: Optional[str]) -> str:
    """
    Canonical search key for a piece of text.
    Rules, in order:
      * empty / None -> ""
      * lowercase
      * fold SPECIAL_LETTERS (must happen before NFD)
      * NFD, then drop COMBINING_MARKS
      * trim surrounding whitespace and U+FEFF
    """
    if not text:
        return ""
    s = text.lower()
    s = _SPECIAL.sub(lambda m: SPECIAL_LETTERS[m.group(0)], s)
    s = unicodedata.normalize("NFD", s)
    s = COMBINING_MARKS.sub("", s)
    return _EDGES.sub("", s)


def keywords(text: Optional[str]) -> List[str]:
    """Normalized, whitespace-split, de-duplicated search terms (first occurrence wins)."""
    seen: dict[str, None] = {}
    for tok in normalize(text).split():
        seen.setdefault(tok, None)
    return list(seen)
