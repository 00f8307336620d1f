from __future__ import annotations
import json
import logging
from typing import Any, Iterable, List, Mapping, Optional

from . import config as CFG
from .errors import LoadError
from .models import Proverb, ProverbSet
from .normalize import normalize

log = logging.getLogger(__name__)


def _field(raw: Mapping[str, Any], names: Iterable[str]) -> str:
    """First present field among `names`, as text. Missing/None -> ""."""
    for name in names:
        if name in raw and raw[name] is not None:
            value = raw[name]
            return value if isinstance(value, str) else str(value)
    return ""


def annotate(raw: Mapping[str, Any], pid: int) -> Proverb:
    """Attach id and normalized fields to one raw record."""
    source = _field(raw, CFG.SOURCE_FIELDS)
    translated = _field(raw, CFG.TRANSLATION_FIELDS)
    theme = _field(raw, CFG.THEME_FIELDS)
    return Proverb(
        id=pid,
        source_text=source,
        translated_text=translated,
        theme=theme,
        source_norm=normalize(source),
        translated_norm=normalize(translated),
        theme_norm=normalize(theme),
    )


def build_proverbs(records: Iterable[Mapping[str, Any]], *, path: Optional[str] = None) -> ProverbSet:
    """
    Annotate raw records in order and freeze them.
    id == position in `records`; every entry must be a JSON object.
    """
    out: List[Proverb] = []
    for i, raw in enumerate(records):
        if not isinstance(raw, Mapping):
            raise LoadError(f"entry {i} is not an object (got {type(raw).__name__})", path=path)
        out.append(annotate(raw, i))
    return ProverbSet(proverbs=tuple(out))


def load_proverbs(path: Optional[str] = None) -> ProverbSet:
    """Read a UTF-8 JSON array of proverb objects and build the frozen set."""
    path = path or CFG.DATA_PATH
    log.info("Loading proverbs from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise LoadError(f"cannot read collection ({e.strerror or e})", path=path) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}", path=path) from e

    if not isinstance(data, list):
        raise LoadError(f"expected a JSON array, got {type(data).__name__}", path=path)

    proverbs = build_proverbs(data, path=path)
    log.info("%d proverbs loaded and ready", len(proverbs))
    return proverbs
