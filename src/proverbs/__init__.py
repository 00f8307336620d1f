"""Searchable, paginated proverb collection with diacritic-insensitive matching."""
from .engine import Engine
from .errors import LoadError, ProverbsError
from .loader import build_proverbs, load_proverbs
from .models import Proverb, ProverbSet, Query, SearchResult
from .normalize import COMBINING_MARKS, SPECIAL_LETTERS, keywords, normalize
from .search import run_query

__all__ = [
    "Engine",
    "LoadError",
    "ProverbsError",
    "build_proverbs",
    "load_proverbs",
    "Proverb",
    "ProverbSet",
    "Query",
    "SearchResult",
    "COMBINING_MARKS",
    "SPECIAL_LETTERS",
    "keywords",
    "normalize",
    "run_query",
]
