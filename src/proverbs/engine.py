# proverbs/engine.py
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from . import config as CFG
from .loader import build_proverbs, load_proverbs
from .models import ProverbSet, Query, SearchResult
from .search import distinct_themes, run_query

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer around one frozen ProverbSet:
      - load(path):     read JSON -> annotate -> freeze
      - build(records): same, from records already in memory
      - query(...):     keyword filter -> theme filter -> page
      - themes(), count()
      - shutdown():     drop the loaded set

    The set is never mutated once loaded, so one Engine can serve
    concurrent callers without locking.
    """

    # ------------- lifecycle -------------

    def __init__(self, proverbs: Optional[ProverbSet] = None) -> None:
        self.proverbs: Optional[ProverbSet] = proverbs

    # /* ~~~ Load the raw collection from disk and freeze it ~~~ */
    def load(self, path: Optional[str] = None, *, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
        self.proverbs = load_proverbs(path)
        log.info("Engine load() complete: proverbs=%d", len(self.proverbs))

    # /* ~~~ Same as load(), for records that are already parsed ~~~ */
    def build(self, records: Iterable[Mapping[str, Any]], *, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
        self.proverbs = build_proverbs(records)
        log.info("Engine build() complete: proverbs=%d", len(self.proverbs))

    # ------------- query -------------

    def _require(self) -> ProverbSet:
        if self.proverbs is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        return self.proverbs

    def query(
        self,
        search: Optional[str] = None,
        theme: Optional[str] = None,
        page: object = None,
        limit: object = None,
    ) -> SearchResult:
        """Run a search from raw request values (page/limit may be strings)."""
        q = Query.from_params(search=search, theme=theme, page=page, limit=limit)
        return self.run(q)

    def run(self, q: Query) -> SearchResult:
        result = run_query(self._require(), q)
        log.debug("query search=%r theme=%r page=%d limit=%d -> %d",
                  q.search, q.theme, q.page, q.limit, result.total_results)
        return result

    def themes(self) -> List[str]:
        return distinct_themes(self._require())

    def count(self) -> int:
        return len(self.proverbs) if self.proverbs is not None else 0

    @property
    def ready(self) -> bool:
        return self.proverbs is not None

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.proverbs = None
        log.info("Engine shutdown complete")
