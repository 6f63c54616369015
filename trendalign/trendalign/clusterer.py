from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from .errors import ClusterError
from .keyword_index import Item, KeywordIndex, build_keyword_index, iter_present
from .trend_data import TrendResult
from .union_find import DisjointSetForest

logger = logging.getLogger(__name__)


# ---------------- Stage 1: validate input ----------------
def collect_items(news_items: Optional[Iterable[Item]]) -> List[Item]:
    if news_items is None:
        raise ClusterError("News item collection must not be None", argument="news_items")
    if isinstance(news_items, str):
        raise ClusterError("Expected a collection of keyword lists, got a string", argument="news_items")

    items: List[Item] = []
    for pos, item in enumerate(news_items):
        if item is None:
            items.append(None)
            continue
        if isinstance(item, str):
            raise ClusterError(
                f"Item {pos} is a bare string, expected a sequence of keywords",
                argument="news_items",
            )
        # items are read twice, so one-shot iterators and sets become tuples
        try:
            items.append(tuple(item))
        except TypeError as e:
            raise ClusterError(
                f"Item {pos} is not a collection of keywords: {type(item).__name__}",
                argument="news_items",
            ) from e

    skipped = sum(1 for item in items if item is None)
    if skipped:
        logger.debug("Skipping %d absent news items", skipped)
    return items


# ---------------- Stage 2: union-find build ----------------
def build_forest(items: Sequence[Item], kw_index: KeywordIndex) -> DisjointSetForest:
    forest = DisjointSetForest(len(kw_index))
    for item in iter_present(items):
        if len(item) < 2:
            continue
        first = kw_index.index_of(item[0])
        for keyword in item[1:]:
            forest.union(kw_index.index_of(keyword), first)
    return forest


# ---------------- Stage 3: materialize ----------------
def materialize_trends(forest: DisjointSetForest, kw_index: KeywordIndex) -> TrendResult:
    roots: Dict[int, int] = {}
    groups: Dict[int, List[str]] = {}
    keyword_to_gid: Dict[str, int] = {}

    for i in range(len(forest)):
        r = forest.find(i)
        gid = roots.get(r)
        if gid is None:
            gid = roots[r] = len(roots)
            groups[gid] = []
        keyword = kw_index.keyword_at(i)
        groups[gid].append(keyword)
        keyword_to_gid[keyword] = gid

    return TrendResult(groups=groups, keyword_to_gid=keyword_to_gid)


def cluster_news(news_items: Optional[Iterable[Item]]) -> TrendResult:
    """Group keywords that co-occur on a news item, transitively.

    Args:
        news_items: Keyword lists, one per news item. Individual entries may
            be None and are skipped.

    Returns:
        TrendResult: One group per connected set of keywords.

    Raises:
        ClusterError: If ``news_items`` itself is None.
    """
    items = collect_items(news_items)
    kw_index = build_keyword_index(items)
    forest = build_forest(items, kw_index)
    result = materialize_trends(forest, kw_index)
    logger.debug(
        "Clustered %d keywords from %d items into %d trends",
        len(kw_index), len(items), forest.component_count,
    )
    return result


def process_news(news_items: Optional[Iterable[Item]]) -> List[List[str]]:
    """Return the de-duplicated keywords of ``news_items`` grouped by trend."""
    return cluster_news(news_items).as_lists()
