from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class NewsItem:
    keywords: Optional[Tuple[str, ...]]
    headline: Optional[str] = None
    source: Optional[str] = None

    @property
    def is_absent(self) -> bool:
        return self.keywords is None


@dataclass(frozen=True, slots=True)
class NewsFeed:
    """
    Minimal container for parsed news items.

    - name: label of the feed, usually taken from the file
    - items: one NewsItem per article, in file order; an item whose
      keywords are None is absent and is skipped by the clusterer
    """
    name: str
    items: List[NewsItem] = field(default_factory=list)

    def __post_init__(self):
        items = object.__getattribute__(self, "items")
        if not isinstance(items, list):
            raise ValueError("items must be a list of NewsItem")
        for it in items:
            if not isinstance(it, NewsItem):
                raise ValueError(f"Expected NewsItem, got {type(it).__name__}")

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[NewsItem]:
        return iter(self.items)

    def keyword_lists(self) -> List[Optional[List[str]]]:
        return [None if it.is_absent else list(it.keywords) for it in self.items]

    def keywords(self) -> List[str]:
        """Distinct keywords across the feed, in first-seen order."""
        seen = {}
        for it in self.items:
            for kw in it.keywords or ():
                seen.setdefault(kw, None)
        return list(seen)
