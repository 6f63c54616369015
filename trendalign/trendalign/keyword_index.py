from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

Item = Optional[Sequence[str]]


@dataclass
class KeywordIndex:
    """Deduplicated keyword universe with a dense index per keyword.

    Attributes:
        keywords (list[str]): Keyword at each index, ``0..N-1``.
        index (dict[str, int]): Reverse lookup, keyword -> index.
    """

    keywords: List[str] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.keywords)

    def __contains__(self, keyword) -> bool:
        return keyword in self.index

    def add(self, keyword: str) -> int:
        i = self.index.get(keyword)
        if i is None:
            i = len(self.keywords)
            self.index[keyword] = i
            self.keywords.append(keyword)
        return i

    def index_of(self, keyword: str) -> int:
        return self.index[keyword]

    def keyword_at(self, i: int) -> str:
        return self.keywords[i]


def iter_present(items: Iterable[Item]) -> Iterator[Sequence[str]]:
    for item in items:
        if item is not None:
            yield item


def build_keyword_index(items: Iterable[Item]) -> KeywordIndex:
    """Collect every distinct keyword across the non-absent items.

    Indices are handed out in first-seen order, so the same input always
    produces the same index.
    """
    kw_index = KeywordIndex()
    for item in iter_present(items):
        for keyword in item:
            kw_index.add(keyword)
    return kw_index
