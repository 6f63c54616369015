from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, Tuple
import pandas as pd


@dataclass
class TrendResult:
    """Keywords grouped into trends by co-occurrence.

    Attributes:
        groups (dict[int, list[str]]): Trend id -> member keywords. Ids are
            handed out in the order the trends were discovered.
        keyword_to_gid (dict[str, int]): Reverse lookup from keyword to its
            trend id.
    """

    groups: Dict[int, List[str]]
    keyword_to_gid: Dict[str, int]

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[Tuple[int, List[str]]]:
        """Iterate over trends: (gid, keywords)."""
        for gid, keywords in self.groups.items():
            yield gid, keywords

    def gid_of(self, keyword: str) -> Optional[int]:
        """Return the trend id containing the keyword, if present."""
        return self.keyword_to_gid.get(keyword)

    def members(self, gid: int) -> List[str]:
        return self.groups.get(gid, [])

    def trend_of(self, keyword: str) -> List[str]:
        """Return every keyword sharing a trend with ``keyword``.

        Args:
            keyword: Keyword to look up. Matching is exact.

        Returns:
            list[str]: The full trend, including ``keyword`` itself, or an
            empty list when the keyword was never seen.
        """
        gid = self.gid_of(keyword)
        if gid is None:
            return []
        return self.members(gid)

    def same_trend(self, a: str, b: str) -> bool:
        ga = self.gid_of(a)
        return ga is not None and ga == self.gid_of(b)

    def singletons(self) -> Set[int]:
        """Return trend ids holding a single keyword.

        These are keywords that never co-occurred with any other keyword.
        """
        return {gid for gid, keywords in self.groups.items() if len(keywords) == 1}

    def largest(self) -> Optional[int]:
        """Return the id of the biggest trend; the first discovered wins ties."""
        best = None
        for gid, keywords in self.groups.items():
            if best is None or len(keywords) > len(self.groups[best]):
                best = gid
        return best

    def as_lists(self) -> List[List[str]]:
        return [list(keywords) for keywords in self.groups.values()]

    def to_frame(self) -> pd.DataFrame:
        """Flatten trends into a DataFrame with columns [gid, keyword, trend_size]."""
        rows = [
            {"gid": gid, "keyword": kw, "trend_size": len(keywords)}
            for gid, keywords in self.groups.items()
            for kw in keywords
        ]
        return pd.DataFrame(rows, columns=["gid", "keyword", "trend_size"])
