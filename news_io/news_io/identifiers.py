from __future__ import annotations
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class _Column:
    item_id: Final[str] = "item_id"
    keywords: Final[str] = "keywords"
    keyword: Final[str] = "keyword"
    headline: Final[str] = "headline"
    source: Final[str] = "source"


@dataclass(frozen=True, slots=True)
class _Format:
    table: Final[str] = "table"
    csv: Final[str] = "csv"
    yaml: Final[str] = "yaml"
    parquet: Final[str] = "parquet"


@dataclass(frozen=True, slots=True)
class _Default:
    sep: Final[str] = "\t"
    keyword_sep: Final[str] = ";"
    feed_name: Final[str] = "news"


@dataclass(frozen=True, slots=True)
class Identifiers:
    """Dot-access constants. No runtime cost, no typos."""
    col: _Column = _Column()
    fmt: _Format = _Format()
    default: _Default = _Default()


IDS = Identifiers()
