from __future__ import annotations
import gzip
from pathlib import Path
from typing import Dict, List, Optional
import pandas as pd
from ..errors import ParseError
from ..parse_obj import NewsFeed, NewsItem
from ..identifiers import IDS
from ..utils import clean_text, split_keywords


COL_ITEM = IDS.col.item_id
COL_KEYWORDS = IDS.col.keywords
COL_KEYWORD = IDS.col.keyword
COL_HEADLINE = IDS.col.headline
COL_SOURCE = IDS.col.source

HEADER_ALIASES: Dict[str, str] = {
    "item_id": COL_ITEM,
    "itemid": COL_ITEM,
    "article_id": COL_ITEM,
    "articleid": COL_ITEM,
    "keywords": COL_KEYWORDS,
    "tags": COL_KEYWORDS,
    "topics": COL_KEYWORDS,
    "keyword": COL_KEYWORD,
    "tag": COL_KEYWORD,
    "topic": COL_KEYWORD,
    "headline": COL_HEADLINE,
    "title": COL_HEADLINE,
    "source": COL_SOURCE,
    "feed": COL_SOURCE,
}


def _read_table(path: str, sep: str) -> pd.DataFrame:
    try:
        if str(path).endswith(".gz"):
            with gzip.open(path, "rt", encoding="utf-8") as fh:
                return pd.read_csv(fh, sep=sep, dtype=str, keep_default_na=False, na_values=[""])
        with open(path, "rt", encoding="utf-8") as fh:
            return pd.read_csv(fh, sep=sep, dtype=str, keep_default_na=False, na_values=[""])
    except pd.errors.EmptyDataError as e:
        raise ParseError("News table is empty", path=path, cause=e) from e
    except Exception as e:
        raise ParseError(f"Failed to read table: {e}", path=path, cause=e) from e


def _normalize_headers(df: pd.DataFrame) -> pd.DataFrame:
    cols = []
    for c in df.columns:
        key = str(c).strip()
        lc = key.lower().replace(" ", "_").replace("-", "_")
        cols.append(HEADER_ALIASES.get(lc, HEADER_ALIASES.get(lc.replace("_", ""), key)))
    out = df.copy()
    out.columns = cols
    return out


def _row_meta(row: pd.Series) -> Dict[str, Optional[str]]:
    return {
        "headline": clean_text(row.get(COL_HEADLINE)),
        "source": clean_text(row.get(COL_SOURCE)),
    }


def _items_wide(df: pd.DataFrame, keyword_sep: str) -> List[NewsItem]:
    items: List[NewsItem] = []
    for _, row in df.iterrows():
        keywords = split_keywords(row.get(COL_KEYWORDS), keyword_sep)
        items.append(
            NewsItem(
                keywords=tuple(keywords) if keywords is not None else None,
                **_row_meta(row),
            )
        )
    return items


def _items_long(df: pd.DataFrame, keyword_sep: str) -> List[NewsItem]:
    kw_col = COL_KEYWORD if COL_KEYWORD in df.columns else COL_KEYWORDS
    order: List[str] = []
    keywords: Dict[str, List[str]] = {}
    meta: Dict[str, Dict[str, Optional[str]]] = {}

    for _, row in df.iterrows():
        item_id = clean_text(row.get(COL_ITEM))
        if item_id is None:
            continue
        if item_id not in keywords:
            order.append(item_id)
            keywords[item_id] = []
            meta[item_id] = _row_meta(row)
        found = split_keywords(row.get(kw_col), keyword_sep) or []
        keywords[item_id].extend(found)

    return [
        NewsItem(
            keywords=tuple(keywords[i]) if keywords[i] else None,
            **meta[i],
        )
        for i in order
    ]


def parse_news_table(
    path: str,
    *,
    sep: str = IDS.default.sep,
    keyword_sep: str = IDS.default.keyword_sep,
    name: Optional[str] = None,
) -> NewsFeed:
    raw = _read_table(path, sep=sep)
    if raw.empty:
        raise ParseError("News table is empty", path=path)
    df = _normalize_headers(raw)

    if COL_ITEM in df.columns:
        if COL_KEYWORD not in df.columns and COL_KEYWORDS not in df.columns:
            raise ParseError(
                f"Missing required column '{COL_KEYWORD}' for long-form table",
                path=path,
            )
        items = _items_long(df, keyword_sep)
    else:
        if COL_KEYWORDS not in df.columns:
            raise ParseError(f"Missing required column '{COL_KEYWORDS}'", path=path)
        items = _items_wide(df, keyword_sep)

    feed_name = name or Path(str(path)).name.split(".")[0] or IDS.default.feed_name
    return NewsFeed(name=feed_name, items=items)
