from __future__ import annotations
import gzip
from pathlib import Path
from typing import Any, List, Optional
import yaml
from ..errors import ParseError
from ..parse_obj import NewsFeed, NewsItem
from ..identifiers import IDS
from ..utils import clean_text


def _load(path: str) -> Any:
    try:
        if str(path).endswith(".gz"):
            with gzip.open(path, "rt", encoding="utf-8") as fh:
                return yaml.safe_load(fh)
        with open(path, "rt", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML: {e}", path=path, cause=e) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"Feed is not UTF-8 text: {e}", path=path, cause=e) from e
    except OSError as e:
        # gzip.BadGzipFile is an OSError
        raise ParseError(f"Failed to read feed: {e}", path=path, cause=e) from e


def _keywords(raw: Any, pos: int, path: str) -> Optional[tuple]:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ParseError("keywords must be a list", path=path, item=pos)
    out = []
    for kw in raw:
        if kw is None or isinstance(kw, (list, dict)):
            raise ParseError(f"keyword {kw!r} is not a scalar", path=path, item=pos)
        # YAML turns bare 2010 or yes into int/bool; keywords are always text
        out.append(str(kw))
    return tuple(out)


def _item(raw: Any, pos: int, path: str) -> NewsItem:
    if raw is None or isinstance(raw, list):
        return NewsItem(keywords=_keywords(raw, pos, path))
    if isinstance(raw, dict):
        return NewsItem(
            keywords=_keywords(raw.get(IDS.col.keywords), pos, path),
            headline=clean_text(raw.get(IDS.col.headline)),
            source=clean_text(raw.get(IDS.col.source)),
        )
    raise ParseError(
        f"expected a keyword list, mapping or null, got {type(raw).__name__}",
        path=path,
        item=pos,
    )


def parse_news_yaml(path: str, *, name: Optional[str] = None) -> NewsFeed:
    doc = _load(path)
    feed_name = name or Path(str(path)).name.split(".")[0] or IDS.default.feed_name

    if isinstance(doc, dict):
        if "items" not in doc:
            raise ParseError("Feed mapping has no 'items' key", path=path)
        feed_name = name or clean_text(doc.get("name")) or feed_name
        raw_items = doc["items"]
    else:
        raw_items = doc

    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise ParseError("Feed items must be a list", path=path)

    items: List[NewsItem] = [_item(r, i, path) for i, r in enumerate(raw_items)]
    return NewsFeed(name=feed_name, items=items)
