import argparse
import copy
import logging
import sys
from pathlib import Path

import yaml

from news_io.news_io.errors import ParseError
from news_io.news_io.identifiers import IDS
from news_io.news_io.parse_obj import NewsFeed
from news_io.news_io.parsers.table import parse_news_table
from news_io.news_io.parsers.yaml_feed import parse_news_yaml
from trendalign.trendalign.clusterer import cluster_news
from trendalign.trendalign.trend_data import TrendResult

logger = logging.getLogger(__name__)

config_path = Path(__file__).parent / "config.yaml"

DEFAULT_CONFIG = {
    "INPUT": {"sep": IDS.default.sep, "keyword_sep": IDS.default.keyword_sep},
    "OUTPUT": {"sep": IDS.default.sep},
    "LOGGING": {"level": "INFO"},
}


def load_config(path=None) -> dict:
    path = Path(path) if path else config_path
    with open(path, "r") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(
            f"Config must be a mapping of sections, got {type(loaded).__name__} [file={path}]"
        )
    config = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in loaded.items():
        values = values or {}
        if not isinstance(values, dict):
            raise ValueError(
                f"Config section {section!r} must be a mapping, "
                f"got {type(values).__name__} [file={path}]"
            )
        config.setdefault(section, {}).update(values)
    return config


def _suffix(path) -> str:
    suffixes = [s.lower() for s in Path(str(path)).suffixes]
    if suffixes and suffixes[-1] == ".gz":
        suffixes = suffixes[:-1]
    return suffixes[-1] if suffixes else ""


class TrendReporter:
    def __init__(self, config=None):
        self._config = config if config is not None else load_config()
        self._input = self._config.get("INPUT", {})
        self._output = self._config.get("OUTPUT", {})

    def read(self, path) -> NewsFeed:
        suffix = _suffix(path)
        if suffix in (".yaml", ".yml"):
            return parse_news_yaml(str(path))
        sep = "," if suffix == ".csv" else self._input.get("sep", IDS.default.sep)
        return parse_news_table(
            str(path),
            sep=sep,
            keyword_sep=self._input.get("keyword_sep", IDS.default.keyword_sep),
        )

    def build(self, feed: NewsFeed) -> TrendResult:
        result = cluster_news(feed.keyword_lists())
        logger.info(
            "Feed %s: %d items, %d keywords, %d trends",
            feed.name, len(feed), len(result.keyword_to_gid), len(result),
        )
        return result

    def write(self, result: TrendResult, path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        frame = result.to_frame()
        suffix = _suffix(path)
        if suffix == "." + IDS.fmt.parquet:
            frame.to_parquet(path)
        else:
            sep = "," if suffix == ".csv" else self._output.get("sep", IDS.default.sep)
            frame.to_csv(path, sep=sep, index=False)
        logger.info("Wrote %d trends to %s", len(result), path)
        return path

    def run(self, input_path, output_path=None) -> TrendResult:
        result = self.build(self.read(input_path))
        if output_path is not None:
            self.write(result, output_path)
        return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Group news item keywords into co-occurrence trends."
    )
    parser.add_argument("input", help="News items as TSV/CSV table or YAML feed")
    parser.add_argument("-o", "--output", help="Write the trend table here")
    parser.add_argument("-c", "--config", help="Alternative config.yaml")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(
        level=str(config["LOGGING"].get("level", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result = TrendReporter(config).run(args.input, args.output)
    except ParseError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1

    if args.output is None:
        for gid, keywords in result:
            print(f"{gid}\t{', '.join(keywords)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
