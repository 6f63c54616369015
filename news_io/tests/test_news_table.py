import gzip
import shutil
import sys
import unittest
import tempfile
from pathlib import Path
import pandas as pd

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from news_io.news_io.parsers.table import parse_news_table
from news_io.news_io.errors import ParseError


def write_tsv(df: pd.DataFrame, path: Path, sep="\t", index=False):
    df.to_csv(path, sep=sep, index=index)


def write_tsv_gz(df: pd.DataFrame, path: Path, sep="\t", index=False):
    with gzip.open(path, "wt", encoding="utf-8") as fh:
        df.to_csv(fh, sep=sep, index=index)


class TestNewsTable(unittest.TestCase):
    def setUp(self):
        self.tmp = Path(tempfile.mkdtemp(prefix="news_ut_"))
        self.wide_df = pd.DataFrame(
            {
                "Title": ["Spain wins", "Shakira sings", "No tags here", "Yankees again"],
                "Tags": [
                    "Spanish Soccer Team; World Cup ;South Africa",
                    "World Cup;Shakira",
                    "",
                    "Yankees",
                ],
                "Feed": ["bbc", "bbc", "cnn", "espn"],
            }
        )
        self.long_df = pd.DataFrame(
            {
                "Article ID": ["a1", "a1", "a2", "a2", "a3"],
                "Keyword": ["Yankees", "World series", "Derek Jeter", "Yankees", "Concert"],
            }
        )

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def test_wide_table(self):
        p = self.tmp / "wide.tsv"
        write_tsv(self.wide_df, p)
        feed = parse_news_table(str(p))

        self.assertEqual(feed.name, "wide")
        self.assertEqual(len(feed), 4)
        first = feed.items[0]
        self.assertEqual(first.keywords, ("Spanish Soccer Team", "World Cup", "South Africa"))
        self.assertEqual(first.headline, "Spain wins")
        self.assertEqual(first.source, "bbc")
        self.assertTrue(feed.items[2].is_absent)
        self.assertEqual(feed.keyword_lists()[2], None)
        self.assertEqual(feed.keyword_lists()[3], ["Yankees"])

    def test_inner_whitespace_is_kept(self):
        p = self.tmp / "wide.tsv"
        write_tsv(self.wide_df, p)
        feed = parse_news_table(str(p))
        self.assertIn("Spanish Soccer Team", feed.keywords())
        self.assertEqual(
            feed.keywords(),
            ["Spanish Soccer Team", "World Cup", "South Africa", "Shakira", "Yankees"],
        )

    def test_csv_and_gzip(self):
        p = self.tmp / "wide.csv.gz"
        write_tsv_gz(self.wide_df, p, sep=",")
        feed = parse_news_table(str(p), sep=",", name="wire")
        self.assertEqual(feed.name, "wire")
        self.assertEqual(feed.items[1].keywords, ("World Cup", "Shakira"))

    def test_custom_keyword_separator(self):
        df = pd.DataFrame({"keywords": ["A|B", "C"]})
        p = self.tmp / "pipe.tsv"
        write_tsv(df, p)
        feed = parse_news_table(str(p), keyword_sep="|")
        self.assertEqual(feed.keyword_lists(), [["A", "B"], ["C"]])

    def test_long_table_groups_by_item(self):
        p = self.tmp / "long.tsv"
        write_tsv(self.long_df, p)
        feed = parse_news_table(str(p))
        self.assertEqual(
            feed.keyword_lists(),
            [["Yankees", "World series"], ["Derek Jeter", "Yankees"], ["Concert"]],
        )

    def test_na_like_keywords_stay_text(self):
        df = pd.DataFrame({"keywords": ["NA;None", "null"]})
        p = self.tmp / "na.tsv"
        write_tsv(df, p)
        feed = parse_news_table(str(p))
        self.assertEqual(feed.keyword_lists(), [["NA", "None"], ["null"]])

    def test_missing_keyword_column(self):
        df = pd.DataFrame({"headline": ["x"], "body": ["y"]})
        p = self.tmp / "bad.tsv"
        write_tsv(df, p)
        with self.assertRaises(ParseError) as ctx:
            parse_news_table(str(p))
        self.assertEqual(ctx.exception.path, str(p))
        self.assertIn("keywords", str(ctx.exception))

    def test_long_table_without_keyword_column(self):
        df = pd.DataFrame({"item_id": ["1"], "headline": ["x"]})
        p = self.tmp / "bad_long.tsv"
        write_tsv(df, p)
        with self.assertRaises(ParseError):
            parse_news_table(str(p))

    def test_empty_table(self):
        p = self.tmp / "empty.tsv"
        p.write_text("keywords\n", encoding="utf-8")
        with self.assertRaises(ParseError):
            parse_news_table(str(p))
        blank = self.tmp / "blank.tsv"
        blank.write_text("", encoding="utf-8")
        with self.assertRaises(ParseError):
            parse_news_table(str(blank))

    def test_missing_file(self):
        with self.assertRaises(ParseError) as ctx:
            parse_news_table(str(self.tmp / "nope.tsv"))
        self.assertIsInstance(ctx.exception.cause, FileNotFoundError)


if __name__ == "__main__":
    unittest.main(verbosity=2)
