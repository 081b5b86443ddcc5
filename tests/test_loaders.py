"""
Tests for the CSV and HTML fragment loaders.
"""

import io

import pytest

from predatory_journals.errors import MalformedRowError, TransportError
from predatory_journals.loaders import (
    DEFAULT_STRATEGY,
    clean_fragment,
    extract_fragments,
    parse_csv,
    process_csv_row,
)
from predatory_journals.models import JournalRecord
from predatory_journals.sources import ExtractionStrategy


class TestProcessCsvRow:
    """Test cases for the CSV column reordering."""

    def test_reorders_columns(self):
        record = process_csv_row(["http://pub.example", "Pub Name", "PN"])

        assert record == JournalRecord(name="Pub Name", abbreviation="PN", url="http://pub.example")

    def test_empty_abbreviation_kept(self):
        record = process_csv_row(["http://pub.example", "Pub Name", ""])

        assert record.abbreviation == ""

    @pytest.mark.parametrize("row", [[], ["http://pub.example"], ["a", "b"], ["a", "b", "c", "d"]])
    def test_wrong_column_count(self, row):
        with pytest.raises(MalformedRowError):
            process_csv_row(row, line_num=7)

    def test_malformed_row_is_transport_error(self):
        """Malformed rows abandon the source like any other transport failure."""
        with pytest.raises(TransportError, match="line 3"):
            process_csv_row(["only-one"], line_num=3)


class TestParseCsv:
    """Test cases for parse_csv()."""

    def test_single_row(self):
        records = list(parse_csv(io.StringIO("http://pub.example,Pub Name,PN\n")))

        assert records == [JournalRecord(name="Pub Name", abbreviation="PN", url="http://pub.example")]

    def test_first_row_is_data(self):
        """No header row is skipped."""
        records = list(parse_csv(io.StringIO("url,name,abbr\nhttp://a.example,A,AA\n")))

        assert [r.name for r in records] == ["name", "A"]

    def test_quoted_fields(self):
        text = 'http://a.example,"Journal of ""Things"", Part A",JTA\r\n'
        records = list(parse_csv(io.StringIO(text)))

        assert records[0].name == 'Journal of "Things", Part A'

    def test_quoted_field_spanning_lines(self):
        text = 'http://a.example,"Journal\nof Things",JT\n'
        records = list(parse_csv(io.StringIO(text)))

        assert records[0].name == "Journal\nof Things"

    def test_empty_stream(self):
        assert list(parse_csv(io.StringIO(""))) == []

    def test_rows_before_malformed_row_are_yielded(self):
        text = "http://a.example,A,AA\nhttp://b.example,B,BB\nbroken-row\nhttp://c.example,C,CC\n"
        parsed = []

        with pytest.raises(MalformedRowError) as exc_info:
            for record in parse_csv(io.StringIO(text)):
                parsed.append(record)

        assert [r.name for r in parsed] == ["A", "B"]
        assert exc_info.value.line_num == 3

    def test_blank_line_is_malformed(self):
        with pytest.raises(MalformedRowError):
            list(parse_csv(io.StringIO("http://a.example,A,AA\n\nhttp://b.example,B,BB\n")))

    def test_accepts_iterable_of_lines(self):
        records = list(parse_csv(["http://a.example,A,AA\r\n", "http://b.example,B,\r\n"]))

        assert [(r.name, r.abbreviation) for r in records] == [("A", "AA"), ("B", "")]


class TestExtractFragments:
    """Test cases for extract_fragments()."""

    def test_no_matches(self):
        assert extract_fragments(r"<li>.*?</li>", "<html><p>Nothing listed</p></html>") == []

    def test_matches_in_document_order(self):
        body = "<ul><li>one</li><li>two</li>\n<li>three</li></ul>"

        assert extract_fragments(r"<li>.*?</li>", body) == ["<li>one</li>", "<li>two</li>", "<li>three</li>"]

    def test_fragments_are_verbatim(self):
        body = '<tr><td><a href="http://x.example/?a=1&amp;b=2">X &amp; Y</a></td></tr>'

        assert extract_fragments(r"<tr>.*?</tr>", body) == [body]

    def test_elements_spanning_lines_are_not_matched(self):
        """The coarse pattern matches within a single line only."""
        body = "<li>first\nentry</li><li>second</li>"

        assert extract_fragments(r"<li>.*?</li>", body) == ["<li>second</li>"]

    def test_accepts_compiled_pattern(self):
        strategy = ExtractionStrategy(r"<tr>.*?</tr>")

        assert len(extract_fragments(strategy.element, "<tr>a</tr><tr>b</tr>")) == 2


class TestCleanFragment:
    """Test cases for clean_fragment()."""

    def test_name_url_and_abbreviation(self):
        fragment = '<li><a href="http://journal-one.example/">Journal One (J1)</a></li>'

        assert clean_fragment(fragment) == JournalRecord(
            name="Journal One (J1)", abbreviation="J1", url="http://journal-one.example/"
        )

    def test_missing_abbreviation(self):
        record = clean_fragment('<li><a href="http://x.example">Journal X</a></li>')

        assert record == JournalRecord(name="Journal X", abbreviation="", url="http://x.example")

    def test_abbreviation_with_space_is_ignored(self):
        record = clean_fragment('<li><a href="http://x.example">Journal of Things (J Th)</a></li>')

        assert record.abbreviation == ""

    def test_missing_name(self):
        assert clean_fragment('<li>See http://x.example" for details</li>') is None

    def test_missing_url(self):
        assert clean_fragment('<li><a href="/local/page">Local Journal (LJ)</a></li>') is None

    def test_missing_both(self):
        assert clean_fragment("<li>Update: list reviewed</li>") is None

    def test_first_link_only(self):
        """A row holding a hijacked and an authentic journal yields the hijacked one only."""
        fragment = (
            '<tr><td><a href="http://hijacked.example/">Acta Fake (AF)</a></td>'
            '<td><a href="http://original.example/">Acta Real (AR)</a></td></tr>'
        )

        assert clean_fragment(fragment) == JournalRecord(
            name="Acta Fake (AF)", abbreviation="AF", url="http://hijacked.example/"
        )

    def test_boundaries_are_textual(self):
        """Fields follow the pattern boundaries, not the HTML structure."""
        fragment = '<li><a href="...">"http://j.example">Journal One (J1)</a></li>'

        record = clean_fragment(fragment)

        assert record.name == '"http://j.example">Journal One (J1)'
        assert record.url == "http://j.example"
        assert record.abbreviation == "J1"

    def test_custom_strategy(self):
        strategy = ExtractionStrategy(r"<p>.*?</p>", abbreviation=r"(?<=\[)\w+(?=\])")
        fragment = '<p><a href="https://x.example">Journal X</a> [JX]</p>'

        record = clean_fragment(fragment, strategy)

        assert record == JournalRecord(name="Journal X", abbreviation="JX", url="https://x.example")

    def test_default_strategy_patterns(self):
        assert DEFAULT_STRATEGY.element.pattern == r"<li>.*?</li>"
