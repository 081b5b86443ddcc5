"""
Fixtures and test helpers for the predatory journal test suite.
"""

import io
import tempfile
from pathlib import Path

import pytest

from predatory_journals.sources import csv_source, html_source

JOURNALS_CSV_URL = "https://lists.example.org/data/journals.csv"
PUBLISHERS_CSV_URL = "https://lists.example.org/data/publishers.csv"
PUBLISHERS_PAGE_URL = "https://bealls.example.org/"
HIJACKED_PAGE_URL = "https://bealls.example.org/hijacked-journals/"


class FailingStream(io.RawIOBase):
    """Binary stream that returns some data and then fails like a dropped connection."""

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def readable(self):
        return True

    def readinto(self, buffer):
        if self.offset >= len(self.data):
            raise OSError("Connection reset by peer")
        chunk = self.data[self.offset : self.offset + len(buffer)]
        buffer[: len(chunk)] = chunk
        self.offset += len(chunk)
        return len(chunk)


class FakeTransport:
    """In-memory transport: bodies by URL, everything else unreachable."""

    def __init__(self, bodies=None, unreachable=(), failing=None, errors=None):
        self.bodies = bodies or {}
        self.unreachable = set(unreachable)
        self.failing = failing or {}
        self.errors = errors or {}
        self.probed = []
        self.downloaded = []

    def reachable(self, url):
        self.probed.append(url)
        known = url in self.bodies or url in self.failing or url in self.errors
        return known and url not in self.unreachable

    def download(self, url):
        self.downloaded.append(url)
        if url in self.errors:
            raise self.errors[url]
        if url in self.failing:
            return FailingStream(self.failing[url])
        return io.BytesIO(self.bodies[url])


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def journals_csv():
    return (
        b"http://journal-a.example,Journal A,JA\r\n"
        b'http://journal-b.example,"Journal B, Applied",JBA\r\n'
        b"http://journal-c.example,Journal C,\r\n"
    )


@pytest.fixture
def publishers_csv():
    return b"http://publisher.example,Predatory Publisher,PP\r\n"


@pytest.fixture
def publishers_page():
    return (
        b"<html><body><ul>\n"
        b'<li><a href="http://publisher-one.example/">Publisher One (P1)</a></li>\n'
        b'<li><a href="http://publisher-two.example/">Publisher Two</a></li>\n'
        b"<li>Update: list reviewed</li>\n"
        b"</ul></body></html>\n"
    )


@pytest.fixture
def hijacked_page():
    return (
        b"<table>\n"
        b'<tr><td><a href="http://hijacked.example/">Acta Fake (AF)</a></td>'
        b'<td><a href="http://original.example/">Acta Real</a></td></tr>\n'
        b"</table>\n"
    )


@pytest.fixture
def sources():
    """Registry in the same shape as the production one: CSV tables first, then HTML pages."""
    return (
        csv_source(JOURNALS_CSV_URL),
        csv_source(PUBLISHERS_CSV_URL),
        html_source(PUBLISHERS_PAGE_URL, r"<li>.*?</li>"),
        html_source(HIJACKED_PAGE_URL, r"<tr>.*?</tr>"),
    )


@pytest.fixture
def transport(journals_csv, publishers_csv, publishers_page, hijacked_page):
    return FakeTransport(
        bodies={
            JOURNALS_CSV_URL: journals_csv,
            PUBLISHERS_CSV_URL: publishers_csv,
            PUBLISHERS_PAGE_URL: publishers_page,
            HIJACKED_PAGE_URL: hijacked_page,
        }
    )
