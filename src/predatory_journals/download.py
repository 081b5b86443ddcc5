"""
HTTP retrieval of predatory journal sources.

Each source is probed with a lightweight HEAD request before the full
download. Failures are reported as SourceUnreachable (probe) or
TransportError (download/read); the caller decides whether to skip the source.
There is no retry or backoff: a failed source is simply left out of the run.
"""

import io
import logging
from typing import BinaryIO, Iterator, Optional, Protocol

import requests
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from .config import CONNECT_TIMEOUT, READ_TIMEOUT, USER_AGENT
from .errors import SourceUnreachable, TransportError
from .sources import SourceDescriptor

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

# Errors raised while reading a streamed body
READ_ERRORS = (OSError, requests.RequestException, Urllib3HTTPError)


class Transport(Protocol):
    """HTTP capability used to retrieve sources."""

    def reachable(self, url: str) -> bool: ...

    def download(self, url: str) -> BinaryIO: ...


def create_session() -> requests.Session:
    """Create a requests session without a retry adapter."""
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


class HttpTransport:
    """Transport backed by a requests session."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or create_session()

    def reachable(self, url: str) -> bool:
        """Return True if a HEAD request to the URL succeeds with a 2xx status."""
        try:
            response = self.session.head(url, allow_redirects=True, timeout=(CONNECT_TIMEOUT, READ_TIMEOUT))
        except requests.RequestException as e:
            logger.debug(f"Probe failed for {url}: {e}")
            return False
        response.close()
        if not response.ok:
            logger.debug(f"Probe for {url} returned HTTP {response.status_code}")
        return response.ok

    def download(self, url: str) -> BinaryIO:
        """
        Open a streamed download of the URL.

        Args:
            url: Location to retrieve

        Returns:
            Binary stream of the (transfer-decoded) response body

        Raises:
            TransportError: If the request fails or returns a non-2xx status
        """
        try:
            response = self.session.get(url, stream=True, timeout=(CONNECT_TIMEOUT, READ_TIMEOUT))
        except requests.RequestException as e:
            raise TransportError(f"Error downloading {url}: {e}") from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            response.close()
            raise TransportError(f"Error downloading {url}: {e}") from e

        # Undo gzip/deflate content encoding while streaming
        response.raw.decode_content = True
        return response.raw


class FetchedSource:
    """An open download for one source; close it once the body is consumed."""

    def __init__(self, source: SourceDescriptor, stream: BinaryIO):
        self.source = source
        self.stream = stream

    def text(self) -> str:
        """Read the whole body as text."""
        try:
            return self.stream.read().decode(ENCODING, errors="replace")
        except READ_ERRORS as e:
            raise TransportError(f"Error reading {self.source.location}: {e}") from e

    def lines(self) -> Iterator[str]:
        """Iterate the body as text lines (line endings kept, as csv.reader expects)."""
        reader = io.TextIOWrapper(self.stream, encoding=ENCODING, errors="replace", newline="")
        try:
            yield from reader
        except READ_ERRORS as e:
            raise TransportError(f"Error reading {self.source.location}: {e}") from e

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "FetchedSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def fetch_source(source: SourceDescriptor, transport: Transport) -> FetchedSource:
    """
    Probe a source and open its download.

    Args:
        source: Source to retrieve
        transport: HTTP capability (``reachable`` and ``download``)

    Returns:
        FetchedSource wrapping the open body stream

    Raises:
        SourceUnreachable: If the reachability probe fails
        TransportError: If the download cannot be started
    """
    if not transport.reachable(source.location):
        raise SourceUnreachable(source.location)

    logger.debug(f"Downloading {source.kind.value.upper()} source: {source.location}")
    try:
        stream = transport.download(source.location)
    except READ_ERRORS as e:
        raise TransportError(f"Error downloading {source.location}: {e}") from e
    return FetchedSource(source, stream)
