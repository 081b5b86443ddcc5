"""Exceptions raised while loading predatory journal sources."""


class PredatoryJournalError(Exception):
    """Base class for all predatory journal loading errors."""


class ConfigurationError(PredatoryJournalError, ValueError):
    """A source descriptor is invalid (raised at start-up, never during a crawl)."""


class SourceUnreachable(PredatoryJournalError):
    """The reachability probe for a source failed."""

    def __init__(self, location: str):
        super().__init__(f"Source unreachable: {location}")
        self.location = location


class TransportError(PredatoryJournalError):
    """Downloading or reading a source failed mid-stream."""


class MalformedRowError(TransportError):
    """A CSV row does not have the expected number of columns."""

    def __init__(self, line_num: int, reason: str):
        super().__init__(f"Malformed CSV row at line {line_num}: {reason}")
        self.line_num = line_num
