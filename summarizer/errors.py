class SummaryError(Exception):
    """Base class for failures of a summarization call."""


class DocumentReadError(SummaryError, OSError):
    """A source could not be opened, read or fetched."""


class SummaryMemoryError(SummaryError, MemoryError):
    """Ran out of memory while building the summary."""
