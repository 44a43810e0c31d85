"""Error kinds raised by the lookup pipeline.

Every error here is terminal for the current invocation: nothing is retried,
the CLI reports the message and exits non-zero.
"""

from __future__ import annotations


class TfDocsError(Exception):
    """Base class for every error the CLI knows how to report."""


class ParseError(TfDocsError):
    """The identifier could not be split into provider and resource."""


class NotFoundError(TfDocsError):
    """A registry lookup returned an empty collection."""

    def __init__(self, message: str, *, stage: str) -> None:
        super().__init__(message)
        self.stage = stage


class FetchError(TfDocsError):
    """Transport failure, non-2xx status or a response that does not decode."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class FetchTimeoutError(FetchError, TimeoutError):
    """A registry request exceeded the configured timeout."""
