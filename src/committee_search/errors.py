from __future__ import annotations


class CommitteeSearchError(Exception):
    """Base class for errors raised by the committee search service."""


class FetchError(CommitteeSearchError):
    """Raised when the remote service cannot be reached."""

    def __init__(self, resource_path: str, message: str) -> None:
        self.resource_path = resource_path
        super().__init__(f"failed to fetch {resource_path}: {message}")


class DecodeError(CommitteeSearchError, ValueError):
    """Raised when a response body is missing or is not the expected JSON shape."""


class RefreshError(CommitteeSearchError):
    """Raised when the committee index could not be built."""


class IndexIntegrityError(CommitteeSearchError, ValueError):
    """Raised when an index lists a committee without its details."""
