"""Exceptions raised by the sync job."""

from typing import Optional


class SyncError(Exception):
    """Base class for sync failures surfaced to the caller."""


class ConfigError(SyncError):
    """Required configuration is missing or invalid."""


class FeedFetchError(SyncError):
    """The agent feed could not be fetched or parsed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CRMHTTPError(SyncError):
    """Non-success response from the CRM API."""

    def __init__(self, path: str, status_code: int, body: str):
        super().__init__(f"{path} {status_code}: {body}")
        self.path = path
        self.status_code = status_code
        self.body = body

    @property
    def is_transient(self) -> bool:
        """True for server-side (5xx) failures worth retrying."""
        return self.status_code >= 500
