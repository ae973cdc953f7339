"""Exceptions raised by media_retriever."""

from typing import Optional


class MediaRetrieverError(Exception):
    """Base class for all media_retriever errors."""


class MediaNotFoundError(MediaRetrieverError):
    """The platform reports no such resource, or returned an unusable payload."""


class FetchFailedError(MediaRetrieverError):
    """The platform API call failed for a reason other than absence."""


class PlatformNotSupportedError(MediaRetrieverError):
    """No registered handler accepts the URL."""


class NetworkError(MediaRetrieverError):
    """Transport-level failure. Handlers translate it before it leaves them."""


class HttpStatusError(NetworkError):
    """Non-2xx HTTP response."""

    def __init__(self, status: int, url: str, message: Optional[str] = None):
        self.status = status
        self.url = url
        super().__init__(message or f"HTTP {status} for {url}")


class DownloadError(MediaRetrieverError):
    """A single file could not be saved to local storage."""
