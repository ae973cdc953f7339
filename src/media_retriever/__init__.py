"""Media Retriever - fetch media and metadata from social platform URLs."""

from .errors import (
    DownloadError,
    FetchFailedError,
    HttpStatusError,
    MediaNotFoundError,
    MediaRetrieverError,
    NetworkError,
    PlatformNotSupportedError,
)
from .models import DownloaderConfig, DownloadOptions, MediaInfo, MediaMetadata, UrlEntry
from .handlers import PlatformHandler, ImgurHandler, register_handler, list_supported_platforms
from .retriever import MediaRetriever

__version__ = "0.1.0"

__all__ = [
    "MediaRetriever",
    "PlatformHandler",
    "ImgurHandler",
    "register_handler",
    "list_supported_platforms",
    "MediaInfo",
    "MediaMetadata",
    "UrlEntry",
    "DownloadOptions",
    "DownloaderConfig",
    "MediaRetrieverError",
    "MediaNotFoundError",
    "FetchFailedError",
    "PlatformNotSupportedError",
    "NetworkError",
    "HttpStatusError",
    "DownloadError",
]
