"""Base platform handler interface."""

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path, PurePosixPath
from typing import Optional, Sequence, Union
from urllib.parse import urlparse

from ..downloader import FileDownloader
from ..http import HttpClient
from ..models import DownloaderConfig, DownloadOptions, MediaInfo, UrlEntry


class PlatformHandler(ABC):
    """Abstract base class for platform handlers."""

    platform: str = "unknown"

    def __init__(
        self,
        http_client: HttpClient,
        file_downloader: FileDownloader,
        logger: Optional[logging.Logger] = None,
    ):
        self.http_client = http_client
        self.file_downloader = file_downloader
        self.logger = logger or logging.getLogger(type(self).__module__)

    @classmethod
    def from_config(
        cls,
        http_client: HttpClient,
        file_downloader: FileDownloader,
        config: DownloaderConfig,
        logger: Optional[logging.Logger] = None,
    ) -> "PlatformHandler":
        """Build a handler, picking whatever settings it needs from ``config``."""
        return cls(http_client, file_downloader, logger=logger)

    @abstractmethod
    def is_valid_url(self, url: str) -> bool:
        """
        Check if the URL belongs to this platform.

        Purely structural, no network access.

        Args:
            url: URL to check

        Returns:
            True if this handler can process the URL
        """
        pass

    @abstractmethod
    async def get_media_info(
        self,
        url: str,
        options: DownloadOptions,
        config: DownloaderConfig,
    ) -> MediaInfo:
        """
        Fetch media information for a URL.

        Args:
            url: URL to look up
            options: Resolved per-call options
            config: Retriever configuration

        Returns:
            MediaInfo describing the post

        Raises:
            MediaNotFoundError: if the platform has no such resource
            FetchFailedError: if the platform API call failed
        """
        pass

    def _get_file_extension(self, url: str) -> str:
        """Lowercase extension of the URL path, or "unknown"."""
        suffix = PurePosixPath(urlparse(url).path).suffix
        return suffix.lstrip(".").lower() or "unknown"

    def _sanitize_title(self, title: str) -> str:
        """Turn a title into a filename stem."""
        cleaned = re.sub(r"[^\w\s-]", "", title)
        return re.sub(r"\s+", "_", cleaned)

    def _build_filename(self, title: str, index: int, file_format: str) -> str:
        """Filename for the entry at 1-based position ``index``."""
        return f"{self._sanitize_title(title)}_{index}.{file_format}"

    async def _download_media(
        self,
        urls: Sequence[UrlEntry],
        download_dir: Union[str, Path],
        title: str,
    ) -> tuple[UrlEntry, ...]:
        """
        Download every entry concurrently.

        A failed entry is logged and returned unchanged, it never affects
        the other downloads.

        Args:
            urls: Entries in their final order
            download_dir: Directory to save the files in
            title: Shared title used as filename stem

        Returns:
            Entries in the same order, with local_path set where the download succeeded
        """

        async def download_one(index: int, entry: UrlEntry) -> UrlEntry:
            filename = self._build_filename(title, index, entry.format)
            try:
                local_path = await self.file_downloader.download_file(
                    entry.url, download_dir, filename
                )
            except Exception as e:
                self.logger.error(f"Failed to download file {entry.url}: {e}")
                return entry
            return entry.model_copy(update={"local_path": local_path})

        tasks = [download_one(i, entry) for i, entry in enumerate(urls, start=1)]
        return tuple(await asyncio.gather(*tasks))
