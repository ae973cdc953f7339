"""Entry point that dispatches URLs to platform handlers."""

import logging
from typing import Any, Mapping, Optional, Union

from .downloader import FileDownloader
from .errors import PlatformNotSupportedError
from .handlers import PlatformHandler, create_handlers, get_handler
from .http import HttpClient
from .models import DownloaderConfig, DownloadOptions, MediaInfo


logger = logging.getLogger(__name__)


class MediaRetriever:
    """Looks up media for any URL a registered handler supports."""

    def __init__(
        self,
        config: Optional[DownloaderConfig] = None,
        http_client: Optional[HttpClient] = None,
        file_downloader: Optional[FileDownloader] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the retriever.

        Args:
            config: Shared settings, defaults if omitted
            http_client: Transport, built from ``config`` if omitted
            file_downloader: File retrieval, built from ``config`` if omitted
            logger: Logger injected into every handler
        """
        self.config = config or DownloaderConfig()
        self.http_client = http_client or HttpClient(
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
        )
        self.file_downloader = file_downloader or FileDownloader(
            timeout=self.config.timeout,
            max_concurrent=self.config.max_concurrent_downloads,
            user_agent=self.config.user_agent,
        )
        self.handlers: list[PlatformHandler] = create_handlers(
            self.http_client, self.file_downloader, self.config, logger=logger
        )

    def is_supported(self, url: str) -> bool:
        """Check if any handler accepts the URL."""
        return get_handler(url, self.handlers) is not None

    async def get_media_info(
        self,
        url: str,
        options: Union[DownloadOptions, Mapping[str, Any], None] = None,
    ) -> MediaInfo:
        """
        Fetch media information, optionally downloading the files.

        Args:
            url: Platform URL
            options: DownloadOptions or a partial mapping of its fields

        Returns:
            MediaInfo from the matching handler

        Raises:
            PlatformNotSupportedError: if no handler accepts the URL
            MediaNotFoundError: if the platform has no such resource
            FetchFailedError: if the platform API call failed
        """
        handler = get_handler(url, self.handlers)
        if handler is None:
            raise PlatformNotSupportedError(f"No handler available for {url}")

        resolved = self._resolve_options(options)
        logger.info(f"Using {handler.platform} handler for {url}")
        return await handler.get_media_info(url, resolved, self.config)

    @staticmethod
    def _resolve_options(
        options: Union[DownloadOptions, Mapping[str, Any], None],
    ) -> DownloadOptions:
        if options is None:
            return DownloadOptions()
        if isinstance(options, DownloadOptions):
            return options
        return DownloadOptions.model_validate(dict(options))
