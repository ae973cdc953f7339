"""Handler registry for selecting the appropriate platform handler."""

import logging
from typing import Optional, Sequence

from ..downloader import FileDownloader
from ..http import HttpClient
from ..models import DownloaderConfig
from .base import PlatformHandler
from .imgur import ImgurHandler


# Registry of available handlers, in priority order
_HANDLERS: list[type[PlatformHandler]] = [
    ImgurHandler,
]


def create_handlers(
    http_client: HttpClient,
    file_downloader: FileDownloader,
    config: DownloaderConfig,
    logger: Optional[logging.Logger] = None,
) -> list[PlatformHandler]:
    """
    Instantiate every registered handler with shared collaborators.

    Args:
        http_client: Transport passed to each handler
        file_downloader: File retrieval passed to each handler
        config: Retriever configuration
        logger: Logger injected into each handler

    Returns:
        Handler instances in priority order
    """
    return [
        handler_class.from_config(http_client, file_downloader, config, logger=logger)
        for handler_class in _HANDLERS
    ]


def get_handler(url: str, handlers: Sequence[PlatformHandler]) -> Optional[PlatformHandler]:
    """
    Get the first handler that accepts a URL.

    Args:
        url: URL to find a handler for
        handlers: Candidate handlers in priority order

    Returns:
        Handler or None if no handler matches
    """
    for handler in handlers:
        if handler.is_valid_url(url):
            return handler
    return None


def register_handler(handler_class: type[PlatformHandler]) -> None:
    """
    Register a new handler class.

    Args:
        handler_class: Handler class to register
    """
    if handler_class not in _HANDLERS:
        _HANDLERS.append(handler_class)


def unregister_handler(handler_class: type[PlatformHandler]) -> None:
    """Remove a handler class from the registry."""
    if handler_class in _HANDLERS:
        _HANDLERS.remove(handler_class)


def list_supported_platforms() -> list[str]:
    """List all supported platforms."""
    return sorted({handler_class.platform for handler_class in _HANDLERS})
