"""Platform handlers turning platform URLs into MediaInfo."""

from .base import PlatformHandler
from .imgur import ImgurHandler, ResourceReference, classify_imgur_link
from .factory import (
    create_handlers,
    get_handler,
    register_handler,
    unregister_handler,
    list_supported_platforms,
)

__all__ = [
    "PlatformHandler",
    "ImgurHandler",
    "ResourceReference",
    "classify_imgur_link",
    "create_handlers",
    "get_handler",
    "register_handler",
    "unregister_handler",
    "list_supported_platforms",
]
