"""Imgur handler using the public API v3."""

import logging
import re
from dataclasses import dataclass
from typing import Literal, Optional
from urllib.parse import urlparse

from ..downloader import FileDownloader
from ..errors import FetchFailedError, HttpStatusError, MediaNotFoundError, NetworkError
from ..http import HttpClient
from ..models import (
    DEFAULT_IMGUR_CLIENT_ID,
    DownloaderConfig,
    DownloadOptions,
    MediaInfo,
    MediaMetadata,
    UrlEntry,
)
from .base import PlatformHandler
from .imgur_models import ImgurAlbum, ImgurData, parse_record


logger = logging.getLogger(__name__)

API_ENDPOINT = "https://api.imgur.com/3/{type}/{id}"


@dataclass(frozen=True)
class ResourceReference:
    """Identifies one Imgur resource."""

    type: Literal["image", "album"]
    id: str


def classify_imgur_link(url: str, log: Optional[logging.Logger] = None) -> ResourceReference:
    """
    Map an Imgur URL to the API resource it points at.

    - ``i.imgur.com/<id>.<ext>`` is an image
    - ``imgur.com/gallery/<id>`` and ``imgur.com/a/<id>`` are albums
    - ``imgur.com/<id>`` is an image

    Missing path segments give an empty id.
    """
    parsed = urlparse(url)
    hostname = parsed.hostname or ""
    parts = [part for part in parsed.path.split("/") if part]

    if hostname.startswith("i."):
        # Direct image link
        ref = ResourceReference("image", parts[0].split(".")[0] if parts else "")
    elif parts and parts[0] in ("gallery", "a"):
        ref = ResourceReference("album", parts[1] if len(parts) > 1 else "")
    else:
        ref = ResourceReference("image", parts[0] if parts else "")

    (log or logger).info(f"Classified Imgur link: type={ref.type}, id={ref.id}")
    return ref


def extract_urls(record: ImgurData) -> list[str]:
    """Media URLs of a record, in album order."""
    if isinstance(record, ImgurAlbum) and record.images:
        return [image.link for image in record.images]
    if record.link:
        return [record.link]
    return []


def extract_title(record: ImgurData) -> str:
    """Display title, also used as filename stem."""
    title = record.title or "Untitled"

    if record.description:
        title += f" - {record.description}"

    if isinstance(record, ImgurAlbum):
        title += " (Album)"

    return title.strip()


def extract_metadata(record: ImgurData, platform: str = "Imgur") -> MediaMetadata:
    """Build uniform metadata from a record."""
    return MediaMetadata(
        title=extract_title(record),
        author=record.account_url or "Unknown",
        platform=platform,
        views=record.views,
        likes=record.ups - record.downs,
    )


class ImgurHandler(PlatformHandler):
    """
    Handler for Imgur images, albums and gallery posts.

    Examples:
        - https://i.imgur.com/7q4TxW7.png
        - https://imgur.com/gallery/ouMQkN1
        - https://imgur.com/a/dTFUK1E
    """

    platform = "Imgur"

    URL_PATTERN = re.compile(r"^https?://(www\.)?(i\.)?imgur\.com/.+$", re.IGNORECASE)

    def __init__(
        self,
        http_client: HttpClient,
        file_downloader: FileDownloader,
        client_id: str = DEFAULT_IMGUR_CLIENT_ID,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(http_client, file_downloader, logger=logger)
        self.client_id = client_id

    @classmethod
    def from_config(
        cls,
        http_client: HttpClient,
        file_downloader: FileDownloader,
        config: DownloaderConfig,
        logger: Optional[logging.Logger] = None,
    ) -> "ImgurHandler":
        return cls(http_client, file_downloader, client_id=config.imgur_client_id, logger=logger)

    def is_valid_url(self, url: str) -> bool:
        """Check if URL is an Imgur URL."""
        return bool(self.URL_PATTERN.match(url))

    async def get_media_info(
        self,
        url: str,
        options: DownloadOptions,
        config: DownloaderConfig,
    ) -> MediaInfo:
        ref = classify_imgur_link(url, self.logger)
        record = await self._fetch_media_info(ref)

        if record is None:
            raise MediaNotFoundError("Media not found on Imgur.")

        metadata = extract_metadata(record, self.platform)

        urls = tuple(
            UrlEntry(
                url=media_url,
                quality="original",
                format=self._get_file_extension(media_url),
                size=0,
            )
            for media_url in extract_urls(record)
        )

        if options.download_media:
            urls = await self._download_media(urls, config.download_dir, metadata.title)

        return MediaInfo(urls=urls, metadata=metadata)

    async def _fetch_media_info(self, ref: ResourceReference) -> Optional[ImgurData]:
        """
        Query the Imgur API for one resource.

        Returns:
            The parsed record, or None if Imgur reports no such resource

        Raises:
            FetchFailedError: on transport failure or a malformed envelope
            MediaNotFoundError: if the record matches neither payload shape
        """
        endpoint = API_ENDPOINT.format(type=ref.type, id=ref.id)

        try:
            response = await self.http_client.get(
                endpoint,
                headers={"Authorization": f"Client-ID {self.client_id}"},
            )
        except HttpStatusError as e:
            if e.status == 404:
                return None
            self.logger.error(f"Error fetching media info from Imgur: {e}")
            raise FetchFailedError("Failed to fetch media info from Imgur.") from e
        except NetworkError as e:
            self.logger.error(f"Error fetching media info from Imgur: {e}")
            raise FetchFailedError("Failed to fetch media info from Imgur.") from e

        envelope = response.data
        if not isinstance(envelope, dict):
            self.logger.error(f"Malformed Imgur response for {endpoint}")
            raise FetchFailedError("Malformed response from Imgur.")

        if not envelope.get("success") or not envelope.get("data"):
            return None

        return parse_record(envelope["data"])
