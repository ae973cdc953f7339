"""Tests for MediaRetriever dispatch."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from media_retriever import (
    DownloaderConfig,
    DownloadOptions,
    MediaRetriever,
    PlatformNotSupportedError,
)
from media_retriever.http import HttpResponse


IMAGE_ENVELOPE = {
    "success": True,
    "data": {
        "title": "Sunset",
        "is_album": False,
        "link": "https://i.imgur.com/sun.jpg",
        "account_url": "photog",
        "views": 42,
        "ups": 4,
        "downs": 1,
    },
}


@pytest.fixture
def retriever(tmp_path):
    http_client = MagicMock()
    http_client.get = AsyncMock(return_value=HttpResponse(status=200, data=IMAGE_ENVELOPE))
    file_downloader = MagicMock()
    file_downloader.download_file = AsyncMock(
        side_effect=lambda url, directory, filename: f"{directory}/{filename}"
    )
    return MediaRetriever(
        DownloaderConfig(download_dir=tmp_path),
        http_client=http_client,
        file_downloader=file_downloader,
    )


class TestMediaRetriever:
    """Tests for MediaRetriever."""

    def test_default_collaborators(self):
        retriever = MediaRetriever(DownloaderConfig(timeout=7, max_concurrent_downloads=2))
        assert retriever.http_client.timeout == 7
        assert retriever.file_downloader.max_concurrent == 2

    def test_is_supported(self, retriever):
        assert retriever.is_supported("https://i.imgur.com/sun.jpg") is True
        assert retriever.is_supported("https://twitter.com/user/status/1") is False

    @pytest.mark.asyncio
    async def test_unsupported_url(self, retriever):
        with pytest.raises(PlatformNotSupportedError):
            await retriever.get_media_info("https://twitter.com/user/status/1")
        retriever.http_client.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_default_options_skip_download(self, retriever):
        info = await retriever.get_media_info("https://i.imgur.com/sun.jpg")

        assert info.metadata.title == "Sunset"
        assert info.metadata.likes == 3
        assert info.urls[0].local_path is None
        retriever.file_downloader.download_file.assert_not_called()

    @pytest.mark.asyncio
    async def test_partial_options_mapping(self, retriever, tmp_path):
        info = await retriever.get_media_info("https://i.imgur.com/sun.jpg", {"download_media": True})

        assert info.urls[0].local_path == f"{tmp_path}/Sunset_1.jpg"

    @pytest.mark.asyncio
    async def test_options_model(self, retriever):
        info = await retriever.get_media_info(
            "https://i.imgur.com/sun.jpg", DownloadOptions(download_media=True)
        )
        assert len(info.downloaded) == 1
