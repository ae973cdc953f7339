"""Tests for the file downloader."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from media_retriever.downloader import FileDownloader
from media_retriever.errors import DownloadError


def fake_response(status=200, chunks=(b"abc", b"def")):
    async def iter_chunked(size):
        for chunk in chunks:
            await asyncio.sleep(0)
            yield chunk

    response = MagicMock()
    response.status = status
    response.content.iter_chunked = iter_chunked

    cm = MagicMock()
    cm.__aenter__ = AsyncMock(return_value=response)
    cm.__aexit__ = AsyncMock(return_value=False)
    return cm


class TestFileDownloader:
    """Tests for FileDownloader.download_file."""

    @pytest.fixture
    def downloader(self):
        return FileDownloader(timeout=5, max_concurrent=2, user_agent="test-agent")

    @pytest.mark.asyncio
    async def test_writes_file(self, downloader, tmp_path):
        target = tmp_path / "nested"
        with patch.object(aiohttp.ClientSession, "get", return_value=fake_response()):
            path = await downloader.download_file("https://i.imgur.com/a.jpg", target, "a_1.jpg")

        assert path == str(target / "a_1.jpg")
        assert (target / "a_1.jpg").read_bytes() == b"abcdef"

    @pytest.mark.asyncio
    async def test_http_error(self, downloader, tmp_path):
        with patch.object(aiohttp.ClientSession, "get", return_value=fake_response(status=404)):
            with pytest.raises(DownloadError):
                await downloader.download_file("https://i.imgur.com/a.jpg", tmp_path, "a_1.jpg")
        assert not (tmp_path / "a_1.jpg").exists()

    @pytest.mark.asyncio
    async def test_client_error(self, downloader, tmp_path):
        with patch.object(aiohttp.ClientSession, "get", side_effect=aiohttp.ClientConnectionError("reset")):
            with pytest.raises(DownloadError):
                await downloader.download_file("https://i.imgur.com/a.jpg", tmp_path, "a_1.jpg")

    def test_random_user_agent(self):
        downloader = FileDownloader()
        with patch("media_retriever.downloader.file_downloader.UserAgent") as user_agent:
            user_agent.return_value.random = "Browser/1.0"
            assert downloader._headers() == {"User-Agent": "Browser/1.0"}

    def test_fixed_user_agent(self, downloader):
        assert downloader._headers() == {"User-Agent": "test-agent"}

    @pytest.mark.asyncio
    async def test_http_error_keeps_existing_file(self, downloader, tmp_path):
        existing = tmp_path / "Cats_1.jpg"
        existing.write_bytes(b"earlier download")

        with patch.object(aiohttp.ClientSession, "get", return_value=fake_response(status=404)):
            with pytest.raises(DownloadError):
                await downloader.download_file("https://i.imgur.com/a.jpg", tmp_path, "Cats_1.jpg")

        assert existing.read_bytes() == b"earlier download"

    @pytest.mark.asyncio
    async def test_interrupted_write_keeps_existing_file(self, downloader, tmp_path):
        existing = tmp_path / "Cats_1.jpg"
        existing.write_bytes(b"earlier download")

        async def broken_chunks(size):
            yield b"half"
            raise aiohttp.ClientPayloadError("connection lost")

        response = fake_response()
        response.__aenter__.return_value.content.iter_chunked = broken_chunks

        with patch.object(aiohttp.ClientSession, "get", return_value=response):
            with pytest.raises(DownloadError):
                await downloader.download_file("https://i.imgur.com/a.jpg", tmp_path, "Cats_1.jpg")

        assert existing.read_bytes() == b"earlier download"
        assert not (tmp_path / "Cats_1.jpg.part").exists()

    @pytest.mark.asyncio
    async def test_replaces_existing_file_on_success(self, downloader, tmp_path):
        (tmp_path / "Cats_1.jpg").write_bytes(b"old")

        with patch.object(aiohttp.ClientSession, "get", return_value=fake_response()):
            await downloader.download_file("https://i.imgur.com/a.jpg", tmp_path, "Cats_1.jpg")

        assert (tmp_path / "Cats_1.jpg").read_bytes() == b"abcdef"
        assert not (tmp_path / "Cats_1.jpg.part").exists()


class TestFileDownloaderAcrossLoops:
    """A downloader reused by several asyncio.run calls."""

    def test_contended_downloads_in_second_loop(self, tmp_path):
        downloader = FileDownloader(max_concurrent=1, user_agent="test-agent")

        async def download_three(run):
            return await asyncio.gather(
                *(
                    downloader.download_file(f"https://i.imgur.com/{i}.jpg", tmp_path, f"r{run}_{i}.jpg")
                    for i in range(3)
                ),
                return_exceptions=True,
            )

        with patch.object(aiohttp.ClientSession, "get", side_effect=lambda *a, **kw: fake_response()):
            first = asyncio.run(download_three(1))
            second = asyncio.run(download_three(2))

        assert first == [str(tmp_path / f"r1_{i}.jpg") for i in range(3)]
        assert second == [str(tmp_path / f"r2_{i}.jpg") for i in range(3)]
