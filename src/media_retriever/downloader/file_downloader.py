"""Saves remote files to local storage."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

import aiohttp
from fake_useragent import UserAgent

from ..errors import DownloadError


logger = logging.getLogger(__name__)


class FileDownloader:
    """Downloads files over HTTP with a cap on simultaneous transfers."""

    CHUNK_SIZE = 8192

    def __init__(
        self,
        timeout: float = 30,
        max_concurrent: int = 5,
        user_agent: Optional[str] = None,
    ):
        """
        Initialize the downloader.

        Args:
            timeout: Total timeout per file, in seconds
            max_concurrent: Maximum number of transfers running at once
            user_agent: Fixed User-Agent; a random browser one is used if omitted
        """
        self.timeout = timeout
        self.max_concurrent = max_concurrent
        self.user_agent = user_agent
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._semaphore_loop: Optional[asyncio.AbstractEventLoop] = None
        self._ua: Optional[UserAgent] = None

    @property
    def semaphore(self) -> asyncio.Semaphore:
        # A semaphore is bound to one loop, so rebuild it when the loop changes
        loop = asyncio.get_running_loop()
        if self._semaphore is None or self._semaphore_loop is not loop:
            self._semaphore = asyncio.Semaphore(self.max_concurrent)
            self._semaphore_loop = loop
        return self._semaphore

    def _headers(self) -> dict[str, str]:
        if self.user_agent:
            return {"User-Agent": self.user_agent}
        if self._ua is None:
            self._ua = UserAgent()
        return {"User-Agent": self._ua.random}

    async def download_file(
        self,
        url: str,
        directory: Union[str, Path],
        filename: str,
    ) -> str:
        """
        Download a single file.

        Args:
            url: Remote file address
            directory: Target directory, created if missing
            filename: Name of the file inside the directory

        Returns:
            Path to the saved file

        Raises:
            DownloadError: if the transfer or the write fails
        """
        dest_dir = Path(directory)
        dest = dest_dir / filename
        # Written next to dest and moved into place only once complete
        part = dest.with_name(dest.name + ".part")
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        async with self.semaphore:
            try:
                dest_dir.mkdir(parents=True, exist_ok=True)
                async with aiohttp.ClientSession(timeout=timeout) as session:
                    async with session.get(url, headers=self._headers()) as response:
                        if response.status != 200:
                            raise DownloadError(f"HTTP {response.status} for {url}")

                        with open(part, "wb") as f:
                            async for chunk in response.content.iter_chunked(self.CHUNK_SIZE):
                                f.write(chunk)
                part.replace(dest)
            except DownloadError:
                self._remove_partial(part)
                raise
            except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
                self._remove_partial(part)
                raise DownloadError(f"Failed to download {url}: {e}") from e

        logger.info(f"Downloaded {url} -> {dest}")
        return str(dest)

    @staticmethod
    def _remove_partial(part: Path) -> None:
        try:
            part.unlink(missing_ok=True)
        except OSError:
            logger.warning(f"Could not remove partial file {part}")
