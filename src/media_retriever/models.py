"""Data models shared by every platform handler."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_IMGUR_CLIENT_ID = "546c25a59c58ad7"


class UrlEntry(BaseModel):
    """One retrievable asset of a media post."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Remote address of the asset")
    quality: str = Field("original", description="Handler-defined quality tag")
    format: str = Field("unknown", description="Lowercase file extension without dot")
    size: int = Field(0, ge=0, description="Size in bytes, 0 if unknown")
    local_path: Optional[str] = Field(None, description="Set only after a successful download")


class MediaMetadata(BaseModel):
    """Descriptive metadata of a media post."""

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    platform: str
    views: int = Field(0, ge=0)
    # upvotes minus downvotes, may be negative
    likes: int = 0


class MediaInfo(BaseModel):
    """Uniform result of a media lookup."""

    model_config = ConfigDict(frozen=True)

    urls: tuple[UrlEntry, ...] = ()
    metadata: MediaMetadata

    @property
    def downloaded(self) -> list[UrlEntry]:
        """Entries that were saved to local storage."""
        return [entry for entry in self.urls if entry.local_path is not None]


class DownloadOptions(BaseModel):
    """Per-call options, resolved to full values before reaching a handler."""

    download_media: bool = False
    quality: Literal["highest", "lowest"] = "highest"
    verbose: bool = False


class DownloaderConfig(BaseModel):
    """Settings shared by all calls of one retriever."""

    download_dir: Path = Path("./downloads")
    timeout: float = Field(30.0, gt=0)
    max_concurrent_downloads: int = Field(5, ge=1)
    user_agent: Optional[str] = None
    imgur_client_id: str = DEFAULT_IMGUR_CLIENT_ID
