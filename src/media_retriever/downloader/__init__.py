"""Downloader module for media files."""

from .file_downloader import FileDownloader

__all__ = [
    "FileDownloader",
]
