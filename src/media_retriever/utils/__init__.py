"""Logging and formatting helpers."""

from .formatting import describe_local_file, local_file_size
from .log import setup_logging

__all__ = [
    "describe_local_file",
    "local_file_size",
    "setup_logging",
]
