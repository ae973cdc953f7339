"""Display helpers for the command line."""

from pathlib import Path
from typing import Optional

from rich.filesize import decimal


def local_file_size(path: Optional[str]) -> Optional[int]:
    """Size of a downloaded file, or None if it is not on disk."""
    if not path:
        return None
    file = Path(path)
    return file.stat().st_size if file.is_file() else None


def describe_local_file(path: Optional[str]) -> str:
    """Human readable size of a downloaded file, "-" if there is none."""
    size = local_file_size(path)
    return decimal(size) if size is not None else "-"
