"""Main CLI entry point for Media Retriever."""

import asyncio
import sys

import hydra
from omegaconf import DictConfig
from rich.console import Console
from rich.table import Table

from .config import config_from_dict
from .errors import MediaRetrieverError
from .models import MediaInfo
from .retriever import MediaRetriever
from .utils import describe_local_file, setup_logging

console = Console()


@hydra.main(version_base=None, config_path="../../conf", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entry point."""
    if not cfg.get("url"):
        console.print("[red]No URL given.[/red] Usage: media-retriever url=<URL>")
        sys.exit(2)

    config, options = config_from_dict(cfg)
    setup_logging(cfg.logging.level, verbose=options.verbose)

    retriever = MediaRetriever(config)

    try:
        info = asyncio.run(retriever.get_media_info(cfg.url, options))
    except MediaRetrieverError as e:
        console.print(f"[red]{type(e).__name__}:[/red] {e}")
        sys.exit(1)

    show_media_info(info)


def show_media_info(info: MediaInfo) -> None:
    """Print metadata and entries as tables."""
    meta = info.metadata

    console.print(f"[bold blue]{meta.title}[/bold blue]")
    console.print(f"  Platform: {meta.platform}")
    console.print(f"  Author: {meta.author}")
    console.print(f"  Views: {meta.views}  Likes: {meta.likes}")
    console.print()

    if not info.urls:
        console.print("[yellow]No media found.[/yellow]")
        return

    table = Table(title="Media")
    table.add_column("#", justify="right")
    table.add_column("Format")
    table.add_column("Quality")
    table.add_column("URL")
    table.add_column("Local file")
    table.add_column("Size", justify="right")

    for index, entry in enumerate(info.urls, start=1):
        table.add_row(
            str(index),
            entry.format,
            entry.quality,
            entry.url,
            entry.local_path or "-",
            describe_local_file(entry.local_path),
        )

    console.print(table)

    if any(entry.local_path for entry in info.urls):
        console.print(f"  Downloaded [green]{len(info.downloaded)}[/green] of {len(info.urls)} files")


if __name__ == "__main__":
    main()
