"""Configuration loading."""

from pathlib import Path
from typing import Any, Optional, Sequence, Union

from omegaconf import DictConfig, OmegaConf

from .models import DownloaderConfig, DownloadOptions


def config_from_dict(cfg: Union[DictConfig, dict]) -> tuple[DownloaderConfig, DownloadOptions]:
    """
    Build typed settings from a loaded config tree.

    Missing groups or keys fall back to the model defaults.

    Args:
        cfg: Tree with optional ``downloader``, ``imgur`` and ``options`` groups

    Returns:
        (DownloaderConfig, DownloadOptions)
    """
    if isinstance(cfg, DictConfig):
        data: dict[str, Any] = OmegaConf.to_container(cfg, resolve=True)  # type: ignore[assignment]
    else:
        data = dict(cfg)

    downloader = {k: v for k, v in (data.get("downloader") or {}).items() if v is not None}
    imgur = data.get("imgur") or {}
    if imgur.get("client_id"):
        downloader["imgur_client_id"] = imgur["client_id"]

    options = {k: v for k, v in (data.get("options") or {}).items() if v is not None}

    return DownloaderConfig(**downloader), DownloadOptions(**options)


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Sequence[str] = (),
) -> tuple[DownloaderConfig, DownloadOptions]:
    """
    Load settings from a YAML file.

    Args:
        path: YAML file; only defaults and overrides are used if omitted
        overrides: Dotlist overrides such as ``downloader.timeout=10``

    Returns:
        (DownloaderConfig, DownloadOptions)
    """
    cfg = OmegaConf.load(path) if path else OmegaConf.create({})
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    return config_from_dict(cfg)
