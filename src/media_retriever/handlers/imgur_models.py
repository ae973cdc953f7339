"""Typed view of the Imgur API v3 payload."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import MediaNotFoundError


class ImgurRecord(BaseModel):
    """Fields shared by image and album records."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    account_url: Optional[str] = None
    views: int = Field(0, ge=0)
    ups: int = 0
    downs: int = 0

    @field_validator("views", "ups", "downs", mode="before")
    @classmethod
    def _none_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class ImgurAlbumImage(BaseModel):
    """One image inside an album."""

    model_config = ConfigDict(extra="ignore")

    link: str
    type: Optional[str] = None


class ImgurImage(ImgurRecord):
    """Single-asset record."""

    is_album: bool = False


class ImgurAlbum(ImgurRecord):
    """Multi-asset record."""

    is_album: bool = True
    images: Optional[list[ImgurAlbumImage]] = None


ImgurData = Union[ImgurImage, ImgurAlbum]


def parse_record(data: Any) -> ImgurData:
    """
    Validate the ``data`` object of an Imgur API envelope.

    The ``is_album`` flag selects the shape. Anything else is treated as
    a missing resource.

    Raises:
        MediaNotFoundError: if the payload matches neither shape
    """
    if not isinstance(data, dict):
        raise MediaNotFoundError("Unexpected Imgur payload.")

    model = ImgurAlbum if data.get("is_album") else ImgurImage
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MediaNotFoundError(f"Invalid Imgur payload: {e.error_count()} error(s).") from e
