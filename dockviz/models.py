import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .exceptions import DecodeError

# Docker reports untagged images with this single placeholder tag
NO_TAG = "<none>:<none>"

log = logging.getLogger(__name__)


class Image(BaseModel):
    """One image layer as reported by ``docker images`` / ``GET /images/json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    id: str = Field(alias="Id")
    parent_id: str = Field(default="", alias="ParentId")
    repo_tags: list[str] = Field(default_factory=list, alias="RepoTags")
    virtual_size: int = Field(default=0, alias="VirtualSize")
    size: int = Field(default=0, alias="Size")
    created: int = Field(default=0, alias="Created")

    @field_validator("parent_id", mode="before")
    @classmethod
    def _null_parent(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("repo_tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def is_root(self) -> bool:
        return not self.parent_id

    @property
    def is_tagged(self) -> bool:
        return self.repo_tags[0] != NO_TAG


IMAGE_LIST_ADAPTER: TypeAdapter[list[Image]] = TypeAdapter(list[Image])


def parse_images(data: bytes) -> list[Image]:
    """Decode a JSON array of image records, keeping input order.

    Raises:
        DecodeError: If the data is not JSON or does not match the record shape
    """
    try:
        images = IMAGE_LIST_ADAPTER.validate_json(data)
    except ValidationError as e:
        raise DecodeError(f"Error reading JSON: {e}") from e
    log.debug("Parsed %d image records", len(images))
    return images
