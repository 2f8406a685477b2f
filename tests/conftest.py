"""Test fixtures for dockviz."""

import json

import pytest

from dockviz.models import NO_TAG, Image

# =============================================================================
# Default test data factories
# =============================================================================


def image_id(char: str) -> str:
    """Build a 64 character id made of a single repeated character."""
    return char * 64


def make_image(
    id: str = image_id("a"),
    parent_id: str = "",
    repo_tags: list[str] | None = None,
    virtual_size: int = 0,
    size: int = 0,
    created: int = 1700000000,
) -> Image:
    """Create a test Image. Untagged unless repo_tags is given."""
    return Image(
        id=id,
        parent_id=parent_id,
        repo_tags=repo_tags if repo_tags is not None else [NO_TAG],
        virtual_size=virtual_size,
        size=size,
        created=created,
    )


def images_json(*images: Image) -> bytes:
    """Serialize images the way the docker API does."""
    payload = [image.model_dump(by_alias=True) for image in images]
    for item in payload:
        if not item["ParentId"]:
            del item["ParentId"]
    return json.dumps(payload).encode()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def forest() -> list[Image]:
    """Two trees: ubuntu with two derived branches, and a standalone alpine."""
    return [
        make_image(
            id=image_id("a"),
            repo_tags=["ubuntu:22.04"],
            virtual_size=77_800_000,
            size=77_800_000,
        ),
        make_image(id=image_id("b"), parent_id=image_id("a"), virtual_size=100_000_000, size=22_200_000),
        make_image(
            id=image_id("c"),
            parent_id=image_id("b"),
            repo_tags=["app:latest", "app:1.0"],
            virtual_size=103_700_000,
            size=3_700_000,
        ),
        make_image(id=image_id("d"), parent_id=image_id("a"), virtual_size=78_000_000, size=200_000),
        make_image(id=image_id("e"), repo_tags=["alpine:3.19"], virtual_size=7_400_000, size=7_400_000),
    ]


@pytest.fixture
def forest_tree() -> str:
    return (
        "|─aaaaaaaaaaaa Virtual Size: 77.8 MB Tags: ubuntu:22.04\n"
        "| |─bbbbbbbbbbbb Virtual Size: 100.0 MB\n"
        "| | └─cccccccccccc Virtual Size: 103.7 MB Tags: app:latest, app:1.0\n"
        "| └─dddddddddddd Virtual Size: 78.0 MB\n"
        "└─eeeeeeeeeeee Virtual Size: 7.4 MB Tags: alpine:3.19\n"
    )
