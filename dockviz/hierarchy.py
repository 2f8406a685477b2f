from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .formatting import truncate_id
from .models import NO_TAG, Image

log = logging.getLogger(__name__)

# Rendered in place of the start image when the start token matches nothing
EMPTY_IMAGE = Image(id="", repo_tags=[NO_TAG])


@dataclass(frozen=True)
class Hierarchy:
    roots: list[Image]
    children: Mapping[str, list[Image]]


def matches_start(image: Image, start: str) -> bool:
    if start == image.id or start == truncate_id(image.id):
        return True
    return start in image.repo_tags


def build_hierarchy(images: Sequence[Image], start: str = "") -> Hierarchy:
    """Group images by parent and pick the roots to render from.

    Roots and children keep input order. When ``start`` is given it is matched
    against the full id, the truncated id and every repo tag; the last matching
    image wins and becomes the only root. An unmatched token yields
    ``EMPTY_IMAGE`` as the root.
    """
    roots: list[Image] = []
    children: defaultdict[str, list[Image]] = defaultdict(list)
    start_image = EMPTY_IMAGE

    for image in images:
        if image.is_root:
            roots.append(image)
        else:
            children[image.parent_id].append(image)

        if start and matches_start(image, start):
            log.debug("Start token %r matches image %s", start, image.id)
            start_image = image

    log.debug("Found %d root images and %d parents", len(roots), len(children))

    if not start:
        return Hierarchy(roots=roots, children=dict(children))

    if start_image is EMPTY_IMAGE:
        log.warning("No image matches %r", start)
    return Hierarchy(roots=[start_image], children=dict(children))
