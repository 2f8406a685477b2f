from __future__ import annotations

from collections.abc import Mapping, Sequence

from .exceptions import LineageCycleError
from .formatting import human_size, truncate_id
from .hierarchy import build_hierarchy
from .models import Image

BRANCH = "|─"
LAST_BRANCH = "└─"
CONTINUATION = "| "
BLANK = "  "


def format_tree_node(image: Image, prefix: str, no_trunc: bool) -> str:
    image_id = image.id if no_trunc else truncate_id(image.id)
    line = f"{prefix}{image_id} Virtual Size: {human_size(image.virtual_size)}"
    if image.is_tagged:
        line += f" Tags: {', '.join(image.repo_tags)}"
    return line + "\n"


def walk_tree(
    lines: list[str],
    images: Sequence[Image],
    children: Mapping[str, list[Image]],
    prefix: str = "",
    no_trunc: bool = False,
    ancestors: frozenset[str] = frozenset(),
) -> None:
    """Append one line per image to ``lines``, depth first.

    All siblings but the last get a ``|─`` branch and pass a ``| `` column down
    to their children; the last sibling (or an only child) gets ``└─`` and a
    blank column.

    Recursion depth follows the longest parent chain, which docker caps well
    below the interpreter recursion limit.

    Raises:
        LineageCycleError: If an image appears among its own ancestors
    """
    last = len(images) - 1
    for index, image in enumerate(images):
        if image.id in ancestors:
            raise LineageCycleError(image.id)

        if index < last:
            branch, continuation = BRANCH, CONTINUATION
        else:
            branch, continuation = LAST_BRANCH, BLANK

        lines.append(format_tree_node(image, prefix + branch, no_trunc))

        subimages = children.get(image.id)
        if subimages:
            walk_tree(lines, subimages, children, prefix + continuation, no_trunc, ancestors | {image.id})


def render_tree(images: Sequence[Image], start: str = "", no_trunc: bool = False) -> str:
    hierarchy = build_hierarchy(images, start)
    lines: list[str] = []
    walk_tree(lines, hierarchy.roots, hierarchy.children, no_trunc=no_trunc)
    return "".join(lines)
