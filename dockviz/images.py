import logging
from enum import Enum
from typing import IO

from .dot import render_dot
from .exceptions import InputReadError, UsageError
from .models import parse_images
from .tree import render_tree

log = logging.getLogger(__name__)


class RenderMode(str, Enum):
    TREE = "tree"
    DOT = "dot"


def resolve_mode(dot: bool, tree: bool) -> RenderMode:
    # --dot takes precedence when both flags are given
    if dot:
        return RenderMode.DOT
    if tree:
        return RenderMode.TREE
    raise UsageError("Please specify either --dot or --tree")


def read_input(stream: IO[bytes] | None) -> bytes:
    if stream is None:
        raise InputReadError("Error reading all input: stdin is not available")
    try:
        return stream.read()
    except OSError as e:
        raise InputReadError(f"Error reading all input: {e}") from e


def render_images(data: bytes, mode: RenderMode, start: str = "", no_trunc: bool = False) -> str:
    """Parse a JSON image list and render it in the requested mode.

    ``start`` and ``no_trunc`` only affect tree output; dot output always
    shows truncated ids.

    Raises:
        DecodeError: If ``data`` is not a valid image list
    """
    images = parse_images(data)

    if mode == RenderMode.DOT:
        if start:
            log.warning("Ignoring start image %r in dot mode", start)
        return render_dot(images)

    return render_tree(images, start=start, no_trunc=no_trunc)
