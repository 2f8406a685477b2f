"""Visualize docker image lineage as an ASCII tree or a Graphviz graph."""

from .dot import render_dot
from .exceptions import DecodeError, DockvizError, InputReadError, LineageCycleError, UsageError
from .formatting import human_size, truncate_id
from .hierarchy import Hierarchy, build_hierarchy
from .images import RenderMode, render_images, resolve_mode
from .models import Image, parse_images
from .tree import render_tree

__all__ = [
    "DecodeError",
    "DockvizError",
    "Hierarchy",
    "Image",
    "InputReadError",
    "LineageCycleError",
    "RenderMode",
    "UsageError",
    "build_hierarchy",
    "human_size",
    "parse_images",
    "render_dot",
    "render_images",
    "render_tree",
    "resolve_mode",
    "truncate_id",
]
