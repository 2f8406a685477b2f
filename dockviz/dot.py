from collections.abc import Sequence

from .formatting import human_size, truncate_id
from .models import Image

HEADER = "digraph docker {\n"
FOOTER = " base [style=invisible]\n}\n"

# Dot escape for a line break inside a label
LABEL_NEWLINE = "\\n"

TAGGED_NODE_STYLE = 'shape=box,fillcolor="paleturquoise",style="filled,rounded"'


def format_edge(image: Image) -> str:
    if image.is_root:
        return f' base -> "{truncate_id(image.id)}" [style=invis]\n'
    return f' "{truncate_id(image.parent_id)}" -> "{truncate_id(image.id)}"\n'


def format_node(image: Image) -> str:
    node_id = truncate_id(image.id)
    label = f"{node_id} (+{human_size(image.size)}) ({human_size(image.virtual_size)})"
    if image.is_tagged:
        label += LABEL_NEWLINE + LABEL_NEWLINE.join(image.repo_tags)
        return f' "{node_id}" [label="{label}",{TAGGED_NODE_STYLE}];\n'
    return f' "{node_id}" [label="{label}"];\n'


def render_dot(images: Sequence[Image]) -> str:
    """Render images as a Graphviz digraph.

    Root images hang off an invisible ``base`` node so they line up at the top.
    Tagged images are drawn as filled boxes with their tags in the label.
    """
    parts = [HEADER]
    for image in images:
        parts.append(format_edge(image))
        parts.append(format_node(image))
    parts.append(FOOTER)
    return "".join(parts)
