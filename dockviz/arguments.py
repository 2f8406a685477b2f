import argclass

from dockviz.images import RenderMode, resolve_mode


class Parser(argclass.Parser):
    """Visualize docker images read as JSON from stdin."""

    dot: bool = argclass.Argument(
        "-d", "--dot", action=argclass.Actions.STORE_TRUE, default=False, help="Show image information as Graphviz dot"
    )
    tree: bool = argclass.Argument(
        "-t", "--tree", action=argclass.Actions.STORE_TRUE, default=False, help="Show image information as tree"
    )
    no_trunc: bool = argclass.Argument(
        "-n", "--no-trunc", action=argclass.Actions.STORE_TRUE, default=False, help="Don't truncate the image IDs"
    )
    start: str = argclass.Argument(
        "start",
        nargs="?",
        default="",
        help="Image id, short id or repo tag to start the tree from",
    )

    log_level: int = argclass.LogLevel

    @property
    def render_mode(self) -> RenderMode:
        return resolve_mode(dot=self.dot, tree=self.tree)
