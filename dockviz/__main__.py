import logging
import os
import sys

from dockviz.arguments import Parser
from dockviz.exceptions import DockvizError, UsageError
from dockviz.images import read_input, render_images


def main() -> None:
    parser = Parser(
        config_files=[os.getenv("DOCKVIZ_CONFIG", "~/.config/dockviz/dockviz.ini")],
        auto_env_var_prefix="DOCKVIZ_",
    )
    parser.parse_args()

    logging.basicConfig(level=parser.log_level, format="[%(levelname)s] %(message)s", stream=sys.stderr)
    try:
        mode = parser.render_mode
        data = read_input(sys.stdin.buffer if sys.stdin is not None else None)
        output = render_images(data, mode, start=parser.start, no_trunc=parser.no_trunc)
    except UsageError as e:
        logging.error("%s", e.message)
        sys.exit(2)
    except DockvizError as e:
        logging.error("%s", e.message)
        sys.exit(1)

    sys.stdout.buffer.write(output.encode("utf-8"))
    sys.stdout.buffer.flush()


if __name__ == "__main__":
    main()
