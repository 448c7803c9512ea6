#!/usr/bin/env python3
# ascii_art/cli.py
"""
Entry point for ascii-art.
Loads configuration, parses positional arguments and prints the art.
"""

import functools
import sys
from typing import List, Optional

from ascii_art.config import Config
from ascii_art.errors import ConfigError, ImageLoadError
from ascii_art.imaging import load_pixels, make_session
from ascii_art.logging_conf import setup_logging
from ascii_art.pipeline import run
from ascii_art.settings import parse_args, usage_text


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    cfg = Config.load()
    setup_logging(cfg)

    try:
        settings = parse_args(args, cfg.render_defaults())
    except ConfigError as e:
        print("Error Processing the program's command line arguments!")
        print(e)
        print(usage_text())
        return 1

    net = cfg["network"]
    session = make_session(net["user_agent"], net["retries"])
    loader = functools.partial(
        load_pixels,
        session=session,
        timeout=(net["connect_timeout_s"], net["read_timeout_s"]),
    )
    try:
        run(settings, loader=loader)
    except ImageLoadError as e:
        print(f"\n Error reading image = {e.locator}!!")
        print(e.reason)
        print(usage_text())
        return 1
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
