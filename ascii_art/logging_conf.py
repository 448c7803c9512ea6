#!/usr/bin/env python3
# ascii_art/logging_conf.py
"""
Central logging setup for ascii-art.

stdout carries only the art, so console logs go to stderr and default to
WARNING. Each run logs its version and config file at INFO, to the console
and to the optional rotating file log.
"""

import logging
from logging.handlers import RotatingFileHandler

from ascii_art.config import Config
from ascii_art.version import version_info

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

log = logging.getLogger("ascii_art")


def setup_logging(cfg: Config) -> None:
    lg = cfg["logging"]
    level = getattr(logging, lg.get("level", "WARNING").upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    log.setLevel(level)

    # Repeated setup within one process replaces the file handler.
    for h in [h for h in log.handlers if isinstance(h, RotatingFileHandler)]:
        log.removeHandler(h)
        h.close()

    log_file = lg.get("file")
    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(lg.get("rotate_bytes", 5 * 1024 * 1024)),
            backupCount=int(lg.get("rotate_keep", 3)),
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)

    # Image fetches go through requests/urllib3.
    if lg.get("http_debug"):
        logging.getLogger("urllib3").setLevel(logging.DEBUG)
        logging.getLogger("requests").setLevel(logging.DEBUG)

    log.info("%s, config %s", version_info(), cfg.path)
