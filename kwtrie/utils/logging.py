from __future__ import annotations

import logging
import sys

from . import paths

ROOT_LOGGER = "kwtrie"


def setup_logging(name: str, level: str = "INFO", to_file: bool = False, file_key: str = "artifacts.logs") -> logging.Logger:
    """Configure the package logger once per command and return the command's logger.

    - level: string level (e.g., INFO, DEBUG), applied to every kwtrie.* logger
    - to_file: if True, also write logs to <name>.log under the directory configured by file_key
    - file_key: dot key into configs/paths.yaml to locate the logs directory

    Records go to stderr; stdout is reserved for match output.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.propagate = False

    # Repeated calls must not stack handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    lvl = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(lvl)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if to_file:
        log_path = paths.expand(file_key, f"{name}.log")
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return get_logger(name)


def get_logger(name: str) -> logging.Logger:
    """Return the kwtrie.<name> logger; level and handlers come from setup_logging."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
