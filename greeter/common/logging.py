# greeter/common/logging.py
from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _off_stdout(logger: logging.Logger) -> None:
    # stdout carries only program output
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and h.stream in (sys.stdout, sys.__stdout__):
            h.setStream(sys.stderr)


def get_logger(name: str = "greeter", level: int = logging.INFO) -> logging.Logger:
    """
    Return a named logger whose output never lands on stdout.
    If no handlers are set, we add a stderr basicConfig once; handlers someone
    else attached to stdout are moved over to stderr.
    """
    logger = logging.getLogger(name)
    root = logging.getLogger()
    if not root.handlers and not logger.handlers:
        logging.basicConfig(level=level, format=_FORMAT, stream=sys.stderr)
    else:
        _off_stdout(root)
        _off_stdout(logger)
    logger.setLevel(level)
    return logger
