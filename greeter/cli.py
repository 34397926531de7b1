# greeter/cli.py
from __future__ import annotations

import argparse
from typing import List, Optional

from pydantic import ValidationError

from greeter import __version__
from greeter.common.logging import get_logger
from greeter.common.settings import Settings, get_settings
from greeter.domain.entities.person import Person

DEFAULT_NAME = "John"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="greeter", description="Say hello to a person.")
    parser.add_argument("--name", default=DEFAULT_NAME, help=f"who to greet (default: {DEFAULT_NAME})")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_settings() -> tuple[Settings, Optional[ValidationError]]:
    """Bad GREETER_* values fall back to defaults; they must not stop the greeting."""
    try:
        return get_settings(), None
    except ValidationError as exc:
        return Settings.model_construct(), exc


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg, err = _load_settings()
    logger = get_logger(cfg.app_name, level=cfg.log_level_value)
    if err is not None:
        logger.warning("ignoring invalid settings, using defaults: %s", err)

    person = Person.new(args.name)
    logger.debug("greeting %r", person.name)
    person.hello()
    return 0
