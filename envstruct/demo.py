"""
Demonstration entry point: sets four env vars, populates a two-level record
from them and prints the result.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from typing import Annotated, MutableMapping, Sequence

from envstruct.base import populate
from envstruct.errors import EnvStructError
from envstruct.logging_config import setup_logging
from envstruct.tags import Env

logger = logging.getLogger(__name__)

DEMO_ENVIRONMENT = {
    "ENV": "dev",
    "TEXT_VALUE": "this is text",
    "BOOL_VALUE": "true",
    "INT_VALUE": "50",
}


@dataclass
class Text:
    text_value: Annotated[str, Env("TEXT_VALUE")] = ""
    bool_value: Annotated[bool, Env("BOOL_VALUE")] = False
    int_value: Annotated[int, Env("INT_VALUE")] = 0


@dataclass
class ConfigCustom:
    """Two-level record used by the demo."""

    env: Annotated[str, Env("ENV")] = ""
    text: Text = field(default_factory=Text)


def set_demo_environment(environ: MutableMapping[str, str] | None = None) -> None:
    """Overwrite the demo variables in ``environ`` (default: os.environ)."""
    if environ is None:
        environ = os.environ
    environ.update(DEMO_ENVIRONMENT)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Populate a nested record from environment variables")
    p.add_argument(
        "--allow-missing",
        action="store_true",
        help="Treat unset variables as empty strings instead of failing",
    )
    p.add_argument(
        "--keep-env",
        action="store_true",
        help="Do not set the demo variables; read the current environment as is",
    )
    p.add_argument(
        "--log-level", default=None, help="Log level (default: ENVSTRUCT_LOG_LEVEL or INFO)"
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)

    if not args.keep_env:
        set_demo_environment()

    config = ConfigCustom()
    try:
        populate(config, require_value_present=not args.allow_missing)
    except EnvStructError as e:
        logger.error("%s", e)
        return 1

    print(config)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
