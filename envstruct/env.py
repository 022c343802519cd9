"""
Typed environment lookups.

Each helper reads one variable on demand (no caching), applies the presence
rule and converts the raw text. Failures raise MissingEnvVarError or
EnvVarParseError.
"""

import os
import re
from typing import Mapping

from envstruct.errors import EnvVarParseError, MissingEnvVarError

_INT_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(raw: str) -> int:
    """Base-10 integer with optional sign. No whitespace, underscores or non-ASCII digits."""
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"invalid base-10 integer literal: {raw!r}")
    return int(raw)


def parse_bool(raw: str) -> bool:
    """Accepts 1, t, T, TRUE, true, True and 0, f, F, FALSE, false, False."""
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean literal: {raw!r}")


def _lookup(key: str, require_value_present: bool, env: Mapping[str, str] | None) -> str:
    if env is None:
        env = os.environ
    value = env.get(key) or ""
    if require_value_present and value == "":
        raise MissingEnvVarError(key)
    return value


def get_env_str(
    key: str,
    require_value_present: bool,
    env: Mapping[str, str] | None = None,
) -> str:
    return _lookup(key, require_value_present, env)


def get_env_int(
    key: str,
    require_value_present: bool,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _lookup(key, require_value_present, env)
    try:
        return parse_int(raw)
    except ValueError as e:
        raise EnvVarParseError(key, int, e) from e


def get_env_bool(
    key: str,
    require_value_present: bool,
    env: Mapping[str, str] | None = None,
) -> bool:
    raw = _lookup(key, require_value_present, env)
    try:
        return parse_bool(raw)
    except ValueError as e:
        raise EnvVarParseError(key, bool, e) from e
