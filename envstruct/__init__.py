"""envstruct: populate dataclass records from environment variables via Env tags."""

from envstruct.base import from_env, populate
from envstruct.env import get_env_bool, get_env_int, get_env_str, parse_bool, parse_int
from envstruct.errors import (
    EnvStructError,
    EnvVarParseError,
    MissingEnvVarError,
    PopulateError,
)
from envstruct.tags import Env

__all__ = [
    "populate",
    "from_env",
    "Env",
    "EnvStructError",
    "MissingEnvVarError",
    "EnvVarParseError",
    "PopulateError",
    "get_env_str",
    "get_env_int",
    "get_env_bool",
    "parse_int",
    "parse_bool",
]
