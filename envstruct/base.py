"""
Annotation-driven record populator.
Walks a dataclass instance depth first in declaration order, reads the env var
named by each field's Env tag, converts it to the field type and assigns it in place.
"""

import logging
from dataclasses import is_dataclass
from typing import Any, Callable, Mapping, TypeVar

from envstruct.env import get_env_bool, get_env_int, get_env_str
from envstruct.errors import EnvStructError, PopulateError
from envstruct.schema import FieldKind, describe, is_record_type

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FETCHERS: dict[FieldKind, Callable[..., Any]] = {
    FieldKind.STR: get_env_str,
    FieldKind.INT: get_env_int,
    FieldKind.BOOL: get_env_bool,
}


def _check_target(target: Any, label: str) -> None:
    if isinstance(target, type) or not is_dataclass(target):
        raise TypeError(f"{label} must be a dataclass instance, got {type(target).__name__}")
    if type(target).__dataclass_params__.frozen:
        raise TypeError(
            f"{label} is a frozen dataclass ({type(target).__name__}) and cannot be populated"
        )


def populate(
    target: Any,
    require_value_present: bool,
    env: Mapping[str, str] | None = None,
) -> None:
    """
    Populate target's Env-tagged fields from the environment, recursing into nested records.

    - target: a mutable dataclass instance, modified in place
    - require_value_present: if True, an unset or empty variable raises MissingEnvVarError;
      if False, the empty string is converted instead (str fields get "", int and bool
      fields raise EnvVarParseError)
    - env: mapping to read from (default: os.environ), queried once per field
    - Raises: PopulateError wrapping the first failure; TypeError on an unusable target

    Fields assigned before a failure keep their new values.
    """
    _check_target(target, "populate target")
    record = type(target).__name__

    for spec in describe(type(target)):
        if spec.kind is FieldKind.RECORD:
            nested = getattr(target, spec.name)
            _check_target(nested, f"{record}.{spec.name}")
            if not isinstance(nested, spec.record_type):
                raise TypeError(
                    f"{record}.{spec.name} must be a {spec.record_type.__name__} instance, "
                    f"got {type(nested).__name__}"
                )
            try:
                populate(nested, require_value_present, env)
            except EnvStructError as e:
                raise PopulateError(record, spec.name, e) from e
            continue

        if not spec.key:
            continue

        fetch = _FETCHERS.get(spec.kind)
        if fetch is None:
            logger.debug("Skipping %s.%s (%s): unsupported field type", record, spec.name, spec.key)
            continue

        try:
            value = fetch(spec.key, require_value_present, env)
        except EnvStructError as e:
            raise PopulateError(record, spec.name, e) from e
        setattr(target, spec.name, value)
        logger.debug("Populated %s.%s from %s", record, spec.name, spec.key)


def from_env(
    schema_class: type[T],
    require_value_present: bool = True,
    env: Mapping[str, str] | None = None,
) -> T:
    """Instantiate schema_class with no arguments, populate it and return it."""
    if not is_record_type(schema_class):
        raise TypeError("Schema must be a dataclass")
    instance = schema_class()
    populate(instance, require_value_present, env)
    return instance
