"""
Field descriptor tables for record types.

A record type is described once, as an ordered tuple of FieldSpec entries in
dataclass declaration order, and the result is cached per type. The cache holds
record types weakly, so classes built on the fly can still be collected.
"""

from dataclasses import Field, dataclass, fields, is_dataclass
from enum import Enum
from typing import Annotated, Any, get_args, get_origin, get_type_hints
from weakref import WeakKeyDictionary

from envstruct.tags import METADATA_KEY, Env


class FieldKind(Enum):
    RECORD = "record"
    STR = "str"
    INT = "int"
    BOOL = "bool"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldSpec:
    """How one field of a record is populated."""

    name: str
    kind: FieldKind
    key: str = ""
    record_type: type | None = None


_DESCRIPTORS: WeakKeyDictionary[type, tuple[FieldSpec, ...]] = WeakKeyDictionary()


def is_record_type(hint: Any) -> bool:
    return isinstance(hint, type) and is_dataclass(hint)


def _scalar_kind(hint: Any) -> FieldKind:
    # bool is checked by identity, so it never falls through to int
    if hint is str:
        return FieldKind.STR
    if hint is bool:
        return FieldKind.BOOL
    if hint is int:
        return FieldKind.INT
    return FieldKind.UNSUPPORTED


def _field_env_name(metadata: list[Any], raw_metadata: Any) -> str:
    """Resolve the env var name from Env tags, then from the "env" metadata key."""
    for m in metadata:
        if isinstance(m, Env):
            return m.name
    value = raw_metadata.get(METADATA_KEY) if raw_metadata else None
    return value if isinstance(value, str) else ""


def _resolve_field_hint(record_type: type, f: Field) -> Any:
    """Resolve one field's annotation against the record's module and class namespace."""
    if not isinstance(f.type, str):
        return f.type
    holder = type(
        record_type.__name__,
        (),
        {"__annotations__": {f.name: f.type}, "__module__": record_type.__module__},
    )
    try:
        hints = get_type_hints(holder, localns=dict(vars(record_type)), include_extras=True)
        return hints[f.name]
    except NameError as e:
        # Nested records declared in a function scope are still known by their factory
        if is_record_type(f.default_factory):
            return f.default_factory
        raise TypeError(
            f"cannot resolve type {f.type!r} of {record_type.__name__}.{f.name}"
        ) from e


def _resolve_hints(record_type: type) -> dict[str, Any]:
    try:
        return get_type_hints(record_type, include_extras=True)
    except NameError:
        # Some annotation names a type only visible where the record was defined
        return {f.name: _resolve_field_hint(record_type, f) for f in fields(record_type)}


def describe(record_type: type) -> tuple[FieldSpec, ...]:
    """
    Build the descriptor table for a dataclass type.

    - Annotated[T, Env("NAME")] and field(metadata={"env": "NAME"}) both name
      the variable; the Annotated tag wins when both are present.
    - Fields whose type is a dataclass become RECORD entries regardless of tags.
    - Scalars other than str, int and bool are UNSUPPORTED.
    - Raises TypeError if an annotation cannot be resolved.
    """
    if not is_record_type(record_type):
        raise TypeError(f"{record_type!r} is not a dataclass type")

    cached = _DESCRIPTORS.get(record_type)
    if cached is not None:
        return cached

    hints = _resolve_hints(record_type)
    specs: list[FieldSpec] = []
    for f in fields(record_type):
        hint = hints.get(f.name, f.type)
        metadata = list(f.metadata.values()) if f.metadata else []
        if get_origin(hint) is Annotated:
            args = get_args(hint)
            hint = args[0]
            metadata = list(args[1:]) + metadata

        if is_record_type(hint):
            specs.append(FieldSpec(f.name, FieldKind.RECORD, record_type=hint))
            continue

        specs.append(
            FieldSpec(f.name, _scalar_kind(hint), key=_field_env_name(metadata, f.metadata))
        )
    described = tuple(specs)
    _DESCRIPTORS[record_type] = described
    return described
