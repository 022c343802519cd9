"""
Tag types for record definitions.
Used inside Annotated[type, ...] (or as dataclass field metadata) to name the
environment variable that supplies a field.
"""

# Field metadata key accepted as an alternative to Annotated[..., Env(...)]
METADATA_KEY = "env"


class Env:
    """Name of the environment variable that populates the field."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"Env({self.name!r})"
