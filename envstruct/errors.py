"""
Recoverable errors raised while populating records from the environment.

Usage errors (a non-dataclass target, a frozen record) are not part of this
taxonomy; they surface as plain TypeError.
"""


class EnvStructError(Exception):
    """Base class for missing and malformed environment values."""


class MissingEnvVarError(EnvStructError):
    """Raised when a required environment variable is unset or empty."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"environment variable '{key}' is missing or blank")


class EnvVarParseError(EnvStructError):
    """Raised when an environment value cannot be converted to the field type."""

    def __init__(self, key: str, target_type: type, reason: Exception):
        self.key = key
        self.target_type = target_type
        self.reason = reason
        super().__init__(
            f"error parsing environment variable '{key}' "
            f"to type '{target_type.__name__}': {reason}"
        )


class PopulateError(EnvStructError):
    """One layer of context added by each populate() frame an error passes through."""

    def __init__(self, record: str, field: str, cause: EnvStructError):
        self.record = record
        self.field = field
        self.cause = cause
        super().__init__(f"in populate({record}.{field}): {cause}")

    @property
    def root_cause(self) -> EnvStructError:
        """The innermost error: a MissingEnvVarError or EnvVarParseError."""
        err: EnvStructError = self
        while isinstance(err, PopulateError):
            err = err.cause
        return err

    @property
    def path(self) -> list[str]:
        """Field names from the outermost record down to the failing field."""
        names = []
        err: EnvStructError = self
        while isinstance(err, PopulateError):
            names.append(err.field)
            err = err.cause
        return names
