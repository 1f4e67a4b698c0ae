"""fieldstate exception hierarchy.

Validation failures are never raised; they are data on ``FormState.errors``.
These exceptions cover configuration faults and misuse of the engine.
"""


class FieldStateError(Exception):
    """Base for all fieldstate-specific errors."""


class ConfigurationError(FieldStateError):
    """Raised when a field registry is malformed.

    Typically raised while building a ``Registry``, so a bad pattern fails
    at startup instead of on the first keystroke.
    """


class UnknownFieldError(FieldStateError, KeyError):  # noqa: N818 — mirrors KeyError
    """An event named a field that is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown field: {name!r}")

    def __str__(self) -> str:
        return f"Unknown field: {self.name!r}"
