"""Field registry — static per-form configuration.

A ``Registry`` maps field names to ``FieldSpec`` entries and is fixed for
the lifetime of a form. Patterns are compiled when ``Rules`` is built, so
a broken regular expression raises ``ConfigurationError`` at startup.

Build one directly::

    registry = Registry({
        "email": FieldSpec(rules=Rules(required=True, pattern=r"^.+@.+$")),
        "terms": FieldSpec(kind=FieldKind.CHECKBOX, rules=Rules(required=True)),
    })

or from plain dictionaries (e.g. loaded from JSON)::

    registry = Registry.from_mapping({
        "email": {"rules": {"required": True, "data-msg-required": "Email?"}},
    })
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from fieldstate.errors import ConfigurationError

logger = logging.getLogger("fieldstate.registry")


class FieldKind(StrEnum):
    """How a field's control reports changes and focus."""

    TEXT = "text"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    # Opaque wrapped widget; cannot report an interim "modified" state
    COMPOSITE = "composite"


@dataclass(frozen=True, slots=True)
class Rules:
    """Declarative constraints for one field.

    ``max_length`` is never evaluated; it only becomes a ``maxlength``
    render attribute.
    """

    required: bool = False
    pattern: str | None = None
    min_length: int | None = None
    max_length: int | None = None
    required_message: str | None = None
    pattern_message: str | None = None
    compiled: re.Pattern[str] | None = field(init=False, default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        for label, bound in (("min_length", self.min_length), ("max_length", self.max_length)):
            if bound is None:
                continue
            if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
                msg = f"{label} must be a non-negative integer, got {bound!r}"
                raise ConfigurationError(msg)
        if self.pattern is not None and not isinstance(self.pattern, str):
            msg = f"pattern must be a string, got {type(self.pattern).__name__}"
            raise ConfigurationError(msg)
        if self.pattern:
            try:
                compiled = re.compile(self.pattern)
            except re.error as exc:
                msg = f"Invalid pattern {self.pattern!r}: {exc}"
                raise ConfigurationError(msg) from exc
            object.__setattr__(self, "compiled", compiled)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Rules:
        """Build rules from a loose dictionary.

        Accepts both snake_case keys and the HTML-ish spellings
        (``minLength``, ``maxLength``, ``data-msg-required``,
        ``data-msg-pattern``).
        """
        if not isinstance(data, Mapping):
            msg = f"rules must be a mapping, got {type(data).__name__}"
            raise ConfigurationError(msg)
        required = data.get("required", False)
        if not isinstance(required, bool):
            msg = f"required must be a boolean, got {required!r}"
            raise ConfigurationError(msg)
        return cls(
            required=required,
            pattern=data.get("pattern") or None,
            min_length=_first(data, "min_length", "minLength"),
            max_length=_first(data, "max_length", "maxLength"),
            required_message=_first(data, "required_message", "data-msg-required"),
            pattern_message=_first(data, "pattern_message", "data-msg-pattern"),
        )


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Registration for one field: passthrough attrs, rules, and control kind."""

    attrs: Mapping[str, str] = field(default_factory=dict)
    rules: Rules | None = None
    kind: FieldKind = FieldKind.TEXT
    checked_value: str | None = None
    choices: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))
        object.__setattr__(self, "kind", FieldKind(self.kind))

    @property
    def native(self) -> bool:
        """False for composite widgets without a native identifiable tag."""
        return self.kind is not FieldKind.COMPOSITE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FieldSpec:
        if not isinstance(data, Mapping):
            msg = f"field entry must be a mapping, got {type(data).__name__}"
            raise ConfigurationError(msg)
        attrs = data.get("attrs") or {}
        if not isinstance(attrs, Mapping):
            msg = f"attrs must be a mapping, got {type(attrs).__name__}"
            raise ConfigurationError(msg)
        raw_rules = data.get("rules")
        kind = data.get("kind", FieldKind.TEXT)
        try:
            kind = FieldKind(kind)
        except ValueError as exc:
            allowed = ", ".join(k.value for k in FieldKind)
            msg = f"Unknown field kind {kind!r} (expected one of: {allowed})"
            raise ConfigurationError(msg) from exc
        return cls(
            attrs={str(k): str(v) for k, v in attrs.items()},
            rules=Rules.from_mapping(raw_rules) if raw_rules is not None else None,
            kind=kind,
            checked_value=data.get("checked_value"),
            choices=tuple(str(c) for c in data.get("choices", ())),
        )


class Registry(Mapping[str, FieldSpec]):
    """Immutable mapping of field name to ``FieldSpec``."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, FieldSpec] | None = None) -> None:
        fields = dict(fields or {})
        for name, spec in fields.items():
            if not isinstance(spec, FieldSpec):
                msg = f"Field {name!r}: expected FieldSpec, got {type(spec).__name__}"
                raise ConfigurationError(msg)
        object.__setattr__(self, "_fields", fields)
        logger.debug("Registry built with %d field(s): %s", len(fields), ", ".join(fields))

    @classmethod
    def from_mapping(cls, model: Mapping[str, Any]) -> Registry:
        """Build a registry from plain dictionaries."""
        if not isinstance(model, Mapping):
            msg = f"model must be a mapping, got {type(model).__name__}"
            raise ConfigurationError(msg)
        fields: dict[str, FieldSpec] = {}
        for name, entry in model.items():
            try:
                fields[name] = FieldSpec.from_mapping(entry)
            except ConfigurationError as exc:
                msg = f"Field {name!r}: {exc}"
                raise ConfigurationError(msg) from exc
        return cls(fields)

    def spec(self, name: str) -> FieldSpec | None:
        """Return the registration for *name*, or None."""
        return self._fields.get(name)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Registry is immutable"
        raise AttributeError(msg)

    def __getitem__(self, name: str) -> FieldSpec:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Registry({list(self._fields)!r})"
