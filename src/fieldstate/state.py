"""Form state and its transitions.

``FormState`` is frozen and replaced wholesale on every transition. The
functions here are pure: they take a state and return the next one, or the
same object when nothing changed. ``ManagedForm`` owns the current state
and commits what these functions return.

Per-field touched status only moves forward::

    untouched --change--> modified --blur--> touched

``touched`` is absorbing. ``untouched`` is stored as absence from the
``touched`` mapping.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from fieldstate.config import FormConfig
from fieldstate.errors import UnknownFieldError
from fieldstate.registry import Registry
from fieldstate.validation import evaluate


class Touched(StrEnum):
    """A field's interaction status."""

    UNTOUCHED = "untouched"
    MODIFIED = "modified"
    TOUCHED = "touched"


def _frozen(data: Mapping) -> Mapping:
    return MappingProxyType(dict(data))


@dataclass(frozen=True, slots=True)
class FormState:
    """Snapshot of one form's values, errors, and touched statuses.

    ``values`` never holds an empty string; a cleared field is absent.
    ``errors`` is ``None`` when nothing is violated.
    """

    values: Mapping[str, str] = field(default_factory=dict)
    errors: Mapping[str, str] | None = None
    touched: Mapping[str, Touched] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _frozen(self.values))
        object.__setattr__(self, "touched", _frozen(self.touched))
        if self.errors is not None:
            object.__setattr__(self, "errors", _frozen(self.errors) if self.errors else None)

    def status(self, name: str) -> Touched:
        """Touched status for *name* (``UNTOUCHED`` when absent)."""
        return self.touched.get(name, Touched.UNTOUCHED)


def _require(registry: Registry, name: str) -> None:
    if name not in registry:
        raise UnknownFieldError(name)


def initial_state(
    defaults: Mapping[str, str] | None,
    registry: Registry,
    config: FormConfig | None = None,
) -> FormState:
    """Build the first state for a form.

    Every non-empty default with a registry entry starts ``touched`` so
    its violations show immediately.
    """
    values = {name: value for name, value in (defaults or {}).items() if value}
    touched = {name: Touched.TOUCHED for name in values if name in registry}
    return FormState(
        values=values,
        errors=evaluate(values, registry, config),
        touched=touched,
    )


def apply_change(
    state: FormState,
    name: str,
    value: str | None,
    registry: Registry,
    config: FormConfig | None = None,
) -> FormState:
    """Set *name* to *value* (removing it when empty) and revalidate."""
    _require(registry, name)
    values = dict(state.values)
    if value:
        values[name] = value
    else:
        values.pop(name, None)

    touched = dict(state.touched)
    touched.setdefault(name, Touched.MODIFIED)

    return FormState(
        values=values,
        errors=evaluate(values, registry, config),
        touched=touched,
    )


def apply_blur(state: FormState, name: str, registry: Registry, *, native: bool) -> FormState:
    """Mark *name* touched if it was modified, or if its control is not native.

    A pristine native field stays untouched on blur. A composite widget
    cannot report edits, so blur alone is enough for it. Returns *state*
    itself when nothing changes.
    """
    _require(registry, name)
    current = state.status(name)
    if current is Touched.TOUCHED:
        return state
    if current is Touched.UNTOUCHED and native:
        return state

    touched = dict(state.touched)
    touched[name] = Touched.TOUCHED
    return FormState(values=state.values, errors=state.errors, touched=touched)


def apply_revalidate(
    state: FormState,
    registry: Registry,
    config: FormConfig | None = None,
) -> FormState:
    """Recompute errors from the current values; values and touched are kept."""
    return FormState(
        values=state.values,
        errors=evaluate(state.values, registry, config),
        touched=state.touched,
    )
