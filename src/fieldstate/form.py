"""ManagedForm — owns one form's state and exposes the query API.

Events from the rendering layer go in through ``on_change``, ``on_blur``
and ``on_submit``. Each event computes a complete new ``FormState`` and
commits it with a single assignment, then fires the change callback.

Usage::

    form = ManagedForm(
        registry,
        defaults={"email": "a@b.com"},
        on_change=lambda form, name: rerender(form),
        on_submit=lambda values, dirty: save(values),
    )
    form.on_change("email", "bad")
    form.on_blur("email")
    form.get_errors(touched_only=True)  # {"email": "Input is not valid."}
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from fieldstate.config import FormConfig
from fieldstate.errors import UnknownFieldError
from fieldstate.notify import ChangeCallback, Notifier
from fieldstate.registry import FieldKind, FieldSpec, Registry
from fieldstate.state import (
    FormState,
    Touched,
    apply_blur,
    apply_change,
    apply_revalidate,
    initial_state,
)

logger = logging.getLogger("fieldstate.form")

type SubmitCallback = Callable[[Mapping[str, str], bool], None]


class ManagedForm:
    """Live state for one form instance.

    Args:
        registry: Field registrations, fixed for the form's lifetime.
        defaults: Initial values. Non-empty defaults start ``touched``.
        on_change: Called as ``on_change(form, name)`` after every
            committed transition, and once during construction with
            ``name=None``.
        on_submit: Called as ``on_submit(values, dirty)`` by ``on_submit()``.
        config: Messages and behavior switches.
    """

    __slots__ = ("_config", "_defaults", "_notifier", "_on_submit", "_registry", "_state")

    def __init__(
        self,
        registry: Registry,
        defaults: Mapping[str, str] | None = None,
        *,
        on_change: ChangeCallback | None = None,
        on_submit: SubmitCallback | None = None,
        config: FormConfig | None = None,
    ) -> None:
        self._registry = registry
        self._defaults: Mapping[str, str] = MappingProxyType(dict(defaults or {}))
        self._config = config or FormConfig()
        self._notifier = Notifier(on_change)
        self._on_submit = on_submit
        self._state = initial_state(self._defaults, registry, self._config)
        logger.debug(
            "Form initialized: values=%r errors=%r",
            dict(self._state.values),
            None if self._state.errors is None else dict(self._state.errors),
        )
        # Always fired once so the owner can keep a reference before any event
        self._notifier.fire(self, None)

    # -- Properties --------------------------------------------------------

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def defaults(self) -> Mapping[str, str]:
        return self._defaults

    @property
    def config(self) -> FormConfig:
        return self._config

    @property
    def state(self) -> FormState:
        """The current committed state."""
        return self._state

    # -- Events ------------------------------------------------------------

    def on_change(self, name: str, value: str | None = None, *, checked: bool | None = None) -> None:
        """Apply a change event for *name*.

        Checkbox fields take *checked*: checked stores the field's
        ``checked_value``, else *value*, else ``"true"``; unchecked
        removes the value.
        Every other kind stores *value*; an empty value removes the key.
        """
        spec = self._spec(name)
        candidate = self._candidate(spec, value, checked)
        self._commit(apply_change(self._state, name, candidate, self._registry, self._config), name)

    def on_blur(self, name: str, native: bool | None = None) -> None:
        """Apply a blur event for *name*.

        *native* is whether the originating control has a native tag; it
        defaults to the field's declared kind (``composite`` is not native).
        No notification fires when the blur changes nothing.
        """
        spec = self._spec(name)
        if native is None:
            native = spec.native
        next_state = apply_blur(self._state, name, self._registry, native=native)
        if next_state is self._state:
            return
        self._commit(next_state, name)

    def on_submit(self) -> None:
        """Hand current values and dirtiness to the submit callback.

        No validation gating happens here; blocking submission on errors
        is up to the rendering layer (see ``submit_disabled``).
        """
        if self._on_submit is not None:
            self._on_submit(self._state.values, self.is_dirty())

    def revalidate(self) -> None:
        """Recompute errors without touching values or touched statuses."""
        self._commit(apply_revalidate(self._state, self._registry, self._config), None)

    def reset(self) -> None:
        """Return to the construction state (defaults, seeded touched)."""
        self._commit(initial_state(self._defaults, self._registry, self._config), None)

    # -- Query API ---------------------------------------------------------

    def is_dirty(self) -> bool:
        """True if any current value differs from its construction default.

        Only keys present in ``values`` are compared, so a field cleared
        back to empty does not count unless ``dirty_includes_cleared`` is
        set in the config.
        """
        values = self._state.values
        if self._config.dirty_includes_cleared:
            keys = set(values) | set(self._defaults)
            return any((values.get(k) or "") != (self._defaults.get(k) or "") for k in keys)
        return any(values[k] != self._defaults.get(k) for k in values)

    def get_errors(self, touched_only: bool = False) -> Mapping[str, str] | None:
        """Current errors, or ``None`` when nothing is violated.

        With *touched_only*, keep only fields whose status is ``touched``;
        ``None`` if none of those has an error.
        """
        errors = self._state.errors
        if errors is None or not touched_only:
            return errors
        filtered = {
            name: errors[name]
            for name, status in self._state.touched.items()
            if status is Touched.TOUCHED and name in errors
        }
        return filtered or None

    def get_values(self) -> Mapping[str, str]:
        """Current values. A missing key means "no value"."""
        return self._state.values

    def touched_status(self, name: str) -> Touched:
        self._spec(name)
        return self._state.status(name)

    # -- Internals ---------------------------------------------------------

    def _spec(self, name: str) -> FieldSpec:
        spec = self._registry.spec(name)
        if spec is None:
            raise UnknownFieldError(name)
        return spec

    def _candidate(self, spec: FieldSpec, value: str | None, checked: bool | None) -> str | None:
        if spec.kind is FieldKind.CHECKBOX:
            if checked is None:
                # bare value payload: truthy means checked and carries the value
                return (spec.checked_value or value) if value else None
            if not checked:
                return None
            return spec.checked_value or value or self._config.checkbox_value
        return value

    def _commit(self, state: FormState, name: str | None) -> None:
        self._state = state
        logger.debug(
            "Committed %s: values=%r errors=%r touched=%r",
            name or "<form>",
            dict(state.values),
            None if state.errors is None else dict(state.errors),
            {k: str(v) for k, v in state.touched.items()},
        )
        self._notifier.fire(self, name)

    def __repr__(self) -> str:
        return f"ManagedForm(fields={list(self._registry)!r}, dirty={self.is_dirty()})"
