"""Change notifier — synchronous callback after every committed transition.

The callback receives the form itself (so it can re-query fresh state)
and the name of the field whose event caused the transition. Construction,
``revalidate()`` and ``reset()`` pass ``None``: no single field changed.

No batching, debouncing, or deferral. Exceptions raised by the callback
propagate to whoever sent the event; the state is already committed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fieldstate.form import ManagedForm

type ChangeCallback = Callable[[ManagedForm, str | None], None]


class Notifier:
    """Wraps an optional change callback."""

    __slots__ = ("_callback",)

    def __init__(self, callback: ChangeCallback | None = None) -> None:
        self._callback = callback

    def fire(self, form: ManagedForm, name: str | None = None) -> None:
        if self._callback is not None:
            self._callback(form, name)
