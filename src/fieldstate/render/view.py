"""Per-field views — the render-ready projection of a form's state.

Pure functions over the query API; nothing here mutates the form or
walks a UI tree. A renderer asks for views and turns them into whatever
its UI layer needs (see ``fieldstate.render.html`` for HTML).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from fieldstate.form import ManagedForm
from fieldstate.registry import FieldKind
from fieldstate.state import Touched


@dataclass(frozen=True, slots=True)
class FieldView:
    """Everything needed to render one field.

    ``attrs`` holds the registry's passthrough attributes merged with
    ``maxlength`` and ``required`` when those rules are configured.
    ``checked`` applies to checkboxes; radios compare each choice with
    ``value`` (see ``is_choice_checked``).
    """

    name: str
    value: str = ""
    error: str | None = None
    kind: FieldKind = FieldKind.TEXT
    attrs: Mapping[str, str | bool] = field(default_factory=dict)
    choices: tuple[str, ...] = ()
    checked: bool = False

    def is_choice_checked(self, choice: str) -> bool:
        return self.value == choice


def field_view(form: ManagedForm, name: str, *, touched_only: bool = True) -> FieldView:
    """Build the view for *name*.

    With *touched_only* (the default), the error is shown only once the
    field's status is ``touched``.
    """
    status = form.touched_status(name)
    spec = form.registry[name]
    value = form.get_values().get(name, "")

    error = None
    errors = form.state.errors
    if errors is not None and (not touched_only or status is Touched.TOUCHED):
        error = errors.get(name)

    attrs: dict[str, str | bool] = dict(spec.attrs)
    if spec.rules is not None:
        if spec.rules.max_length:
            attrs["maxlength"] = str(spec.rules.max_length)
        if spec.rules.required:
            attrs["required"] = True

    return FieldView(
        name=name,
        value=value,
        error=error,
        kind=spec.kind,
        attrs=MappingProxyType(attrs),
        choices=spec.choices,
        checked=spec.kind is FieldKind.CHECKBOX and bool(value),
    )


def field_views(form: ManagedForm, *, touched_only: bool = True) -> dict[str, FieldView]:
    """Views for every registered field, in registry order."""
    return {name: field_view(form, name, touched_only=touched_only) for name in form.registry}


def submit_disabled(form: ManagedForm) -> bool:
    """True while any field is violated."""
    return form.get_errors() is not None
