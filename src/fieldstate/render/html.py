"""HTML rendering of field views with kida.

Templates are inline module strings rendered through a kida Environment. Field values,
errors and attribute values are escaped; ``html_attrs`` produces the
attribute list as ``Markup``.

Usage::

    from fieldstate.render import render_form

    html = render_form(form, action="/signup", submit_label="Sign up")
"""

import html
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache

from kida import Environment
from kida.template import Markup

from fieldstate.form import ManagedForm
from fieldstate.registry import FieldKind
from fieldstate.render.view import FieldView, field_views, submit_disabled

FIELD_TEMPLATE = """\
<div class="field{% if view.error %} field--error{% end %}">
{% if label %}<label for="{{ view.name }}">{{ label }}</label>{% end %}
{% if is_checkbox %}<input type="checkbox" name="{{ view.name }}" id="{{ view.name }}" value="{{ checked_value }}"{{ attrs | html_attrs }}{% if view.checked %} checked{% end %}>{% end %}
{% if is_radio %}{% for option in options %}<label><input type="radio" name="{{ view.name }}" value="{{ option.value }}"{{ attrs | html_attrs }}{% if option.checked %} checked{% end %}> {{ option.value }}</label>{% end %}{% end %}
{% if is_input %}<input type="{{ input_type }}" name="{{ view.name }}" id="{{ view.name }}" value="{{ view.value }}"{{ attrs | html_attrs }}>{% end %}
{% if view.error %}<span class="field-error">{{ view.error }}</span>{% end %}
</div>"""

FORM_TEMPLATE = """\
<form method="{{ method }}" action="{{ action }}">
{% for field_html in fields %}{{ field_html }}
{% end %}<button type="submit"{% if disabled %} disabled{% end %}>{{ submit_label }}</button>
</form>"""


@dataclass(frozen=True, slots=True)
class _Option:
    value: str
    checked: bool


def html_attrs(attrs: Mapping[str, str | bool] | None) -> Markup:
    """Render a mapping as HTML attributes.

    ``True`` becomes a bare boolean attribute; ``False`` and ``None``
    values are dropped.

    Example:
        <input{{ {"maxlength": "5", "required": True} | html_attrs }}>
        → <input maxlength="5" required>
    """
    if not attrs:
        return Markup("")
    parts: list[str] = []
    for name, value in attrs.items():
        if value is True:
            parts.append(f" {html.escape(name)}")
        elif value is False or value is None:
            continue
        else:
            parts.append(f' {html.escape(name)}="{html.escape(str(value))}"')
    return Markup("".join(parts))


def create_environment() -> Environment:
    """Create a kida Environment with the field filters registered."""
    env = Environment(autoescape=True)
    env.update_filters({"html_attrs": html_attrs})
    return env


@cache
def _default_environment() -> Environment:
    return create_environment()


def render_field(
    view: FieldView,
    env: Environment | None = None,
    *,
    checked_value: str = "true",
) -> str:
    """Render one field view to HTML.

    A ``type`` attr picks the input type; a ``label`` attr becomes a
    ``<label>`` element instead of an attribute.
    """
    env = env or _default_environment()
    attrs = dict(view.attrs)
    input_type = str(attrs.pop("type", "text"))
    label = attrs.pop("label", None)
    context = {
        "view": view,
        "attrs": attrs,
        "label": label,
        "input_type": input_type,
        "checked_value": checked_value,
        "is_checkbox": view.kind is FieldKind.CHECKBOX,
        "is_radio": view.kind is FieldKind.RADIO,
        "is_input": view.kind in (FieldKind.TEXT, FieldKind.COMPOSITE),
        "options": [_Option(choice, view.is_choice_checked(choice)) for choice in view.choices],
    }
    return env.from_string(FIELD_TEMPLATE).render(context).strip()


def render_form(
    form: ManagedForm,
    *,
    action: str = "",
    method: str = "post",
    submit_label: str = "Submit",
    touched_only: bool = True,
    env: Environment | None = None,
) -> str:
    """Render every registered field plus a submit button.

    The button is disabled while the form has any error.
    """
    env = env or _default_environment()
    fields = []
    for name, view in field_views(form, touched_only=touched_only).items():
        spec = form.registry[name]
        checked_value = spec.checked_value or form.config.checkbox_value
        fields.append(Markup(render_field(view, env, checked_value=checked_value)))
    context = {
        "fields": fields,
        "action": action,
        "method": method,
        "submit_label": submit_label,
        "disabled": submit_disabled(form),
    }
    return env.from_string(FORM_TEMPLATE).render(context).strip()
