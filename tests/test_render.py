"""Tests for fieldstate.render — field views and kida HTML rendering."""

import pytest
from kida import Environment

from fieldstate.errors import UnknownFieldError
from fieldstate.form import ManagedForm
from fieldstate.registry import FieldKind, FieldSpec, Registry, Rules
from fieldstate.render import (
    create_environment,
    field_view,
    field_views,
    html_attrs,
    render_field,
    render_form,
    submit_disabled,
)
from fieldstate.render.view import FieldView


def _registry() -> Registry:
    return Registry(
        {
            "email": FieldSpec(
                attrs={"placeholder": "you@example.com", "type": "email"},
                rules=Rules(required=True, pattern="^.+@.+$", max_length=40),
            ),
            "terms": FieldSpec(kind=FieldKind.CHECKBOX, checked_value="yes"),
            "plan": FieldSpec(kind=FieldKind.RADIO, choices=("free", "pro")),
            "bio": FieldSpec(),
        }
    )


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


class TestFieldView:
    def test_unknown_field(self) -> None:
        with pytest.raises(UnknownFieldError):
            field_view(ManagedForm(_registry()), "nickname")

    def test_absent_value_is_empty_string(self) -> None:
        view = field_view(ManagedForm(_registry()), "bio")
        assert view.value == ""

    def test_attrs_merge_rules(self) -> None:
        view = field_view(ManagedForm(_registry()), "email")
        assert dict(view.attrs) == {
            "placeholder": "you@example.com",
            "type": "email",
            "maxlength": "40",
            "required": True,
        }

    def test_error_hidden_until_touched(self) -> None:
        form = ManagedForm(_registry())
        form.on_change("email", "bad")
        assert field_view(form, "email").error is None
        assert field_view(form, "email", touched_only=False).error == "Input is not valid."
        form.on_blur("email")
        assert field_view(form, "email").error == "Input is not valid."

    def test_checkbox_checked(self) -> None:
        form = ManagedForm(_registry())
        assert field_view(form, "terms").checked is False
        form.on_change("terms", checked=True)
        assert field_view(form, "terms").checked is True

    def test_radio_choice(self) -> None:
        form = ManagedForm(_registry(), {"plan": "pro"})
        view = field_view(form, "plan")
        assert view.is_choice_checked("pro")
        assert not view.is_choice_checked("free")

    def test_field_views_registry_order(self) -> None:
        views = field_views(ManagedForm(_registry()))
        assert list(views) == ["email", "terms", "plan", "bio"]
        assert all(isinstance(v, FieldView) for v in views.values())

    def test_view_does_not_mutate_form(self) -> None:
        form = ManagedForm(_registry())
        before = form.state
        field_views(form)
        assert form.state is before


class TestSubmitDisabled:
    def test_disabled_while_errors(self) -> None:
        form = ManagedForm(_registry())
        assert submit_disabled(form) is True
        form.on_change("email", "a@b")
        assert submit_disabled(form) is False


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


class TestHtmlAttrs:
    def test_values_and_booleans(self) -> None:
        assert str(html_attrs({"maxlength": "5", "required": True})) == ' maxlength="5" required'

    def test_false_and_none_dropped(self) -> None:
        assert str(html_attrs({"disabled": False, "title": None})) == ""  # type: ignore[dict-item]

    def test_escapes(self) -> None:
        assert "&lt;" in str(html_attrs({"title": "<b>"}))

    def test_empty(self) -> None:
        assert str(html_attrs(None)) == ""


class TestRenderField:
    def test_text_input(self) -> None:
        html = render_field(field_view(ManagedForm(_registry(), {"email": "a@b"}), "email"))
        assert '<input type="email"' in html
        assert 'name="email"' in html
        assert 'value="a@b"' in html
        assert 'maxlength="40"' in html
        assert " required" in html
        assert "field--error" not in html

    def test_error_display(self) -> None:
        form = ManagedForm(_registry(), {"email": "bad"})
        html = render_field(field_view(form, "email"))
        assert "field--error" in html
        assert '<span class="field-error">Input is not valid.</span>' in html

    def test_value_escaped(self) -> None:
        form = ManagedForm(_registry(), {"bio": "<script>"})
        html = render_field(field_view(form, "bio"))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_checkbox(self) -> None:
        form = ManagedForm(_registry())
        form.on_change("terms", checked=True)
        html = render_field(field_view(form, "terms"), checked_value="yes")
        assert 'type="checkbox"' in html
        assert 'value="yes"' in html
        assert " checked" in html

    def test_unchecked_checkbox(self) -> None:
        html = render_field(field_view(ManagedForm(_registry()), "terms"))
        assert 'type="checkbox"' in html
        assert " checked" not in html

    def test_radio(self) -> None:
        html = render_field(field_view(ManagedForm(_registry(), {"plan": "pro"}), "plan"))
        assert html.count('type="radio"') == 2
        assert 'value="pro" checked' in html
        assert 'value="free" checked' not in html

    def test_label_attr(self) -> None:
        registry = Registry({"name": FieldSpec(attrs={"label": "Your name"})})
        html = render_field(field_view(ManagedForm(registry), "name"))
        assert '<label for="name">Your name</label>' in html
        assert 'label="' not in html

    def test_custom_environment(self) -> None:
        env = create_environment()
        assert isinstance(env, Environment)
        html = render_field(field_view(ManagedForm(_registry()), "bio"), env)
        assert 'name="bio"' in html


class TestRenderForm:
    def test_renders_all_fields(self) -> None:
        html = render_form(ManagedForm(_registry()), action="/signup", submit_label="Join")
        assert '<form method="post" action="/signup">' in html
        for name in ("email", "terms", "plan", "bio"):
            assert f'name="{name}"' in html
        assert ">Join</button>" in html

    def test_submit_disabled_with_errors(self) -> None:
        html = render_form(ManagedForm(_registry()))
        assert '<button type="submit" disabled>' in html

    def test_submit_enabled_without_errors(self) -> None:
        html = render_form(ManagedForm(_registry(), {"email": "a@b"}))
        assert '<button type="submit">' in html

    def test_fields_not_double_escaped(self) -> None:
        html = render_form(ManagedForm(_registry()))
        assert "&lt;input" not in html

    def test_all_errors(self) -> None:
        form = ManagedForm(_registry())
        assert "Required." not in render_form(form)
        assert "Required." in render_form(form, touched_only=False)

    def test_checkbox_uses_declared_value(self) -> None:
        html = render_form(ManagedForm(_registry()))
        assert 'value="yes"' in html
