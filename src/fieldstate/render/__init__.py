"""Renderer adapter — form state to per-field views and HTML.

Lives outside the state engine and only reads the form's query API.
"""

from fieldstate.render.html import create_environment, html_attrs, render_field, render_form
from fieldstate.render.view import FieldView, field_view, field_views, submit_disabled

__all__ = [
    "FieldView",
    "create_environment",
    "field_view",
    "field_views",
    "html_attrs",
    "render_field",
    "render_form",
    "submit_disabled",
]
