"""fieldstate — live field state for composite forms.

Tracks values, validation errors and touched status for a set of named
fields, decoupled from how those fields are rendered.

Basic usage::

    from fieldstate import FieldSpec, ManagedForm, Registry, Rules

    registry = Registry({
        "email": FieldSpec(rules=Rules(required=True, pattern=r"^.+@.+$")),
    })
    form = ManagedForm(registry, on_change=lambda form, name: redraw(form))

    form.on_change("email", "bad")
    form.on_blur("email")
    form.get_errors(touched_only=True)  # {"email": "Input is not valid."}

Rendering (``fieldstate.render``)::

    from fieldstate.render import render_form
    html = render_form(form, action="/signup")
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "FieldKind",
    "FieldSpec",
    "FieldStateError",
    "FormConfig",
    "FormState",
    "ManagedForm",
    "Registry",
    "Rules",
    "Touched",
    "UnknownFieldError",
    "evaluate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fieldstate`` fast while providing a clean top-level API.
    """
    if name == "ManagedForm":
        from fieldstate.form import ManagedForm

        return ManagedForm

    if name == "FormConfig":
        from fieldstate.config import FormConfig

        return FormConfig

    if name in ("FieldKind", "FieldSpec", "Registry", "Rules"):
        from fieldstate import registry as _registry

        return getattr(_registry, name)

    if name in ("FormState", "Touched"):
        from fieldstate import state as _state

        return getattr(_state, name)

    if name == "evaluate":
        from fieldstate.validation import evaluate

        return evaluate

    if name in ("ConfigurationError", "FieldStateError", "UnknownFieldError"):
        from fieldstate import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
