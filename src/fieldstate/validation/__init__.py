"""Validation evaluator — registry rules against current values.

Usage::

    from fieldstate.validation import evaluate

    errors = evaluate({"email": "bad"}, registry)
    if errors is None:
        ...  # nothing violated
    else:
        errors["email"]  # "Input is not valid."

The result is ``None`` when no field is violated, never an empty dict.
"""

from collections.abc import Mapping

from fieldstate.config import FormConfig
from fieldstate.registry import Registry
from fieldstate.validation.rules import (
    Validator,
    chain_for,
    matches,
    min_length,
    required,
)

__all__ = [
    "Validator",
    "chain_for",
    "evaluate",
    "matches",
    "min_length",
    "required",
]

_DEFAULT_CONFIG = FormConfig()


def evaluate(
    values: Mapping[str, str],
    registry: Registry,
    config: FormConfig | None = None,
) -> dict[str, str] | None:
    """Evaluate every registered field's rules against *values*.

    Args:
        values: Field name to current value. A missing key means no value.
        registry: The form's field registry.
        config: Default messages; ``FormConfig()`` when omitted.

    Returns:
        ``None`` if nothing is violated, otherwise a dict of field name to
        the first failing rule's message. Later rules on a field are not
        evaluated once one fails.
    """
    config = config or _DEFAULT_CONFIG
    errors: dict[str, str] = {}

    for name, spec in registry.items():
        if spec.rules is None:
            continue

        value = values.get(name)
        for validator in chain_for(spec.rules, config):
            error = validator(value)
            if error is not None:
                errors[name] = error
                break

    return errors or None
