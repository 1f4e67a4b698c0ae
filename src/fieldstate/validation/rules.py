"""Rule checks for the field state engine.

Each validator is a callable with the signature::

    def rule(value: str | None) -> str | None:
        '''Return error message, or None if valid.'''

All validators here are factories so the message can come from the field's
override or from ``FormConfig``::

    check = min_length(3, "Must be at least {min_length} characters.")
    check("ab")  # "Must be at least 3 characters."

Only ``required`` fails on an empty value. The other rules skip falsy
values, leaving presence to ``required``.
"""

import re
from collections.abc import Callable

from fieldstate.config import FormConfig
from fieldstate.registry import Rules

# Type alias for a validator function
type Validator = Callable[[str | None], str | None]


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(message: str) -> Validator:
    """Value must be truthy (absent, ``""`` and other falsy values fail)."""

    def check(value: str | None) -> str | None:
        if not value:
            return message
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


def matches(pattern: str | re.Pattern[str], message: str) -> Validator:
    """Value must contain a match for *pattern* anywhere (``re.search``)."""
    compiled = re.compile(pattern)

    def check(value: str | None) -> str | None:
        if value and not compiled.search(value):
            return message
        return None

    return check


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int, message: str) -> Validator:
    """Value must be at least *n* characters; *message* may use ``{min_length}``."""
    text = message.format(min_length=n)

    def check(value: str | None) -> str | None:
        if value and len(value) < n:
            return text
        return None

    return check


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------


def chain_for(rules: Rules, config: FormConfig) -> list[Validator]:
    """Build the validators for *rules* in priority order.

    Order is fixed: required, pattern, min_length. ``max_length`` is a
    render attribute only and has no validator.
    """
    chain: list[Validator] = []
    if rules.required:
        chain.append(required(rules.required_message or config.required_message))
    if rules.compiled is not None:
        chain.append(matches(rules.compiled, rules.pattern_message or config.pattern_message))
    if rules.min_length:
        chain.append(min_length(rules.min_length, config.min_length_message))
    return chain
