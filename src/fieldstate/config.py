"""Form configuration.

FormConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Form configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(required_message="Please fill this in.")
    """

    # Default messages (per-field overrides live on Rules)
    required_message: str = "Required."
    pattern_message: str = "Input is not valid."
    min_length_message: str = "Must be at least {min_length} characters."

    # Value stored for a checked checkbox without its own checked_value
    checkbox_value: str = "true"

    # is_dirty() also compares fields cleared back to empty
    dirty_includes_cleared: bool = False
