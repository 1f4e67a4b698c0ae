"""Load a field registry from a JSON file."""

import json
from pathlib import Path

from fieldstate.errors import ConfigurationError
from fieldstate.registry import Registry


def load_registry(path: str | Path) -> Registry:
    """Read *path* as JSON and build a ``Registry`` from it.

    Raises:
        ConfigurationError: If the file is not valid JSON or any entry
            is malformed.
        OSError: If the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        model = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})"
        raise ConfigurationError(msg) from exc
    return Registry.from_mapping(model)
