"""``fieldstate check`` — registry validation command.

Loads a JSON registry, prints one line per field, and exits with code 1
if the file cannot be read or any entry is malformed.
"""

import argparse
import sys

from fieldstate.cli._load import load_registry
from fieldstate.errors import ConfigurationError
from fieldstate.registry import FieldSpec


def describe(name: str, spec: FieldSpec) -> str:
    """One-line summary of a field's kind and rules."""
    parts = [spec.kind.value]
    rules = spec.rules
    if rules is not None:
        if rules.required:
            parts.append("required")
        if rules.pattern:
            parts.append(f"pattern={rules.pattern!r}")
        if rules.min_length:
            parts.append(f"min_length={rules.min_length}")
        if rules.max_length:
            parts.append(f"max_length={rules.max_length}")
    return f"  -> {name}: {', '.join(parts)}"


def run_check(args: argparse.Namespace) -> None:
    try:
        registry = load_registry(args.model)
    except (ConfigurationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"{args.model}: {len(registry)} field(s) OK")
    for name, spec in registry.items():
        print(describe(name, spec))
