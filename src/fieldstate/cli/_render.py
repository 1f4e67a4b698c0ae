"""``fieldstate render`` — print a registry as an HTML form.

Builds a ``ManagedForm`` from the registry and optional JSON defaults,
then renders it. Defaults start ``touched``, so their errors show.
"""

import argparse
import json
import sys

from fieldstate.cli._load import load_registry
from fieldstate.errors import ConfigurationError
from fieldstate.form import ManagedForm
from fieldstate.render import render_form


def _parse_defaults(raw: str | None) -> dict[str, str]:
    if not raw:
        return {}
    try:
        defaults = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"--defaults: invalid JSON ({exc.msg})"
        raise ConfigurationError(msg) from exc
    if not isinstance(defaults, dict):
        msg = "--defaults must be a JSON object"
        raise ConfigurationError(msg)
    parsed: dict[str, str] = {}
    for key, value in defaults.items():
        # null, false and "" mean "no value" and are never stored
        if value is None or value is False or value == "":
            continue
        parsed[str(key)] = "true" if value is True else str(value)
    return parsed


def run_render(args: argparse.Namespace) -> None:
    try:
        registry = load_registry(args.model)
        defaults = _parse_defaults(args.defaults)
    except (ConfigurationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    form = ManagedForm(registry, defaults)
    print(
        render_form(
            form,
            action=args.action,
            submit_label=args.submit_label,
            touched_only=not args.all_errors,
        )
    )
