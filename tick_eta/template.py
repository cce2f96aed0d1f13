"""Placeholder interpolation for ``{{field}}`` progress templates."""

from __future__ import annotations

import re

from tick_eta.models import TEMPLATE_FIELDS, EtaSnapshot

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]*?)\}\}")


def resolve_field(snapshot: EtaSnapshot, name: str) -> str:
    """Return the string form of a snapshot field, or ``""`` when unavailable."""
    getter = TEMPLATE_FIELDS.get(name)
    if getter is None:
        return ""
    value = getter(snapshot)
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_template(template: str, snapshot: EtaSnapshot) -> str:
    """Substitute every ``{{name}}`` token in ``template`` from ``snapshot``.

    Unknown names and empty fields render as an empty string. Names are
    matched verbatim, so ``{{ done }}`` does not resolve to ``done``.
    """
    return PLACEHOLDER_PATTERN.sub(lambda match: resolve_field(snapshot, match.group(1)), template)


__all__ = ["PLACEHOLDER_PATTERN", "render_template", "resolve_field"]
