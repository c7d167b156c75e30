"""Derives the ``customized`` flag."""

from __future__ import annotations

from .limits import DEFAULTS, EDITABLE_FIELDS, TimerConfigValues


def is_customized(values: TimerConfigValues, defaults: TimerConfigValues = DEFAULTS) -> bool:
    """True if any editable setting differs from its factory default."""
    return any(
        getattr(values, name) != getattr(defaults, name)
        for name in EDITABLE_FIELDS
    )
