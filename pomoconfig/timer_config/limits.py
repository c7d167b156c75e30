"""Default values and bounds for every editable timer setting.

All durations are whole minutes.  The validation model, the
customization check, the default record and the dialog's spin boxes
all read from this table.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimerConfigValues:
    """The five user-editable settings, fully typed."""

    work_duration: int
    short_break_duration: int
    long_break_duration: int
    cycles_before_long_break: int
    advanced_config_active: bool


@dataclass(frozen=True)
class FieldLimits:
    minimum: int
    maximum: int

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


# ── defaults (classic Pomodoro) ───────────────────────────────────────────

DEFAULTS = TimerConfigValues(
    work_duration=25,
    short_break_duration=5,
    long_break_duration=15,
    cycles_before_long_break=4,
    advanced_config_active=False,
)

# ── bounds ────────────────────────────────────────────────────────────────

LIMITS: dict[str, FieldLimits] = {
    "work_duration": FieldLimits(1, 60),
    "short_break_duration": FieldLimits(1, 10),
    "long_break_duration": FieldLimits(15, 30),
    "cycles_before_long_break": FieldLimits(2, 8),
}

EDITABLE_FIELDS: tuple[str, ...] = (
    "work_duration",
    "short_break_duration",
    "long_break_duration",
    "cycles_before_long_break",
    "advanced_config_active",
)
