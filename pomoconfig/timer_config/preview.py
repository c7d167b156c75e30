"""Human-readable preview of a stored configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigPreview:
    work_cycle: str
    intervals: str
    cycles: str

    def to_dict(self) -> dict[str, str]:
        return {
            "workCycle": self.work_cycle,
            "intervals": self.intervals,
            "cycles": self.cycles,
        }


def format_preview(record) -> ConfigPreview:
    """Render *record* (anything with the duration attributes) as text."""
    return ConfigPreview(
        work_cycle=f"{record.work_duration} minutes of work",
        intervals=(
            f"Short break: {record.short_break_duration} min | "
            f"Long break: {record.long_break_duration} min"
        ),
        cycles=f"Long break every {record.cycles_before_long_break} cycles",
    )
