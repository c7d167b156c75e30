"""The stored timer configuration record and its public projection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from pydantic.alias_generators import to_camel

from .limits import DEFAULTS, EDITABLE_FIELDS, TimerConfigValues


@dataclass(frozen=True)
class ConfigRecord:
    """The single persisted configuration entity.

    Frozen: stores swap whole records instead of mutating one, so a
    reader never sees a half-applied update.
    """

    id: str
    work_duration: int
    short_break_duration: int
    long_break_duration: int
    cycles_before_long_break: int
    advanced_config_active: bool
    customized: bool
    date_created: datetime
    date_modified: datetime

    @property
    def values(self) -> TimerConfigValues:
        return TimerConfigValues(**{name: getattr(self, name) for name in EDITABLE_FIELDS})

    def merged(self, changes: dict, *, customized: bool, now: datetime) -> ConfigRecord:
        """Return a copy with *changes* applied on top, field by field."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise KeyError(f"Not an editable field: {', '.join(sorted(unknown))}")
        return replace(self, **changes, customized=customized, date_modified=now)

    def to_response(self) -> dict:
        """Public shape: every field except ``dateCreated``, camelCase keys."""
        data = {"id": self.id}
        for name in EDITABLE_FIELDS:
            data[to_camel(name)] = getattr(self, name)
        data["customized"] = self.customized
        data["dateModified"] = self.date_modified.isoformat()
        return data


def new_default_record(record_id: str, now: datetime) -> ConfigRecord:
    """Factory-default record; both timestamps set to *now*."""
    return ConfigRecord(
        id=record_id,
        work_duration=DEFAULTS.work_duration,
        short_break_duration=DEFAULTS.short_break_duration,
        long_break_duration=DEFAULTS.long_break_duration,
        cycles_before_long_break=DEFAULTS.cycles_before_long_break,
        advanced_config_active=DEFAULTS.advanced_config_active,
        customized=False,
        date_created=now,
        date_modified=now,
    )
