"""SQLAlchemy ORM models for PomoConfig."""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import DeclarativeBase

from ..timer_config.models import ConfigRecord


class Base(DeclarativeBase):
    pass


def _as_utc(value: datetime) -> datetime:
    # SQLite hands DateTime columns back naive
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class TimerConfigRow(Base):
    """Single-row table holding the timer configuration."""

    __tablename__ = "timer_config"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    record_id = Column(String(36), nullable=False, unique=True)
    work_duration = Column(Integer, nullable=False)
    short_break_duration = Column(Integer, nullable=False)
    long_break_duration = Column(Integer, nullable=False)
    cycles_before_long_break = Column(Integer, nullable=False)
    advanced_config_active = Column(Boolean, nullable=False, default=False)
    customized = Column(Boolean, nullable=False, default=False)
    date_created = Column(DateTime, nullable=False)
    date_modified = Column(DateTime, nullable=False)

    @classmethod
    def from_record(cls, record: ConfigRecord) -> "TimerConfigRow":
        row = cls(record_id=record.id, date_created=_as_naive_utc(record.date_created))
        row.apply(record)
        return row

    def apply(self, record: ConfigRecord) -> None:
        """Copy every mutable column from *record*."""
        self.work_duration = record.work_duration
        self.short_break_duration = record.short_break_duration
        self.long_break_duration = record.long_break_duration
        self.cycles_before_long_break = record.cycles_before_long_break
        self.advanced_config_active = record.advanced_config_active
        self.customized = record.customized
        self.date_modified = _as_naive_utc(record.date_modified)

    def to_record(self) -> ConfigRecord:
        return ConfigRecord(
            id=self.record_id,
            work_duration=self.work_duration,
            short_break_duration=self.short_break_duration,
            long_break_duration=self.long_break_duration,
            cycles_before_long_break=self.cycles_before_long_break,
            advanced_config_active=bool(self.advanced_config_active),
            customized=bool(self.customized),
            date_created=_as_utc(self.date_created),
            date_modified=_as_utc(self.date_modified),
        )

    def __repr__(self) -> str:
        return (
            f"<TimerConfigRow id={self.record_id} "
            f"work={self.work_duration} customized={self.customized}>"
        )
