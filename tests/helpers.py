"""Shared test helpers for PomoConfig."""

from datetime import datetime, timedelta, timezone


class FakeClock:
    """Deterministic clock: every call returns a time one step later."""

    def __init__(
        self,
        start: datetime = datetime(2026, 1, 5, 9, 0, 0, 250000, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ):
        self._next = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        current = self._next
        self._next += self.step
        self.calls += 1
        return current


class SequentialIds:
    """Id factory yielding cfg-0001, cfg-0002, ..."""

    def __init__(self):
        self.issued: list[str] = []

    def __call__(self) -> str:
        new_id = f"cfg-{len(self.issued) + 1:04d}"
        self.issued.append(new_id)
        return new_id


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def valid_payload(**overrides) -> dict:
    """A complete, valid camelCase submission (non-default long break)."""
    payload = {
        "workDuration": 25,
        "shortBreakDuration": 5,
        "longBreakDuration": 20,
        "cyclesBeforeLongBreak": 4,
        "advancedConfigActive": False,
    }
    payload.update(overrides)
    return payload
