"""Configuration record stores.

A store holds at most one :class:`ConfigRecord`.  Every operation runs
under the store's lock, so ``get`` never observes a half-applied
``update`` or ``reset``.  Create one store per scope and hand it to
:class:`~pomoconfig.timer_config.service.TimerConfigService`.
"""

from __future__ import annotations

import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Mapping

from .models import ConfigRecord, new_default_record


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_record_id() -> str:
    return str(uuid.uuid4())


class ConfigStore(ABC):
    """get / update / reset / exists / clear over a single record."""

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = utcnow,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.Lock()

    def _new_default(self) -> ConfigRecord:
        return new_default_record(self._id_factory(), self._clock())

    @abstractmethod
    def get(self) -> ConfigRecord:
        """Current record, creating and storing the default one if absent."""

    @abstractmethod
    def update(self, changes: Mapping[str, object], *, customized: bool) -> ConfigRecord:
        """Merge *changes* onto the current (or default) record.

        *changes* may only name editable fields; ``customized`` is the
        flag the caller derived from the post-merge values.
        """

    @abstractmethod
    def reset(self) -> ConfigRecord:
        """Replace whatever is stored with a brand-new default record."""

    @abstractmethod
    def exists(self) -> bool:
        """Whether a record is held.  Never creates one."""

    @abstractmethod
    def clear(self) -> None:
        """Drop the record entirely (tests / ops only)."""


class InMemoryConfigStore(ConfigStore):
    """Volatile store: one record in process memory."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._record: ConfigRecord | None = None

    def get(self) -> ConfigRecord:
        with self._lock:
            if self._record is None:
                self._record = self._new_default()
            return self._record

    def update(self, changes: Mapping[str, object], *, customized: bool) -> ConfigRecord:
        with self._lock:
            current = self._record if self._record is not None else self._new_default()
            self._record = current.merged(
                dict(changes), customized=customized, now=self._clock(),
            )
            return self._record

    def reset(self) -> ConfigRecord:
        with self._lock:
            self._record = self._new_default()
            return self._record

    def exists(self) -> bool:
        with self._lock:
            return self._record is not None

    def clear(self) -> None:
        with self._lock:
            self._record = None
