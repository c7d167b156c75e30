"""SQLite-backed configuration store.

Each operation is one transaction (see :func:`session_scope`), taken
under the store's lock.  A failing write rolls back and re-raises, so
the stored row is either fully updated or untouched.
"""

from __future__ import annotations

from typing import Mapping

from sqlalchemy import delete, select
from sqlalchemy.orm import Session as OrmSession, sessionmaker

from ..timer_config.models import ConfigRecord
from ..timer_config.store import ConfigStore
from .db import session_scope
from .models import TimerConfigRow


class SqlConfigStore(ConfigStore):

    def __init__(self, session_factory: sessionmaker, **kwargs) -> None:
        super().__init__(**kwargs)
        self._session_factory = session_factory

    @staticmethod
    def _current_row(session: OrmSession) -> TimerConfigRow | None:
        return session.scalars(
            select(TimerConfigRow).order_by(TimerConfigRow.pk).limit(1)
        ).first()

    def _insert_default(self, session: OrmSession) -> TimerConfigRow:
        row = TimerConfigRow.from_record(self._new_default())
        session.add(row)
        session.flush()
        return row

    def get(self) -> ConfigRecord:
        with self._lock, session_scope(self._session_factory) as session:
            row = self._current_row(session)
            if row is None:
                row = self._insert_default(session)
            return row.to_record()

    def update(self, changes: Mapping[str, object], *, customized: bool) -> ConfigRecord:
        with self._lock, session_scope(self._session_factory) as session:
            row = self._current_row(session)
            if row is None:
                row = self._insert_default(session)
            merged = row.to_record().merged(
                dict(changes), customized=customized, now=self._clock(),
            )
            row.apply(merged)
            session.flush()
            return row.to_record()

    def reset(self) -> ConfigRecord:
        with self._lock, session_scope(self._session_factory) as session:
            session.execute(delete(TimerConfigRow))
            return self._insert_default(session).to_record()

    def exists(self) -> bool:
        with self._lock, session_scope(self._session_factory) as session:
            return self._current_row(session) is not None

    def clear(self) -> None:
        with self._lock, session_scope(self._session_factory) as session:
            session.execute(delete(TimerConfigRow))
