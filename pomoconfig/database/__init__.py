"""Database package."""

from .db import create_session_factory, session_scope
from .models import TimerConfigRow
from .store import SqlConfigStore

__all__ = ["create_session_factory", "session_scope", "TimerConfigRow", "SqlConfigStore"]
