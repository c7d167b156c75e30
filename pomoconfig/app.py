"""Wiring: settings → store → service."""

from __future__ import annotations

import logging

from .database import SqlConfigStore, create_session_factory
from .settings import STORAGE_BACKENDS, Settings
from .timer_config import ConfigStore, InMemoryConfigStore, TimerConfigService

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> ConfigStore:
    backend = settings.storage_backend
    if backend == "memory":
        return InMemoryConfigStore()
    if backend == "sqlite":
        return SqlConfigStore(create_session_factory(settings.database_url))
    raise ValueError(
        f"Unknown storage_backend {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}"
    )


def build_service(settings: Settings) -> TimerConfigService:
    store = build_store(settings)
    logger.info("Timer configuration storage: %s", settings.storage_backend)
    return TimerConfigService(store)
