"""Timer configuration service.

Composes validation, the customization check, a record store and the
preview formatter into the four operations the UI (or any other
caller) uses.  Results are plain dicts in the public camelCase shape.

Only :class:`ConfigValidationError` is raised on purpose; anything the
store raises propagates untouched.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from .classifier import is_customized
from .errors import ConfigValidationError
from .preview import format_preview
from .store import ConfigStore
from .validation import validate_config

logger = logging.getLogger(__name__)


class TimerConfigService:

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    @property
    def store(self) -> ConfigStore:
        return self._store

    def get_configuration(self) -> dict:
        record = self._store.get()
        logger.debug("Loaded timer configuration %s", record.id)
        return record.to_response()

    def update_configuration(self, raw: object) -> dict:
        """Validate *raw* and store it.

        On :class:`ConfigValidationError` the store is not touched.
        """
        try:
            values = validate_config(raw)
        except ConfigValidationError as exc:
            logger.info(
                "Rejected timer configuration update (%d violation(s): %s)",
                len(exc.violations), ", ".join(exc.fields),
            )
            raise

        customized = is_customized(values)
        record = self._store.update(asdict(values), customized=customized)
        logger.info(
            "Updated timer configuration %s (customized=%s)", record.id, customized,
        )
        return record.to_response()

    def reset_configuration(self) -> dict:
        record = self._store.reset()
        logger.info("Reset timer configuration to defaults (new id %s)", record.id)
        return record.to_response()

    def preview_configuration(self) -> dict:
        return format_preview(self._store.get()).to_dict()
