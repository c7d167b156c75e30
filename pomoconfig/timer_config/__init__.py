"""Timer configuration package."""

from .classifier import is_customized
from .errors import ConfigValidationError, FieldViolation
from .limits import DEFAULTS, EDITABLE_FIELDS, LIMITS, FieldLimits, TimerConfigValues
from .models import ConfigRecord, new_default_record
from .preview import ConfigPreview, format_preview
from .service import TimerConfigService
from .store import ConfigStore, InMemoryConfigStore
from .validation import COMPOSITE_RULES, CompositeRule, validate_config

__all__ = [
    "COMPOSITE_RULES",
    "CompositeRule",
    "ConfigPreview",
    "ConfigRecord",
    "ConfigStore",
    "ConfigValidationError",
    "DEFAULTS",
    "EDITABLE_FIELDS",
    "FieldLimits",
    "FieldViolation",
    "InMemoryConfigStore",
    "LIMITS",
    "TimerConfigService",
    "TimerConfigValues",
    "format_preview",
    "is_customized",
    "new_default_record",
    "validate_config",
]
