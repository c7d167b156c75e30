"""Validation rule for submitted timer settings.

Raw input (typically a decoded JSON object) goes through two stages:

1. Per-field rules, declared on a pydantic model.  The three durations
   are required; ``cyclesBeforeLongBreak`` and ``advancedConfigActive``
   fall back to their defaults when absent.  Types are strict: whole
   floats such as ``25.0`` count as integers, ``True``, ``25.5`` and
   ``"25"`` do not.
2. Composite rules (:class:`CompositeRule`), checked once the fields
   they read are present and correctly typed.  Range failures do not
   stop them: ``short=20, long=15`` reports the short break's range
   *and* the long break's ordering.  A rule is skipped when its target
   field already has a violation.

Any violation raises :class:`ConfigValidationError`.  Unknown keys are
ignored, which is how a client-sent ``customized`` flag gets dropped.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Annotated, Callable, Mapping

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ConfigValidationError, FieldViolation
from .limits import DEFAULTS, LIMITS, TimerConfigValues


def _bounded(name: str, **kwargs):
    limits = LIMITS[name]
    return Field(strict=True, ge=limits.minimum, le=limits.maximum, **kwargs)


def _whole_number(value: object) -> object:
    # JSON has one number type: 25.0 is an integer, 25.5 is not
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


WholeNumber = Annotated[int, BeforeValidator(_whole_number)]


class TimerConfigInput(BaseModel):
    """Per-field rules.  Keys are the camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        frozen=True,
    )

    work_duration: WholeNumber = _bounded("work_duration")
    short_break_duration: WholeNumber = _bounded("short_break_duration")
    long_break_duration: WholeNumber = _bounded("long_break_duration")
    cycles_before_long_break: WholeNumber = _bounded(
        "cycles_before_long_break", default=DEFAULTS.cycles_before_long_break,
    )
    advanced_config_active: bool = Field(
        default=DEFAULTS.advanced_config_active, strict=True,
    )


# ── composite rules ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class CompositeRule:
    """A rule spanning several fields, reported on a single one."""

    name: str
    field: str
    depends_on: tuple[str, ...]
    holds: Callable[..., bool]
    message: str

    @property
    def wire_field(self) -> str:
        return to_camel(self.field)

    def check(self, values: Mapping[str, object]) -> FieldViolation | None:
        if self.holds(**{name: values[name] for name in self.depends_on}):
            return None
        return FieldViolation(self.wire_field, self.message)


LONG_BREAK_EXCEEDS_SHORT_BREAK = CompositeRule(
    name="long_break_exceeds_short_break",
    field="long_break_duration",
    depends_on=("short_break_duration", "long_break_duration"),
    holds=lambda short_break_duration, long_break_duration: (
        long_break_duration > short_break_duration
    ),
    message="Long break duration must be greater than short break duration",
)

COMPOSITE_RULES: tuple[CompositeRule, ...] = (
    LONG_BREAK_EXCEEDS_SHORT_BREAK,
)


def _composite_violations(
    values: Mapping[str, object], already_failed: set[str],
) -> list[FieldViolation]:
    violations = []
    for rule in COMPOSITE_RULES:
        if rule.wire_field in already_failed:
            continue
        if any(name not in values for name in rule.depends_on):
            continue
        violation = rule.check(values)
        if violation is not None:
            violations.append(violation)
    return violations


# ── error translation ─────────────────────────────────────────────────────

_ATTRIBUTE_BY_WIRE_NAME = {to_camel(name): name for name in TimerConfigInput.model_fields}


def _is_type_error(kind: str) -> bool:
    return kind == "missing" or kind.startswith(("int", "bool"))


def _violation_from_error(error: dict) -> FieldViolation:
    loc = error.get("loc") or ()
    if not loc:
        return FieldViolation("input", "Expected an object with timer settings")

    field = ".".join(str(part) for part in loc)
    kind = error.get("type", "")
    limits = LIMITS.get(_ATTRIBUTE_BY_WIRE_NAME.get(field, ""))

    if kind == "missing":
        message = f"{field} is required"
    elif kind.startswith("int"):
        message = f"{field} must be an integer"
    elif kind.startswith("bool"):
        message = f"{field} must be a boolean"
    elif kind in ("greater_than_equal", "less_than_equal") and limits is not None:
        message = f"{field} must be between {limits.minimum} and {limits.maximum}"
    else:
        message = error.get("msg", "Invalid value")
    return FieldViolation(field, message)


def _with_wire_names(raw: Mapping) -> dict:
    """Copy of *raw* with attribute-name keys moved to their wire names.

    The wire name wins when both spellings are present.
    """
    normalised = dict(raw)
    for wire_name, name in _ATTRIBUTE_BY_WIRE_NAME.items():
        if name in normalised:
            value = normalised.pop(name)
            normalised.setdefault(wire_name, value)
    return normalised


def _well_typed_values(raw: Mapping, type_failures: set[str]) -> dict[str, object]:
    """Attribute → value for every field that passed its type check."""
    values: dict[str, object] = {}
    for wire_name, name in _ATTRIBUTE_BY_WIRE_NAME.items():
        if wire_name in type_failures:
            continue
        if wire_name in raw:
            values[name] = _whole_number(raw[wire_name])
        else:
            values[name] = getattr(DEFAULTS, name)
    return values


# ── public API ────────────────────────────────────────────────────────────


def validate_config(raw: object) -> TimerConfigValues:
    """Turn *raw* input into validated, defaulted values.

    Keys may use the camelCase wire names or the snake_case attribute
    names; violations always report the wire name.

    Raises :class:`ConfigValidationError` listing every violation.
    """
    if isinstance(raw, Mapping):
        raw = _with_wire_names(raw)
    try:
        parsed = TimerConfigInput.model_validate(raw)
    except ValidationError as exc:
        errors = exc.errors()
        violations = [_violation_from_error(err) for err in errors]
        if isinstance(raw, Mapping):
            type_failures = {
                v.field for v, err in zip(violations, errors)
                if _is_type_error(err.get("type", ""))
            }
            violations += _composite_violations(
                _well_typed_values(raw, type_failures),
                already_failed={v.field for v in violations},
            )
        raise ConfigValidationError(violations) from None

    values = TimerConfigValues(**parsed.model_dump())
    violations = _composite_violations(asdict(values), already_failed=set())
    if violations:
        raise ConfigValidationError(violations)
    return values
