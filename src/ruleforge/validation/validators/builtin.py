"""Canned validators for RuleForge.

These are ready-to-use validators that ship with the engine. Each one is a
plain ValidatorSpec; together they cover every capability handler.

Available validators:
- pattern: Value matches a regular expression
- minlength / maxlength / length: String (or collection) length bounds
- min / max / range: Numeric bounds
- mincheck / maxcheck / check: Number of selected values
- equalto: Value equals a referenced element
"""

import re
from typing import Any, Sequence

from ruleforge.validation.errors import InvalidPattern
from ruleforge.validation.registry import ValidatorRegistry
from ruleforge.validation.requirements.converters import normalize_regexp
from ruleforge.validation.types import (
    ParsedRequirement,
    RegexRequirement,
    RequirementType,
    ValidatorSpec,
)

DEFAULT_PRIORITY = 30
PATTERN_PRIORITY = 64


# =============================================================================
# Pattern
# =============================================================================


def _parse_pattern(requirements: Any) -> ParsedRequirement:
    """Bare patterns must match the whole value; literals keep their own anchors.

    Raises:
        InvalidPattern: If the pattern does not compile
    """
    if isinstance(requirements, RegexRequirement):
        regexp = requirements
        text = regexp.pattern
    else:
        text = str(requirements)
        pattern, flags = normalize_regexp(text)
        if (pattern, flags) == (text, ""):
            pattern = f"^(?:{text})$"
        regexp = RegexRequirement(pattern=pattern, flags=flags)

    try:
        regexp.compiled
    except re.error as e:
        raise InvalidPattern(text, str(e)) from None
    return [regexp]


def _validate_pattern(value: Any, regexp: RegexRequirement) -> bool:
    return regexp.test(str(value))


# =============================================================================
# Length
# =============================================================================


def _validate_minlength(value: Any, minimum: int) -> bool:
    return len(str(value)) >= minimum


def _validate_maxlength(value: Any, maximum: int) -> bool:
    return len(str(value)) <= maximum


def _validate_length(value: Any, minimum: int, maximum: int) -> bool:
    if not isinstance(value, (list, tuple)):
        value = str(value)
    return minimum <= len(value) <= maximum


# =============================================================================
# Numeric bounds
# =============================================================================


def _validate_min(value: float, minimum: float) -> bool:
    return value >= minimum


def _validate_max(value: float, maximum: float) -> bool:
    return value <= maximum


def _validate_range(value: float, minimum: float, maximum: float) -> bool:
    return minimum <= value <= maximum


# =============================================================================
# Checks (collections)
# =============================================================================


def _validate_mincheck(values: Sequence[Any], minimum: int) -> bool:
    return len(values) >= minimum


def _validate_maxcheck(values: Sequence[Any], maximum: int) -> bool:
    return len(values) <= maximum


def _validate_check(values: Sequence[Any], minimum: int, maximum: int) -> bool:
    return minimum <= len(values) <= maximum


# =============================================================================
# References
# =============================================================================


def _validate_equalto(value: Any, elements: Sequence[Any]) -> bool:
    # Elements may be plain values or objects exposing `.value`
    target = getattr(elements[0], "value", elements[0])
    return str(value) == str(target)


BUILTIN_VALIDATORS = [
    ValidatorSpec(
        name="pattern",
        requirement_type=RequirementType.REGEXP,
        priority=PATTERN_PRIORITY,
        parse_requirements=_parse_pattern,
        validate_string=_validate_pattern,
    ),
    ValidatorSpec(
        name="minlength",
        requirement_type=RequirementType.INTEGER,
        priority=DEFAULT_PRIORITY,
        validate_string=_validate_minlength,
    ),
    ValidatorSpec(
        name="maxlength",
        requirement_type=RequirementType.INTEGER,
        priority=DEFAULT_PRIORITY,
        validate_string=_validate_maxlength,
    ),
    ValidatorSpec(
        name="length",
        requirement_type=(RequirementType.INTEGER, RequirementType.INTEGER),
        priority=DEFAULT_PRIORITY,
        validate_string=_validate_length,
        validate_multiple=_validate_length,
    ),
    ValidatorSpec(
        name="min",
        requirement_type=RequirementType.NUMBER,
        priority=DEFAULT_PRIORITY,
        validate_number=_validate_min,
    ),
    ValidatorSpec(
        name="max",
        requirement_type=RequirementType.NUMBER,
        priority=DEFAULT_PRIORITY,
        validate_number=_validate_max,
    ),
    ValidatorSpec(
        name="range",
        requirement_type=(RequirementType.NUMBER, RequirementType.NUMBER),
        priority=DEFAULT_PRIORITY,
        validate_number=_validate_range,
    ),
    ValidatorSpec(
        name="mincheck",
        requirement_type=RequirementType.INTEGER,
        priority=DEFAULT_PRIORITY,
        validate_multiple=_validate_mincheck,
    ),
    ValidatorSpec(
        name="maxcheck",
        requirement_type=RequirementType.INTEGER,
        priority=DEFAULT_PRIORITY,
        validate_multiple=_validate_maxcheck,
    ),
    ValidatorSpec(
        name="check",
        requirement_type=(RequirementType.INTEGER, RequirementType.INTEGER),
        priority=DEFAULT_PRIORITY,
        validate_multiple=_validate_check,
    ),
    ValidatorSpec(
        name="equalto",
        requirement_type=RequirementType.REFERENCE,
        priority=DEFAULT_PRIORITY,
        validate_string=_validate_equalto,
    ),
]


def register_builtin_validators() -> None:
    """Register all canned validators with the registry.

    Call this at application startup.
    """
    for spec in BUILTIN_VALIDATORS:
        ValidatorRegistry.register(spec)
