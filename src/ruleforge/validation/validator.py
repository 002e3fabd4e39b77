"""Validator definitions and validation dispatch.

A ValidatorDefinition wraps a ValidatorSpec once, at registration time:
- the deprecated `parameters_transformer` hook is adapted into a parse routine
- the declared capability handlers are resolved into a HandlerKind table

Every call then parses the requirement and routes the value to a handler
based on its shape.
"""

import logging
import math
from typing import Any, Callable

from ruleforge.validation.deprecation import warn_once
from ruleforge.validation.errors import UnsupportedMultipleValues, UnsupportedScalarValidator
from ruleforge.validation.requirements import parse_numeric, parse_requirements
from ruleforge.validation.types import (
    HandlerKind,
    ParsedRequirement,
    RequirementType,
    RequirementTypeSpec,
    ValidatorSpec,
)

logger = logging.getLogger(__name__)

TRANSFORMER_DEPRECATION = (
    "parametersTransformer is deprecated. "
    "Use requirementType or define parseRequirements instead"
)


def _normalize_requirement_type(requirement_type: RequirementTypeSpec | None) -> RequirementTypeSpec:
    if isinstance(requirement_type, list):
        return tuple(requirement_type)
    if requirement_type is None:
        return RequirementType.STRING
    return requirement_type


def _transformer_parser(
    transformer: Callable[[Any], Any],
) -> Callable[[Any], ParsedRequirement]:
    """Adapt a legacy transformer into a parse routine that always returns a list."""

    def parse(requirements: Any) -> ParsedRequirement:
        result = transformer(requirements)
        if isinstance(result, (list, tuple)):
            return list(result)
        return [result]

    return parse


def to_number(value: Any) -> float | None:
    """Coerce a scalar to float, or None when it is not numeric-looking."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) else number
    if isinstance(value, str):
        return parse_numeric(value)
    return None


class ValidatorDefinition:
    """A registered validator, ready to evaluate values.

    Example:
        definition = ValidatorDefinition(ValidatorSpec(
            name="min",
            requirement_type="number",
            validate_number=lambda value, minimum: value >= minimum,
        ))
        definition.parse_and_validate("12", "10")  # True
        definition.parse_and_validate("abc", "10")  # False
    """

    def __init__(self, spec: ValidatorSpec):
        self.spec = spec
        self.name = spec.name
        self.priority = spec.priority
        self.requirement_type = _normalize_requirement_type(spec.requirement_type)
        self.reference_resolver = spec.reference_resolver

        self._parse_override = spec.parse_requirements
        if spec.parameters_transformer is not None:
            warn_once(TRANSFORMER_DEPRECATION)
            self._parse_override = _transformer_parser(spec.parameters_transformer)

        self.handlers: dict[HandlerKind, Callable[..., Any]] = {}
        for kind in HandlerKind:
            handler = getattr(spec, kind.value)
            if handler is not None:
                self.handlers[kind] = handler

    def __repr__(self) -> str:
        kinds = ", ".join(kind.name for kind in self.handlers)
        return f"ValidatorDefinition({self.name!r}, priority={self.priority}, handlers=[{kinds}])"

    @property
    def capabilities(self) -> list[HandlerKind]:
        """Handler kinds this validator declares, in dispatch order."""
        return list(self.handlers)

    def parse_requirements(self, requirements: Any) -> ParsedRequirement:
        """Parse requirements into typed arguments (custom parser if declared)."""
        if self._parse_override is not None:
            return self._parse_override(requirements)
        return parse_requirements(requirements, self.requirement_type, self.reference_resolver)

    def parse_and_validate(self, value: Any, requirements: Any) -> bool:
        """Parse `requirements` and validate `value` against them."""
        args = self.parse_requirements(requirements)
        return self.validate(value, *args)

    def validate(self, value: Any, *requirements: Any) -> bool:
        """Return True iff `value` satisfies the already-parsed requirements.

        Raises:
            UnsupportedMultipleValues: Collection value without a multiple handler
            UnsupportedScalarValidator: Scalar value without a number or string handler
        """
        legacy = self.handlers.get(HandlerKind.LEGACY)
        if legacy is not None:
            if len(requirements) > 1:
                requirement: Any = list(requirements)
            else:
                requirement = requirements[0] if requirements else None
            return bool(legacy(value, requirement))

        if isinstance(value, (list, tuple)):
            validate_multiple = self.handlers.get(HandlerKind.MULTIPLE)
            if validate_multiple is None:
                raise UnsupportedMultipleValues(self.name)
            return bool(validate_multiple(value, *requirements))

        validate_number = self.handlers.get(HandlerKind.NUMERIC)
        if validate_number is not None:
            number = to_number(value)
            if number is None:
                logger.debug("Validator %s rejected non-numeric value %r", self.name, value)
                return False
            return bool(validate_number(number, *requirements))

        validate_string = self.handlers.get(HandlerKind.STRING)
        if validate_string is not None:
            return bool(validate_string(value, *requirements))

        raise UnsupportedScalarValidator(self.name)
