"""RuleForge validation engine.

This module provides:
- Requirement parsing: typed arguments from requirement strings
- ValidatorDefinition: capability-based dispatch of values to handlers
- ValidatorRegistry: named validators, ordered by priority
- Canned validators: pattern, length, numeric bounds, checks, references

Usage:
    from ruleforge.validation import (
        ValidatorRegistry,
        register_builtin_validators,
    )

    # At application startup
    register_builtin_validators()

    ValidatorRegistry.get("range").parse_and_validate("7", "[1, 10]")  # True
"""

from ruleforge.validation.deprecation import DeprecationNotice, warn_once
from ruleforge.validation.errors import (
    ArityMismatch,
    DispatchError,
    InvalidPattern,
    NoSuchReference,
    NotAnArray,
    NotAnInteger,
    NotANumber,
    RequirementError,
    RuleForgeError,
    UnknownRequirementType,
    UnsupportedMultipleValues,
    UnsupportedScalarValidator,
)
from ruleforge.validation.registry import ValidatorRegistry, validator
from ruleforge.validation.requirements import (
    ConverterRegistry,
    convert_requirement,
    normalize_regexp,
    parse_requirements,
    tokenize_array_requirement,
)
from ruleforge.validation.types import (
    HandlerKind,
    ParsedRequirement,
    ReferenceResolver,
    RegexRequirement,
    RequirementType,
    ValidatorSpec,
)
from ruleforge.validation.validator import ValidatorDefinition
from ruleforge.validation.validators import register_builtin_validators

__all__ = [
    # Types
    "HandlerKind",
    "ParsedRequirement",
    "ReferenceResolver",
    "RegexRequirement",
    "RequirementType",
    "ValidatorSpec",
    # Errors
    "ArityMismatch",
    "DispatchError",
    "InvalidPattern",
    "NoSuchReference",
    "NotAnArray",
    "NotAnInteger",
    "NotANumber",
    "RequirementError",
    "RuleForgeError",
    "UnknownRequirementType",
    "UnsupportedMultipleValues",
    "UnsupportedScalarValidator",
    # Requirements
    "ConverterRegistry",
    "convert_requirement",
    "normalize_regexp",
    "parse_requirements",
    "tokenize_array_requirement",
    # Dispatch
    "DeprecationNotice",
    "ValidatorDefinition",
    "warn_once",
    # Registry
    "ValidatorRegistry",
    "validator",
    # Setup
    "register_builtin_validators",
]
