"""Core types for the RuleForge validation engine.

This module defines the foundational types shared by the requirement parser
and the validation dispatcher:
- RequirementType: how a requirement string is coerced
- HandlerKind: which capability handler a validator provides
- ValidatorSpec: the declarative input a validator author supplies
- RegexRequirement: the typed result of a regexp requirement
- ReferenceResolver: collaborator used by the reference converter
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any, Callable, Protocol, Sequence


class RequirementType(Enum):
    """Type tag describing how to coerce a requirement string."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    REFERENCE = "reference"
    REGEXP = "regexp"


class HandlerKind(Enum):
    """Capability handlers a validator may declare.

    LEGACY: combined `fn(value, requirement)` handler
    MULTIPLE: handles collection values
    NUMERIC: handles scalars coerced to numbers
    STRING: handles raw scalar values
    """

    LEGACY = "fn"
    MULTIPLE = "validate_multiple"
    NUMERIC = "validate_number"
    STRING = "validate_string"


# Scalar tag, or a fixed-arity tuple of tags
RequirementTypeSpec = RequirementType | str | tuple[RequirementType | str, ...]

ParsedRequirement = list[Any]


class ReferenceResolver(Protocol):
    """Protocol for the document-like collaborator behind `reference` requirements."""

    def select(self, selector: str) -> Sequence[Any]:
        """Return every element matching `selector` (empty when nothing matches)."""
        ...


# Python has no global or sticky regex flags; `y` is honoured by anchoring the test
_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
}


@dataclass(frozen=True)
class RegexRequirement:
    """A regular expression requirement as a (pattern, flags) pair.

    Attributes:
        pattern: Regex source without literal slashes
        flags: Subset of "gimy" taken from a `/pattern/flags` literal
    """

    pattern: str
    flags: str = ""

    @cached_property
    def compiled(self) -> re.Pattern[str]:
        return self.compile()

    def compile(self) -> re.Pattern[str]:
        """Build the Python pattern. Raises re.error for an invalid pattern."""
        re_flags = 0
        for flag in self.flags:
            re_flags |= _FLAG_MAP.get(flag, 0)
        return re.compile(self.pattern, re_flags)

    @property
    def sticky(self) -> bool:
        return "y" in self.flags

    def test(self, value: str) -> bool:
        """True if the pattern matches anywhere in value (at the start when sticky)."""
        if self.sticky:
            return self.compiled.match(value) is not None
        return self.compiled.search(value) is not None


@dataclass
class ValidatorSpec:
    """Declarative validator definition supplied by a validator author.

    At least one handler should be present; a spec with none is accepted here
    and only fails when a value is dispatched to it.

    Attributes:
        name: Identifier, used in error messages
        requirement_type: Scalar tag or tuple of tags (default: string)
        priority: Ordering hint for callers, never interpreted by the engine
        fn: Legacy combined handler `fn(value, requirement)`
        validate_multiple: Handler for collection values
        validate_number: Handler for numeric-looking scalars
        validate_string: Handler for any scalar
        parse_requirements: Replaces the default requirement parsing entirely
        parameters_transformer: Deprecated parsing hook
        reference_resolver: Collaborator for `reference` requirements
    """

    name: str
    requirement_type: RequirementTypeSpec = RequirementType.STRING
    priority: int = 2
    fn: Callable[..., Any] | None = None
    validate_multiple: Callable[..., Any] | None = None
    validate_number: Callable[..., Any] | None = None
    validate_string: Callable[..., Any] | None = None
    parse_requirements: Callable[[Any], ParsedRequirement] | None = None
    parameters_transformer: Callable[[Any], Any] | None = None
    reference_resolver: ReferenceResolver | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ValidatorSpec":
        """Create a ValidatorSpec from a mapping with snake_case or camelCase keys.

        Unrecognized keys are kept in `extra` untouched.
        """
        aliases = {
            "requirementType": "requirement_type",
            "validateMultiple": "validate_multiple",
            "validateNumber": "validate_number",
            "validateString": "validate_string",
            "parseRequirements": "parse_requirements",
            "parametersTransformer": "parameters_transformer",
            "referenceResolver": "reference_resolver",
        }
        known = {
            "name",
            "requirement_type",
            "priority",
            "fn",
            "validate_multiple",
            "validate_number",
            "validate_string",
            "parse_requirements",
            "parameters_transformer",
            "reference_resolver",
        }

        kwargs: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            key = aliases.get(key, key)
            if key in known:
                kwargs[key] = value
            else:
                extra[key] = value

        requirement_type = kwargs.get("requirement_type")
        if isinstance(requirement_type, list):
            kwargs["requirement_type"] = tuple(requirement_type)
        elif requirement_type is None:
            kwargs.pop("requirement_type", None)

        return cls(extra=extra, **kwargs)
