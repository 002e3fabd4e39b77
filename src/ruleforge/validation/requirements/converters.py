"""Requirement converters.

Each converter turns a raw requirement substring into a typed value:
- string: identity
- integer: leading base-10 digits of a numeric string ("3.7" and "3e2" read as 3)
- number: float
- reference: elements selected through a ReferenceResolver
- regexp: RegexRequirement, accepting bare patterns and `/pattern/flags` literals
"""

import math
import re
from typing import Any, Callable

from ruleforge.validation.errors import (
    NoSuchReference,
    NotAnInteger,
    NotANumber,
    UnknownRequirementType,
)
from ruleforge.validation.types import ReferenceResolver, RegexRequirement, RequirementType

ConverterFn = Callable[[str, ReferenceResolver | None], Any]


# =============================================================================
# Literal-Regex Normalizer
# =============================================================================

# /pattern/flags, flags drawn from g, i, m, y
# Matched with fullmatch and \Z: a trailing newline is not an end of input
REGEXP_LITERAL = re.compile(r"/.*/[gimy]*")
REGEXP_FLAGS = re.compile(r"/([gimy]*)\Z")

# Leading decimal digits of an integer requirement ("1e3" reads as 1)
LEADING_INTEGER = re.compile(r"[+-]?\d+")


def normalize_regexp(text: str) -> tuple[str, str]:
    """Split a regex requirement into (pattern, flags).

    Literal syntax (`/ab+c/gi`) yields its body and flags; anything else is
    used verbatim as the pattern with no flags.
    """
    if not REGEXP_LITERAL.fullmatch(text):
        return text, ""

    flags_match = REGEXP_FLAGS.search(text)
    flags = flags_match.group(1) if flags_match else ""
    # Drop the opening slash, then the closing slash plus exactly the flags found
    pattern = text[1 : len(text) - len(flags) - 1]
    return pattern, flags


# =============================================================================
# Numeric helpers
# =============================================================================


def parse_numeric(text: str) -> float | None:
    """Parse a numeric-looking string to float, or None when it is not numeric.

    Surrounding whitespace is ignored; empty strings, NaN and digit
    separators ("1_000") are not numeric.
    """
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return None
    try:
        number = float(stripped)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number


# =============================================================================
# Converters
# =============================================================================


def _convert_string(text: str, resolver: ReferenceResolver | None = None) -> str:
    return text


def _convert_integer(text: str, resolver: ReferenceResolver | None = None) -> int:
    if parse_numeric(text) is None:
        raise NotAnInteger(text)
    match = LEADING_INTEGER.match(text.strip())
    if match is None:
        raise NotAnInteger(text)
    return int(match.group(0), 10)


def _convert_number(text: str, resolver: ReferenceResolver | None = None) -> float:
    number = parse_numeric(text)
    if number is None:
        raise NotANumber(text)
    return number


def _convert_reference(text: str, resolver: ReferenceResolver | None = None) -> Any:
    if resolver is None:
        raise NoSuchReference(text)
    result = resolver.select(text)
    if not result:
        raise NoSuchReference(text)
    return result


def _convert_regexp(text: str, resolver: ReferenceResolver | None = None) -> RegexRequirement:
    pattern, flags = normalize_regexp(text)
    return RegexRequirement(pattern=pattern, flags=flags)


class ConverterRegistry:
    """Fixed mapping from requirement type to converter.

    Example:
        converter = ConverterRegistry.get(RequirementType.INTEGER)
        converter("42", None)  # Returns 42
    """

    _converters: dict[RequirementType, ConverterFn] = {
        RequirementType.STRING: _convert_string,
        RequirementType.INTEGER: _convert_integer,
        RequirementType.NUMBER: _convert_number,
        RequirementType.REFERENCE: _convert_reference,
        RequirementType.REGEXP: _convert_regexp,
    }

    @classmethod
    def resolve_type(cls, requirement_type: RequirementType | str | None) -> RequirementType:
        """Normalize a tag to RequirementType, defaulting to string.

        Raises:
            UnknownRequirementType: If the tag is not recognized
        """
        if not requirement_type:
            return RequirementType.STRING
        if isinstance(requirement_type, RequirementType):
            return requirement_type
        try:
            return RequirementType(requirement_type)
        except ValueError:
            raise UnknownRequirementType(requirement_type) from None

    @classmethod
    def get(cls, requirement_type: RequirementType | str | None) -> ConverterFn:
        """Get the converter for a requirement type."""
        return cls._converters[cls.resolve_type(requirement_type)]

    @classmethod
    def is_registered(cls, requirement_type: RequirementType | str | None) -> bool:
        try:
            cls.resolve_type(requirement_type)
        except UnknownRequirementType:
            return False
        return True

    @classmethod
    def list_registered(cls) -> list[str]:
        """List all requirement type tags."""
        return sorted(t.value for t in cls._converters)


def convert_requirement(
    requirement_type: RequirementType | str | None,
    text: str,
    resolver: ReferenceResolver | None = None,
) -> Any:
    """Convert a raw requirement string according to its type tag.

    Args:
        requirement_type: Type tag; None or "" means string
        text: Raw requirement substring
        resolver: Collaborator for reference requirements

    Returns:
        The typed requirement value

    Raises:
        UnknownRequirementType: For an unrecognized tag
        NotAnInteger, NotANumber, NoSuchReference: When the text cannot be coerced
    """
    converter = ConverterRegistry.get(requirement_type)
    return converter(text, resolver)
