"""Requirement parser.

Turns a raw requirement string into an ordered list of typed arguments using
a scalar requirement type or a tuple of types.
"""

from typing import Any

from ruleforge.validation.requirements.converters import convert_requirement
from ruleforge.validation.requirements.tokenizer import tokenize_array_requirement
from ruleforge.validation.types import (
    ParsedRequirement,
    ReferenceResolver,
    RequirementTypeSpec,
)


def parse_requirements(
    requirements: Any,
    requirement_type: RequirementTypeSpec | None,
    resolver: ReferenceResolver | None = None,
) -> ParsedRequirement:
    """Parse `requirements` according to `requirement_type`.

    Non-string requirements are assumed to be parsed already and are only
    wrapped into a list when they are not a list or tuple.

    Examples:
        parse_requirements("5", "integer")                    # [5]
        parse_requirements("[1, 2]", ("integer", "integer"))  # [1, 2]
        parse_requirements([1, 2], "integer")                 # [1, 2]
    """
    if not isinstance(requirements, str):
        if isinstance(requirements, (list, tuple)):
            return list(requirements)
        return [requirements]

    if isinstance(requirement_type, (list, tuple)):
        values = tokenize_array_requirement(requirements, len(requirement_type))
        return [
            convert_requirement(type_tag, value, resolver)
            for type_tag, value in zip(requirement_type, values)
        ]

    return [convert_requirement(requirement_type, requirements, resolver)]
