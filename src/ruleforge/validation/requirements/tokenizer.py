"""Tokenizer for bracketed array requirements such as `[1, 10]`."""

import re

from ruleforge.validation.errors import ArityMismatch, NotAnArray

ARRAY_REQUIREMENT = re.compile(r"^\s*\[(.*)\]\s*$")


def tokenize_array_requirement(text: str, arity: int) -> list[str]:
    """Split `[v1, v2, ...]` into trimmed values.

    Args:
        text: The bracketed requirement string
        arity: Number of values required

    Returns:
        Exactly `arity` stripped substrings

    Raises:
        NotAnArray: If the outer brackets are missing
        ArityMismatch: If the number of values differs from arity
    """
    match = ARRAY_REQUIREMENT.match(text)
    if not match:
        raise NotAnArray(text)

    values = [value.strip() for value in match.group(1).split(",")]
    if len(values) != arity:
        raise ArityMismatch(len(values), arity)
    return values
