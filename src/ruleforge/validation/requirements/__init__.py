"""Requirement parsing for RuleForge.

This module provides:
- ConverterRegistry: Type tag to converter mapping
- normalize_regexp: `/pattern/flags` literal handling
- tokenize_array_requirement: `[a, b]` requirement splitting
- parse_requirements: The full requirement parser
"""

from ruleforge.validation.requirements.converters import (
    ConverterRegistry,
    convert_requirement,
    normalize_regexp,
    parse_numeric,
)
from ruleforge.validation.requirements.parser import parse_requirements
from ruleforge.validation.requirements.tokenizer import tokenize_array_requirement

__all__ = [
    "ConverterRegistry",
    "convert_requirement",
    "normalize_regexp",
    "parse_numeric",
    "parse_requirements",
    "tokenize_array_requirement",
]
