"""Canned validators for RuleForge.

This module provides ready-to-use validators that can be referenced by name
once registered.
"""

from ruleforge.validation.validators.builtin import (
    BUILTIN_VALIDATORS,
    register_builtin_validators,
)

__all__ = [
    "BUILTIN_VALIDATORS",
    "register_builtin_validators",
]
