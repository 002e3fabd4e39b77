"""Validator registry for RuleForge.

Provides registration and lookup for:
- Canned validators (shipped with the engine)
- Custom validators (application-specific, explicitly registered)
"""

import logging
from typing import Any, Callable

from ruleforge.validation.types import ValidatorSpec
from ruleforge.validation.validator import ValidatorDefinition

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Registry of validator definitions by name.

    Validators must be explicitly registered before they can be used.
    This applies to both canned validators (registered by the engine)
    and custom validators (registered by the application at startup).

    Example:
        ValidatorRegistry.register(ValidatorSpec(
            name="even",
            requirement_type="string",
            validate_number=lambda value, _: value % 2 == 0,
        ))

        ValidatorRegistry.get("even").parse_and_validate("4", "")  # True
    """

    _validators: dict[str, ValidatorDefinition] = {}

    @classmethod
    def register(cls, validator: ValidatorSpec | ValidatorDefinition) -> ValidatorDefinition:
        """Register a validator by its name.

        Idempotent - re-registering the same name keeps the first definition.

        Args:
            validator: A spec (wrapped into a definition) or a ready definition

        Returns:
            The definition registered under the name
        """
        if validator.name in cls._validators:
            logger.debug("Validator %s already registered, keeping existing", validator.name)
            return cls._validators[validator.name]

        if isinstance(validator, ValidatorSpec):
            validator = ValidatorDefinition(validator)
        cls._validators[validator.name] = validator
        logger.debug("Registered validator %s (priority %s)", validator.name, validator.priority)
        return validator

    @classmethod
    def get(cls, name: str) -> ValidatorDefinition:
        """Get a registered validator by name.

        Raises:
            ValueError: If validator is not registered
        """
        if name not in cls._validators:
            raise ValueError(
                f"Validator '{name}' is not registered. "
                "Available validators: " + ", ".join(cls.list_registered())
            )
        return cls._validators[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a validator is registered."""
        return name in cls._validators

    @classmethod
    def list_registered(cls) -> list[str]:
        """List all registered validator names."""
        return sorted(cls._validators.keys())

    @classmethod
    def by_priority(cls) -> list[ValidatorDefinition]:
        """All definitions, highest priority first (ties by name)."""
        return sorted(cls._validators.values(), key=lambda v: (-v.priority, v.name))

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._validators.clear()


def validator(name: str, **spec_fields: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to register a function as the string handler of a validator.

    Usage:
        @validator("startswith", priority=16)
        def starts_with(value, prefix):
            return str(value).startswith(prefix)
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        ValidatorRegistry.register(ValidatorSpec(name=name, validate_string=fn, **spec_fields))
        return fn

    return decorator
