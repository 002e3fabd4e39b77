"""Validators CLI command — list registered validators."""

import click

from ruleforge.validation.registry import ValidatorRegistry
from ruleforge.validation.types import RequirementType


def _format_type(requirement_type) -> str:
    if isinstance(requirement_type, tuple):
        return "[" + ", ".join(_format_type(t) for t in requirement_type) + "]"
    if isinstance(requirement_type, RequirementType):
        return requirement_type.value
    return str(requirement_type or RequirementType.STRING.value)


@click.command()
def validators():
    """List registered validators, highest priority first."""
    definitions = ValidatorRegistry.by_priority()
    if not definitions:
        click.echo("No validators registered.")
        return

    for definition in definitions:
        capabilities = ", ".join(kind.name.lower() for kind in definition.capabilities)
        click.echo(
            f"{definition.name:<12} priority={definition.priority:<4} "
            f"type={_format_type(definition.requirement_type):<20} "
            f"handlers={capabilities}"
        )
    click.echo(f"\n{len(definitions)} validator(s) registered.")
