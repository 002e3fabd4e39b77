"""RuleForge CLI entry point."""

import logging

import click

from ruleforge.config import EngineConfig
from ruleforge.validation.validators import register_builtin_validators


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """RuleForge — pluggable rule-validation engine CLI."""
    config = EngineConfig.from_env()
    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    register_builtin_validators()
    ctx.obj = config


# Register subcommands
from ruleforge.cli.check_cmd import check, run  # noqa: E402
from ruleforge.cli.validators_cmd import validators  # noqa: E402

cli.add_command(check)
cli.add_command(run)
cli.add_command(validators)
