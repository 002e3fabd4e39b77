"""Check CLI commands — validate single values or a YAML check file."""

from pathlib import Path

import click

from ruleforge.checks import load_checks, run_checks
from ruleforge.config import EngineConfig
from ruleforge.validation.errors import RuleForgeError
from ruleforge.validation.registry import ValidatorRegistry


@click.command()
@click.argument("validator_name", metavar="VALIDATOR")
@click.argument("requirement")
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--multiple",
    is_flag=True,
    default=False,
    help="Treat the value(s) as a collection even when only one is given.",
)
def check(validator_name: str, requirement: str, values: tuple[str, ...], multiple: bool):
    """Validate VALUES against VALIDATOR with REQUIREMENT.

    Several values are validated together as a collection.
    """
    try:
        definition = ValidatorRegistry.get(validator_name)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(2)

    value = list(values) if multiple or len(values) > 1 else values[0]

    try:
        valid = definition.parse_and_validate(value, requirement)
    except RuleForgeError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(2)

    if valid:
        click.echo(click.style("valid", fg="green"))
    else:
        click.echo(click.style("invalid", fg="red"))
        raise SystemExit(1)


@click.command()
@click.argument("check_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def run(config: EngineConfig, check_file: Path):
    """Run every check in CHECK_FILE (YAML)."""
    try:
        checks = load_checks(check_file)
        results = run_checks(checks, config)
    except (ValueError, RuleForgeError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(2)

    failed = 0
    for result in results:
        if result.valid:
            click.echo(click.style(f"  ✓ {result.name}", fg="green"))
            continue
        failed += 1
        detail = f" ({result.error})" if result.error else ""
        click.echo(click.style(f"  ✗ {result.name}{detail}", fg="red"))

    passed = len(results) - failed
    summary = f"\n{passed} passed, {failed} failed"
    if failed:
        click.echo(click.style(summary, fg="red", bold=True))
        raise SystemExit(1)
    click.echo(click.style(summary, fg="green", bold=True))
