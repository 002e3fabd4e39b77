"""Batch checks loaded from YAML.

A check file lists values to validate against registered validators:

    checks:
      - name: age in range
        validator: range
        value: "42"
        requirement: "[18, 99]"
      - validator: mincheck
        value: [a, b]
        requirement: "1"
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ruleforge.config import EngineConfig
from ruleforge.validation.errors import RuleForgeError
from ruleforge.validation.registry import ValidatorRegistry

logger = logging.getLogger(__name__)


@dataclass
class CheckDefinition:
    """A single check from a check file.

    Attributes:
        validator: Registered validator name
        value: Value to validate (scalar or list)
        requirement: Raw requirement string (or an already-parsed value)
        name: Label used in reports (defaults to "<validator> <requirement>")
    """

    validator: str
    value: Any
    requirement: Any
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            self.name = f"{self.validator} {self.requirement}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CheckDefinition":
        """Create CheckDefinition from a YAML dict."""
        missing = [key for key in ("validator", "requirement") if key not in data]
        if missing:
            raise ValueError(f"Check is missing required key(s): {', '.join(missing)}")
        return cls(
            validator=data["validator"],
            value=data.get("value"),
            requirement=data["requirement"],
            name=data.get("name", ""),
        )


@dataclass
class CheckResult:
    """Outcome of running one check."""

    name: str
    valid: bool
    error: str | None = None


def load_checks(path: Path) -> list[CheckDefinition]:
    """Load check definitions from a YAML file.

    Raises:
        ValueError: If the file has no `checks` list or a check is malformed
    """
    with path.open() as fh:
        data = yaml.safe_load(fh) or {}

    checks = data.get("checks") if isinstance(data, dict) else None
    if not isinstance(checks, list):
        raise ValueError(f"{path}: expected a top-level 'checks' list")

    return [CheckDefinition.from_dict(item) for item in checks]


def run_checks(
    checks: list[CheckDefinition],
    config: EngineConfig | None = None,
) -> list[CheckResult]:
    """Run checks against registered validators.

    Unless `config.errors_as_invalid` is set, the first RuleForgeError
    propagates to the caller.
    """
    config = config or EngineConfig()
    results: list[CheckResult] = []

    for check in checks:
        definition = ValidatorRegistry.get(check.validator)
        try:
            valid = definition.parse_and_validate(check.value, check.requirement)
        except RuleForgeError as e:
            if not config.errors_as_invalid:
                raise
            logger.warning("Check '%s' failed with error: %s", check.name, e)
            results.append(CheckResult(name=check.name, valid=False, error=str(e)))
            continue
        results.append(CheckResult(name=check.name, valid=valid))

    return results
