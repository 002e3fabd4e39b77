"""RuleForge — pluggable rule-validation engine."""

__version__ = "0.1.0"
