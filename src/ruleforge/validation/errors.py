"""Error taxonomy for requirement parsing and validation dispatch.

Two families:
- RequirementError: the requirement string could not be turned into typed arguments
- DispatchError: the validator has no handler for the shape of the value

The core never catches these; callers decide whether a raised error means
"invalid input" or a programming mistake.
"""


class RuleForgeError(Exception):
    """Base class for all engine errors."""


class RequirementError(RuleForgeError):
    """Error while parsing a requirement string."""


class DispatchError(RuleForgeError):
    """Error while routing a value to a validator handler."""


class UnknownRequirementType(RequirementError):
    def __init__(self, requirement_type: object):
        self.requirement_type = requirement_type
        super().__init__(f'Unknown requirement specification: "{requirement_type}"')


class NotAnInteger(RequirementError):
    def __init__(self, requirement: str):
        self.requirement = requirement
        super().__init__(f'Requirement is not an integer: "{requirement}"')


class NotANumber(RequirementError):
    def __init__(self, requirement: str):
        self.requirement = requirement
        super().__init__(f'Requirement is not a number: "{requirement}"')


class NoSuchReference(RequirementError):
    def __init__(self, requirement: str):
        self.requirement = requirement
        super().__init__(f'No such reference: "{requirement}"')


class NotAnArray(RequirementError):
    def __init__(self, requirement: str):
        self.requirement = requirement
        super().__init__(f'Requirement is not an array: "{requirement}"')


class ArityMismatch(RequirementError):
    """The bracketed requirement has the wrong number of values.

    Attributes:
        got: Number of comma-separated values found
        want: Number of values the requirement type declares
    """

    def __init__(self, got: int, want: int):
        self.got = got
        self.want = want
        super().__init__(f"Requirement has {got} values when {want} are needed")


class UnsupportedMultipleValues(DispatchError):
    def __init__(self, validator_name: str):
        self.validator_name = validator_name
        super().__init__(f"Validator {validator_name} does not handle multiple values")


class UnsupportedScalarValidator(DispatchError):
    def __init__(self, validator_name: str):
        self.validator_name = validator_name
        super().__init__(f"Validator {validator_name} only handles multiple values")


class InvalidPattern(RequirementError):
    """A regexp requirement that does not compile.

    Attributes:
        requirement: The raw requirement string
        reason: The compiler's error message
    """

    def __init__(self, requirement: str, reason: str):
        self.requirement = requirement
        self.reason = reason
        super().__init__(f'Requirement is not a valid pattern: "{requirement}" ({reason})')
