"""Engine misconfiguration errors.

These signal a defect in how rules were wired, never bad user input. Rule
failures are reported as Violation entries instead.
"""


class ConfigurationError(Exception):
    """Base class for rule engine wiring errors."""


class DuplicateRuleError(ConfigurationError):
    """A rule with the same name is already bound to the field."""

    def __init__(self, field: str, rule_name: str):
        self.field = field
        self.rule_name = rule_name
        super().__init__(f"Rule '{rule_name}' is already registered for field '{field}'")


class UnknownFieldError(ConfigurationError):
    """A rule targets a field the record does not have."""

    def __init__(self, field: str, record_type: str, rule_name: str = ""):
        self.field = field
        self.record_type = record_type
        self.rule_name = rule_name
        target = f"Rule '{rule_name}' references" if rule_name else "Reference to"
        super().__init__(f"{target} unknown field '{field}' on {record_type}")


class InvalidRuleError(ConfigurationError):
    """A rule was constructed with inconsistent parameters."""
