"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable predicate over one field.
New rules are added without modifying the registry or the validator.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from cars.validators.models import EvaluationContext, Violation


class BaseRule(ABC):
    """Abstract base for all field rules.

    Contract:
        - is_valid() is pure: same value and context give the same verdict
        - is_valid() never raises for bad input, it returns False
        - constants a rule needs are owned by the instance and never mutated
    """

    default_message: str = "value is invalid"

    def __init__(self, field: str, message: Optional[str] = None):
        self._field = field
        self._message = message or self.default_message

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name, unique per field."""
        ...

    @property
    def field(self) -> str:
        return self._field

    @property
    def message(self) -> str:
        return self._message

    @abstractmethod
    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        """Return True when the field value satisfies the rule.

        Args:
            value: Current value of the rule's field
            context: Evaluation facts (current date)
        """
        ...

    def evaluate(self, value: Any, context: EvaluationContext) -> Optional[Violation]:
        """Run the predicate and turn a failure into a Violation."""
        if self.is_valid(value, context):
            return None
        return Violation(field=self._field, rule=self.name, message=self._message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self._field!r})"

    # ── Helper Methods ──

    @staticmethod
    def _is_blank(value: Any) -> bool:
        """None, or a string holding only whitespace."""
        if value is None:
            return True
        return isinstance(value, str) and not value.strip()
