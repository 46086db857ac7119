"""Presence and length rules."""

from typing import Any, Optional

from cars.validators.base import BaseRule
from cars.validators.exceptions import InvalidRuleError
from cars.validators.models import EvaluationContext, RuleCode


class NotBlankRule(BaseRule):
    """Fails on None, empty strings and whitespace-only strings."""

    default_message = "value is required"

    @property
    def name(self) -> str:
        return RuleCode.NOT_BLANK.value

    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        return not self._is_blank(value)


class SizeRule(BaseRule):
    """Text length within [min_length, max_length]. None passes."""

    def __init__(
        self,
        field: str,
        min_length: int = 0,
        max_length: Optional[int] = None,
        message: Optional[str] = None,
    ):
        if min_length < 0 or (max_length is not None and max_length < min_length):
            raise InvalidRuleError(f"Invalid size bounds: [{min_length}, {max_length}]")
        self._min_length = min_length
        self._max_length = max_length
        if max_length is None:
            self.default_message = f"{field} must be at least {min_length} characters"
        else:
            self.default_message = f"{field} must be between {min_length} and {max_length} characters"
        super().__init__(field, message)

    @property
    def name(self) -> str:
        return RuleCode.SIZE.value

    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        if value is None:
            return True
        if not isinstance(value, str):
            return False
        if len(value) < self._min_length:
            return False
        return self._max_length is None or len(value) <= self._max_length
