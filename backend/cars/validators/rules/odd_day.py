"""Odd day-of-month rule for dates."""

from datetime import date
from typing import Any

from cars.validators.base import BaseRule
from cars.validators.models import EvaluationContext, RuleCode


class OddDayRule(BaseRule):
    """The date's day of month must be odd. None passes."""

    default_message = "day is not odd"

    @property
    def name(self) -> str:
        return RuleCode.ODD_DAY.value

    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        if value is None:
            return True
        if not isinstance(value, date):
            return False
        return value.day % 2 == 1
