"""Vehicle manufacture year rule."""

from typing import Any, Optional

from cars.validators.base import BaseRule
from cars.validators.models import EvaluationContext, RuleCode

# Benz Patent-Motorwagen
FIRST_AUTOMOBILE_YEAR = 1886


class ManufactureYearRangeRule(BaseRule):
    """Year in [earliest, current year]; the upper bound comes from the context.

    None fails.
    """

    default_message = "manufacture year out of valid range"

    def __init__(self, field: str, earliest: int = FIRST_AUTOMOBILE_YEAR, message: Optional[str] = None):
        super().__init__(field, message)
        self._earliest = earliest

    @property
    def name(self) -> str:
        return RuleCode.MANUFACTURE_YEAR_RANGE.value

    @property
    def earliest(self) -> int:
        return self._earliest

    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        if value is None or isinstance(value, bool) or not isinstance(value, int):
            return False
        return self._earliest <= value <= context.current_year
