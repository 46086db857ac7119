"""Mercosul plate format rule."""

import re
from typing import Any

from cars.validators.base import BaseRule
from cars.validators.models import EvaluationContext, RuleCode

# LLLNLNN, e.g. ABC1D23
PLATE_PATTERN = re.compile(r"[A-Z]{3}[0-9][A-Z][0-9]{2}")


class PlateFormatRule(BaseRule):
    """Plate must follow the Mercosul pattern. None and blank fail."""

    default_message = "plate does not match required format"

    @property
    def name(self) -> str:
        return RuleCode.PLATE_FORMAT.value

    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        if self._is_blank(value) or not isinstance(value, str):
            return False
        return PLATE_PATTERN.fullmatch(value) is not None
