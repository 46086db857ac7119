"""Driver license number rule."""

import re
from typing import Any

from cars.validators.base import BaseRule
from cars.validators.models import EvaluationContext, RuleCode

LICENSE_PATTERN = re.compile(r"[0-9]{11}")


class LicenseFormatRule(BaseRule):
    """Exactly eleven ASCII digits. None and blank fail."""

    default_message = "license number must be exactly 11 digits"

    @property
    def name(self) -> str:
        return RuleCode.LICENSE_FORMAT.value

    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        if self._is_blank(value) or not isinstance(value, str):
            return False
        return LICENSE_PATTERN.fullmatch(value) is not None
