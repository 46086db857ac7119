"""CPF (Brazilian national id number) rule.

Accepts the punctuated form 000.000.000-00 (dots optional) or eleven bare
digits, and checks both mod-11 verification digits.
"""

import re
from typing import Any

from cars.validators.base import BaseRule
from cars.validators.models import EvaluationContext, RuleCode

CPF_PATTERN = re.compile(r"[0-9]{3}\.?[0-9]{3}\.?[0-9]{3}-[0-9]{2}|[0-9]{11}")


def _check_digit(digits: list[int]) -> int:
    weight = len(digits) + 1
    total = sum(d * (weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(value: str) -> bool:
    """True when value is a well-formed CPF with correct check digits."""
    if not CPF_PATTERN.fullmatch(value):
        return False
    digits = [int(c) for c in value if c.isdigit()]
    # 000.000.000-00, 111.111.111-11 ... pass the arithmetic but are not issued
    if len(set(digits)) == 1:
        return False
    first = _check_digit(digits[:9])
    second = _check_digit(digits[:9] + [first])
    return digits[9] == first and digits[10] == second


class CpfRule(BaseRule):
    """Valid CPF. None and blank pass; pair with NotBlankRule."""

    default_message = "cpf must be valid"

    @property
    def name(self) -> str:
        return RuleCode.CPF.value

    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        if self._is_blank(value):
            return True
        return isinstance(value, str) and is_valid_cpf(value)
