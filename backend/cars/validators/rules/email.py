"""Email address format rule."""

from typing import Any

from email_validator import EmailNotValidError, validate_email

from cars.validators.base import BaseRule
from cars.validators.models import EvaluationContext, RuleCode


class EmailRule(BaseRule):
    """Well-formed address. None and blank pass; pair with NotBlankRule.

    Syntax only: no DNS lookup is made.
    """

    default_message = "email must be a valid address"

    @property
    def name(self) -> str:
        return RuleCode.EMAIL.value

    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        if self._is_blank(value):
            return True
        if not isinstance(value, str):
            return False
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
