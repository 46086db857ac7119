"""Validation models — rule codes, evaluation context, violations and result.

Evaluation is deterministic: the only time-dependent input is the date carried
by the EvaluationContext, never the system clock.
"""

from datetime import date, datetime
from enum import Enum
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, computed_field

from cars.config import get_settings


class RuleCode(str, Enum):
    """Stable names of the built-in rules."""

    NOT_BLANK = "NotBlank"
    SIZE = "Size"
    EMAIL = "Email"
    CPF = "Cpf"
    ODD_DAY = "OddDay"
    PLATE_FORMAT = "PlateFormat"
    LICENSE_FORMAT = "LicenseFormat"
    MANUFACTURE_YEAR_RANGE = "ManufactureYearRange"
    NO_OFFENSIVE_WORDS = "NoOffensiveWords"


class EvaluationContext(BaseModel):
    """Facts a rule may read besides the field value."""

    today: date

    model_config = {"frozen": True}

    @classmethod
    def now(cls, timezone: Optional[str] = None) -> "EvaluationContext":
        """Build a context from the wall clock in the configured timezone."""
        tz = ZoneInfo(timezone or get_settings().TIMEZONE)
        return cls(today=datetime.now(tz).date())

    @property
    def current_year(self) -> int:
        return self.today.year


class Violation(BaseModel):
    """A single failed rule."""

    field: str
    rule: str
    message: str

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Outcome of one validation call. Valid exactly when there are no violations."""

    violations: tuple[Violation, ...] = ()

    model_config = {"frozen": True}

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not self.violations

    @classmethod
    def build(cls, violations: Iterable[Violation]) -> "ValidationResult":
        return cls(violations=tuple(violations))

    def field_errors(self) -> dict[str, list[str]]:
        """Group messages by field, keeping declaration order."""
        errors: dict[str, list[str]] = {}
        for violation in self.violations:
            errors.setdefault(violation.field, []).append(violation.message)
        return errors

    def messages_for(self, field: str) -> list[str]:
        return [v.message for v in self.violations if v.field == field]
