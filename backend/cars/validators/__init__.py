"""Field validation engine for Driver records.

Usage:
    from cars.validators import driver_validator, EvaluationContext

    result = driver_validator.validate(driver, EvaluationContext.now())
    if not result.is_valid:
        # Map result.field_errors() onto form fields
"""

from cars.validators.base import BaseRule
from cars.validators.engine import Validator, driver_validator
from cars.validators.exceptions import (
    ConfigurationError,
    DuplicateRuleError,
    InvalidRuleError,
    UnknownFieldError,
)
from cars.validators.models import EvaluationContext, RuleCode, ValidationResult, Violation
from cars.validators.registry import RuleRegistry

__all__ = [
    "BaseRule",
    "Validator",
    "driver_validator",
    "RuleRegistry",
    "EvaluationContext",
    "RuleCode",
    "ValidationResult",
    "Violation",
    "ConfigurationError",
    "DuplicateRuleError",
    "InvalidRuleError",
    "UnknownFieldError",
]
