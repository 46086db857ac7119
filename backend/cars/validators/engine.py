"""Validator — runs every registered rule against a record and aggregates violations.

Usage:
    report = driver_validator.validate(driver, EvaluationContext(today=date(2024, 6, 1)))
    if not report.is_valid:
        errors = report.field_errors()
"""

import time
from collections.abc import Mapping
from typing import Any, Optional

import structlog
from pydantic import BaseModel

from cars.validators.base import BaseRule
from cars.validators.driver_rules import build_driver_registry
from cars.validators.exceptions import UnknownFieldError
from cars.validators.models import EvaluationContext, ValidationResult, Violation
from cars.validators.registry import RuleRegistry

logger = structlog.get_logger()

_MISSING = object()


class Validator:
    """Evaluates a rule registry against record instances.

    Design principles:
        - Deterministic: same record and context give an equal result
        - Complete: no short-circuit, every failing rule is reported
        - Failures are data: only wiring defects raise
    """

    def __init__(self, registry: Optional[RuleRegistry] = None):
        """
        Args:
            registry: Rules to apply. If None, uses the Driver rules.
        """
        self.registry = registry if registry is not None else build_driver_registry()

    def validate(self, record: Any, context: EvaluationContext) -> ValidationResult:
        """Run all registered rules against the record.

        Args:
            record: Pydantic model, plain object or mapping holding the fields
            context: Evaluation facts; callers build it, e.g. EvaluationContext.now()

        Returns:
            ValidationResult listing every violation in rule order

        Raises:
            UnknownFieldError: a rule references a field the record lacks
        """
        return self._run(record, self.registry.snapshot(), context)

    def validate_field(self, record: Any, field: str, context: EvaluationContext) -> ValidationResult:
        """Run only the rules bound to one field.

        Raises:
            UnknownFieldError: the registry's record type has no such field
        """
        record_type = self.registry.record_type
        if record_type is not None and field not in record_type.model_fields:
            raise UnknownFieldError(field, record_type.__name__)
        return self._run(record, self.registry.rules_for(field), context)

    def _run(self, record: Any, rules: tuple[BaseRule, ...], context: EvaluationContext) -> ValidationResult:
        start_time = time.perf_counter()

        violations: list[Violation] = []
        for rule in rules:
            value = self._read_field(record, rule)
            try:
                violation = rule.evaluate(value, context)
            except Exception as e:
                logger.error("rule_crashed", rule=rule.name, field=rule.field, error=str(e))
                raise
            if violation is not None:
                violations.append(violation)

        result = ValidationResult.build(violations)

        logger.info(
            "validation_complete",
            record_type=type(record).__name__,
            is_valid=result.is_valid,
            rules_evaluated=len(rules),
            total_violations=len(violations),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return result

    @staticmethod
    def _read_field(record: Any, rule: BaseRule) -> Any:
        if isinstance(record, Mapping):
            value = record.get(rule.field, _MISSING)
        elif isinstance(record, BaseModel) and rule.field not in type(record).model_fields:
            value = _MISSING
        else:
            value = getattr(record, rule.field, _MISSING)

        if value is _MISSING:
            raise UnknownFieldError(rule.field, type(record).__name__, rule.name)
        return value


# Module-level singleton wired once at import
driver_validator = Validator()
