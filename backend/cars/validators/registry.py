"""Rule registry — ordered, build-once collection of rules bound to fields.

Registration takes a single lock and swaps in new tuples rather than mutating
the ones already handed out, so a validation running concurrently with a late
registration keeps a consistent snapshot.
"""

import threading
from typing import Iterable, Optional

import structlog
from pydantic import BaseModel

from cars.validators.base import BaseRule
from cars.validators.exceptions import DuplicateRuleError, UnknownFieldError

logger = structlog.get_logger()


class RuleRegistry:
    """Holds rules in registration order, indexed by field."""

    def __init__(self, record_type: Optional[type[BaseModel]] = None):
        """
        Args:
            record_type: Optional pydantic model the rules target. When given,
                rules for fields it does not declare are rejected on registration.
        """
        self._record_type = record_type
        self._lock = threading.Lock()
        self._rules: tuple[BaseRule, ...] = ()
        self._by_field: dict[str, tuple[BaseRule, ...]] = {}

    @property
    def record_type(self) -> Optional[type[BaseModel]]:
        return self._record_type

    def register(self, rule: BaseRule) -> BaseRule:
        """Append a rule.

        Raises:
            DuplicateRuleError: a rule with the same name is bound to the field
            UnknownFieldError: the record type has no such field
        """
        with self._lock:
            if self._record_type is not None and rule.field not in self._record_type.model_fields:
                raise UnknownFieldError(rule.field, self._record_type.__name__, rule.name)

            existing = self._by_field.get(rule.field, ())
            if any(r.name == rule.name for r in existing):
                raise DuplicateRuleError(rule.field, rule.name)

            by_field = dict(self._by_field)
            by_field[rule.field] = existing + (rule,)
            self._by_field = by_field
            self._rules = self._rules + (rule,)

        logger.debug("rule_registered", rule=rule.name, field=rule.field)
        return rule

    def register_all(self, rules: Iterable[BaseRule]) -> None:
        for rule in rules:
            self.register(rule)

    def rules_for(self, field: str) -> tuple[BaseRule, ...]:
        """Rules bound to field in registration order (empty if none)."""
        return self._by_field.get(field, ())

    def snapshot(self) -> tuple[BaseRule, ...]:
        """Every rule in registration order."""
        return self._rules

    @property
    def fields(self) -> list[str]:
        """Bound fields in first-registration order."""
        return list(self._by_field)

    def __len__(self) -> int:
        return len(self._rules)
