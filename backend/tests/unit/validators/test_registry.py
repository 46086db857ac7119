"""Unit tests for RuleRegistry."""

import threading

import pytest

from cars.models import Driver
from cars.validators import ConfigurationError, DuplicateRuleError, RuleRegistry, UnknownFieldError
from cars.validators.driver_rules import build_driver_registry
from cars.validators.rules import NotBlankRule, OddDayRule, PlateFormatRule, SizeRule


class TestRegister:
    """Test rule registration."""

    def test_register_appends_in_order(self):
        registry = RuleRegistry()
        first = registry.register(NotBlankRule("name"))
        second = registry.register(SizeRule("name", min_length=2))
        assert registry.rules_for("name") == (first, second)
        assert len(registry) == 2

    def test_duplicate_name_on_same_field_raises(self):
        """Test that the same rule name twice on one field is a configuration error."""
        registry = RuleRegistry()
        registry.register(NotBlankRule("name"))
        with pytest.raises(ConfigurationError) as exc_info:
            registry.register(NotBlankRule("name", message="other"))
        assert isinstance(exc_info.value, DuplicateRuleError)
        assert "NotBlank" in str(exc_info.value)
        assert len(registry) == 1

    def test_same_name_on_different_fields_allowed(self):
        registry = RuleRegistry()
        registry.register(NotBlankRule("name"))
        registry.register(NotBlankRule("email"))
        assert registry.fields == ["name", "email"]

    def test_unknown_field_rejected_for_typed_registry(self):
        registry = RuleRegistry(record_type=Driver)
        with pytest.raises(UnknownFieldError) as exc_info:
            registry.register(PlateFormatRule("licence_plate"))
        assert "licence_plate" in str(exc_info.value)
        assert "Driver" in str(exc_info.value)

    def test_untyped_registry_accepts_any_field(self):
        registry = RuleRegistry()
        registry.register(OddDayRule("anything"))
        assert registry.record_type is None
        assert len(registry) == 1


class TestLookup:
    """Test rule lookup."""

    def test_rules_for_unbound_field_is_empty(self):
        assert RuleRegistry().rules_for("comment") == ()

    def test_snapshot_unaffected_by_later_registration(self):
        """Test that a taken snapshot does not see rules registered afterwards."""
        registry = RuleRegistry()
        registry.register(NotBlankRule("name"))
        snapshot = registry.snapshot()
        field_rules = registry.rules_for("name")
        registry.register(SizeRule("name", min_length=2))
        assert len(snapshot) == 1
        assert len(field_rules) == 1
        assert len(registry.snapshot()) == 2

    def test_concurrent_registration_keeps_every_rule(self):
        registry = RuleRegistry()
        fields = [f"field_{i}" for i in range(50)]
        threads = [threading.Thread(target=registry.register, args=(NotBlankRule(f),)) for f in fields]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(registry) == 50
        assert sorted(registry.fields) == sorted(fields)


class TestDriverRegistry:
    """Test the Driver wiring."""

    def test_driver_fields_bound(self):
        registry = build_driver_registry()
        assert registry.fields == [
            "name",
            "email",
            "cpf",
            "birth_date",
            "plate",
            "license_number",
            "manufacture_year",
            "comment",
        ]
        assert registry.record_type is Driver

    def test_name_rules_in_declaration_order(self):
        names = [r.name for r in build_driver_registry().rules_for("name")]
        assert names == ["NotBlank", "Size"]

    def test_id_has_no_rules(self):
        assert build_driver_registry().rules_for("id") == ()
