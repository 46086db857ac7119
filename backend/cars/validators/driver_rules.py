"""Rules attached to the Driver record.

Each entry binds one rule to one Driver field; the order here is the order in
which violations are reported.
"""

from cars.models.driver import Driver
from cars.validators.base import BaseRule
from cars.validators.registry import RuleRegistry
from cars.validators.rules import (
    CpfRule,
    EmailRule,
    LicenseFormatRule,
    ManufactureYearRangeRule,
    NoOffensiveWordsRule,
    NotBlankRule,
    OddDayRule,
    PlateFormatRule,
    SizeRule,
)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50


def driver_rules() -> list[BaseRule]:
    """Create the Driver rule set in declaration order."""
    return [
        NotBlankRule("name", message="name is required"),
        SizeRule("name", min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH),
        NotBlankRule("email", message="email is required"),
        EmailRule("email"),
        NotBlankRule("cpf", message="cpf is required"),
        CpfRule("cpf"),
        OddDayRule("birth_date"),
        PlateFormatRule("plate"),
        LicenseFormatRule("license_number"),
        ManufactureYearRangeRule("manufacture_year"),
        NoOffensiveWordsRule("comment"),
    ]


def build_driver_registry() -> RuleRegistry:
    registry = RuleRegistry(record_type=Driver)
    registry.register_all(driver_rules())
    return registry
