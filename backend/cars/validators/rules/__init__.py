"""Built-in field rules."""

from cars.validators.rules.required import NotBlankRule, SizeRule
from cars.validators.rules.email import EmailRule
from cars.validators.rules.cpf import CpfRule
from cars.validators.rules.odd_day import OddDayRule
from cars.validators.rules.plate import PlateFormatRule
from cars.validators.rules.license import LicenseFormatRule
from cars.validators.rules.manufacture_year import ManufactureYearRangeRule
from cars.validators.rules.offensive_words import NoOffensiveWordsRule

__all__ = [
    "NotBlankRule",
    "SizeRule",
    "EmailRule",
    "CpfRule",
    "OddDayRule",
    "PlateFormatRule",
    "LicenseFormatRule",
    "ManufactureYearRangeRule",
    "NoOffensiveWordsRule",
]
