"""Shared pytest fixtures."""

from datetime import date

import pytest

from cars.models import Driver
from cars.validators import EvaluationContext, Validator


@pytest.fixture
def context() -> EvaluationContext:
    """Evaluation context pinned to mid-2024."""
    return EvaluationContext(today=date(2024, 6, 15))


@pytest.fixture
def valid_driver() -> Driver:
    """A driver that satisfies every built-in rule."""
    return Driver(
        id=1,
        name="Maria Silva",
        email="maria.silva@example.com",
        cpf="529.982.247-25",
        birth_date=date(1990, 3, 15),
        plate="ABC1D23",
        license_number="12345678901",
        manufacture_year=2020,
        comment="Ótimo motorista",
    )


@pytest.fixture
def validator() -> Validator:
    return Validator()
