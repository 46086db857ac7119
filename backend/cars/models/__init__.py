"""Domain models."""

from cars.models.driver import Driver

__all__ = ["Driver"]
