"""Driver record — the subject validated by the rule engine."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Driver(BaseModel):
    """A driver and the vehicle registered to them.

    Every field is optional at the type level so that incomplete or invalid
    candidates can be built and handed to the validator, which reports what
    is wrong instead of refusing construction.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    cpf: Optional[str] = Field(default=None, description="Brazilian national id number")
    birth_date: Optional[date] = None
    plate: Optional[str] = Field(default=None, description="Mercosul plate code, e.g. ABC1D23")
    license_number: Optional[str] = Field(default=None, description="CNH number, 11 digits")
    manufacture_year: Optional[int] = None
    comment: Optional[str] = None

    model_config = {"frozen": True}
