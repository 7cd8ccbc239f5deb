"""Employee model definitions."""
from pydantic import BaseModel, Field


class EmployeeBase(BaseModel):
    """Base employee fields."""

    name: str = Field(min_length=1)
    mo_hours: float = 0
    di_hours: float = 0
    mi_hours: float = 0
    do_hours: float = 0
    fr_hours: float = 0


class EmployeeCreate(EmployeeBase):
    """Employee creation model."""


class Employee(EmployeeBase):
    """Full employee model with database fields."""

    id: int
