"""Pydantic models for fleet bicycles and the editor's draft input."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class BicycleCategory(str, Enum):
    VTT = "VTT"
    CITY = "City"
    ELECTRIC = "Electric"


class Bicycle(BaseModel):
    """One bicycle in the fleet. Replaced, never mutated, on edit."""

    id: str
    name: str
    price: float = Field(ge=0)  # rate per hour
    category: BicycleCategory

    model_config = {"frozen": True}


class BicycleDraft(BaseModel):
    """Fields the fleet editor collects to create or update a bicycle."""

    name: str
    price: float = Field(ge=0)
    category: BicycleCategory = BicycleCategory.CITY

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value
