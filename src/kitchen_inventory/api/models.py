"""Pydantic request models for the kitchen API."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from kitchen_inventory.domain.inventory import (
    ALLOWED_CATEGORIES,
    ALLOWED_LOCATIONS,
    ALLOWED_UNITS,
)

INGREDIENT_NAME_PATTERN = r"^[a-zA-Z\s-]+$"


def _one_of(value: str | None, allowed: tuple[str, ...], field: str) -> str | None:
    if value is not None and value not in allowed:
        raise ValueError(f"{field} must be one of: {', '.join(allowed)}")
    return value


def _stripped(value: object) -> object:
    # Trimmed before the length and pattern checks run.
    return value.strip() if isinstance(value, str) else value


def _cents(value: float | None) -> float | None:
    if value is not None and round(value, 2) != value:
        raise ValueError("cost must have at most 2 decimal places")
    return value


class ImportSuggestedRequest(BaseModel):
    """Body for importing a suggested recipe."""

    source_recipe_id: str = Field(min_length=1)


class InventoryItemCreate(BaseModel):
    """New inventory item payload."""

    ingredient_name: str = Field(
        min_length=2, max_length=50, pattern=INGREDIENT_NAME_PATTERN
    )
    quantity: float = Field(ge=0.01, le=9999)
    unit: str
    category: str
    purchase_date: date
    expiration_date: date
    location: str
    cost: float = Field(ge=0.01, le=999.99)

    @field_validator("ingredient_name", mode="before")
    @classmethod
    def strip_name(cls, value: object) -> object:
        return _stripped(value)

    @field_validator("unit")
    @classmethod
    def check_unit(cls, value: str) -> str:
        return _one_of(value, ALLOWED_UNITS, "unit")

    @field_validator("category")
    @classmethod
    def check_category(cls, value: str) -> str:
        return _one_of(value, ALLOWED_CATEGORIES, "category")

    @field_validator("location")
    @classmethod
    def check_location(cls, value: str) -> str:
        return _one_of(value, ALLOWED_LOCATIONS, "location")

    @field_validator("cost")
    @classmethod
    def check_cost(cls, value: float) -> float:
        return _cents(value)


class InventoryItemUpdate(BaseModel):
    """Partial inventory update; omitted fields keep their stored value."""

    ingredient_name: str | None = Field(
        default=None, min_length=2, max_length=50, pattern=INGREDIENT_NAME_PATTERN
    )
    quantity: float | None = Field(default=None, ge=0.01, le=9999)
    unit: str | None = None
    category: str | None = None
    purchase_date: date | None = None
    expiration_date: date | None = None
    location: str | None = None
    cost: float | None = Field(default=None, ge=0.01, le=999.99)

    @field_validator("ingredient_name", mode="before")
    @classmethod
    def strip_name(cls, value: object) -> object:
        return _stripped(value)

    @field_validator("unit")
    @classmethod
    def check_unit(cls, value: str | None) -> str | None:
        return _one_of(value, ALLOWED_UNITS, "unit")

    @field_validator("category")
    @classmethod
    def check_category(cls, value: str | None) -> str | None:
        return _one_of(value, ALLOWED_CATEGORIES, "category")

    @field_validator("location")
    @classmethod
    def check_location(cls, value: str | None) -> str | None:
        return _one_of(value, ALLOWED_LOCATIONS, "location")

    @field_validator("cost")
    @classmethod
    def check_cost(cls, value: float | None) -> float | None:
        return _cents(value)
