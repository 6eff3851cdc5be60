"""Domain models for the shared ingredient inventory."""

from dataclasses import dataclass
from datetime import datetime

from kitchen_inventory.domain.errors import InventoryValidationError

INVENTORY_ID_PREFIX = "I"
ALLOWED_UNITS = ("pieces", "kg", "g", "liters", "ml", "cups", "tbsp", "tsp", "dozen")
ALLOWED_CATEGORIES = (
    "Vegetables",
    "Fruits",
    "Meat",
    "Dairy",
    "Grains",
    "Spices",
    "Beverages",
    "Frozen",
    "Canned",
    "Other",
)
ALLOWED_LOCATIONS = ("Fridge", "Freezer", "Pantry", "Counter", "Cupboard")


@dataclass(frozen=True)
class InventoryItem:
    """A stocked ingredient.

    Dates are ``None`` when the stored value is missing or cannot be parsed;
    analytics skip such items instead of failing the request.
    """

    inventory_id: str
    user_id: str
    ingredient_name: str
    quantity: float
    unit: str
    category: str
    purchase_date: datetime | None
    expiration_date: datetime | None
    location: str
    cost: float
    created_date: datetime | None = None

    @property
    def value(self) -> float:
        """Return the stock value (unit cost times quantity)."""
        return round(self.cost * self.quantity, 2)


@dataclass(frozen=True)
class InventoryDraft:
    """Inventory content before an identifier has been assigned."""

    user_id: str
    ingredient_name: str
    quantity: float
    unit: str
    category: str
    purchase_date: datetime
    expiration_date: datetime
    location: str
    cost: float
    created_date: datetime


def ensure_expiration_after_purchase(
    purchase_date: datetime | None, expiration_date: datetime | None
) -> None:
    """Raise when the expiration date is not strictly after the purchase date."""
    if purchase_date is None or expiration_date is None:
        raise InventoryValidationError("Purchase and expiration dates are required")
    if expiration_date <= purchase_date:
        raise InventoryValidationError("Expiration date must be after purchase date")
