"""Domain errors raised by kitchen services."""


class KitchenError(Exception):
    """Base class for recoverable, request-scoped failures."""


class AnalyticsUnavailableError(KitchenError):
    """Raised when the recipe or inventory snapshot cannot be loaded."""


class RecipeNotFoundError(KitchenError):
    """Raised when a recipe id does not exist."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"Recipe {recipe_id} not found")
        self.recipe_id = recipe_id


class DuplicateRecipeError(KitchenError):
    """Raised when an owner already has a recipe with the same title."""

    def __init__(self, user_id: str, title: str) -> None:
        super().__init__(f"A recipe titled {title!r} already exists for {user_id}")
        self.user_id = user_id
        self.title = title


class InventoryItemNotFoundError(KitchenError):
    """Raised when an inventory id does not exist."""

    def __init__(self, inventory_id: str) -> None:
        super().__init__(f"Inventory item {inventory_id} not found")
        self.inventory_id = inventory_id


class InventoryValidationError(KitchenError):
    """Raised when an inventory write breaks a cross-field invariant."""
