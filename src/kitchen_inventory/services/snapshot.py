"""Point-in-time snapshot of recipes and inventory for analytics."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kitchen_inventory.domain.errors import AnalyticsUnavailableError

if TYPE_CHECKING:
    from kitchen_inventory.domain.inventory import InventoryItem
    from kitchen_inventory.domain.recipes import Recipe
    from kitchen_inventory.services.inventory import InventoryRepository
    from kitchen_inventory.services.recipes import RecipeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KitchenSnapshot:
    """All recipes and inventory items read for one request."""

    recipes: list[Recipe]
    inventory: list[InventoryItem]

    def recipes_owned_by(self, user_id: str) -> list[Recipe]:
        """Return the recipes belonging to one owner."""
        return [recipe for recipe in self.recipes if recipe.user_id == user_id]


async def load_snapshot(
    recipe_repository: RecipeRepository,
    inventory_repository: InventoryRepository,
) -> KitchenSnapshot:
    """Read both collections concurrently.

    Any repository failure fails the whole snapshot; partial analytics are
    never returned.
    """
    try:
        recipes, inventory = await asyncio.gather(
            asyncio.to_thread(recipe_repository.list_recipes),
            asyncio.to_thread(inventory_repository.list_items),
        )
    except Exception as exc:
        logger.exception("Failed to load kitchen snapshot")
        raise AnalyticsUnavailableError("Analytics are temporarily unavailable") from exc
    return KitchenSnapshot(recipes=recipes, inventory=inventory)
