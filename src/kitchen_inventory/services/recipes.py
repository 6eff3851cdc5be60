"""Recipe availability against the shared inventory."""

import logging
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Protocol

from kitchen_inventory.domain.availability import (
    READY_PERCENT,
    AvailabilityResult,
    IngredientMatcher,
    calculate_availability,
    inventory_names,
    newest_first,
    substring_match,
)
from kitchen_inventory.domain.errors import DuplicateRecipeError, RecipeNotFoundError
from kitchen_inventory.domain.recipes import (
    RECIPE_ID_PREFIX,
    Recipe,
    copy_for_owner,
)
from kitchen_inventory.services.inventory import InventoryRepository
from kitchen_inventory.services.sequences import SequenceGenerator, next_identifier
from kitchen_inventory.services.snapshot import KitchenSnapshot, load_snapshot

RECIPE_SEQUENCE = "recipes"

logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def list_recipes(self, user_id: str | None = None) -> list[Recipe]:
        """Return all recipes, optionally for one owner."""

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return a recipe by id, if present."""

    def find_by_title(self, user_id: str, title: str) -> Recipe | None:
        """Return an owner's recipe with the given title, if present."""

    def create_recipe(self, recipe: Recipe) -> Recipe:
        """Insert a recipe and return the stored row."""


@dataclass
class RecipeAvailabilityReport:
    """Owner recipe readiness plus system-wide suggestions."""

    recipe_availability: list[AvailabilityResult]
    suggested_recipes: list[AvailabilityResult]


@dataclass
class RecipeAvailabilityService:
    """Computes which recipes can be cooked from current stock."""

    recipe_repository: RecipeRepository
    inventory_repository: InventoryRepository
    sequences: SequenceGenerator
    matcher: IngredientMatcher = substring_match

    async def get_recipe_availability(self, user_id: str) -> RecipeAvailabilityReport:
        """Return availability for an owner's recipes and global suggestions."""
        snapshot = await load_snapshot(self.recipe_repository, self.inventory_repository)
        names = inventory_names(item.ingredient_name for item in snapshot.inventory)
        owned = [
            calculate_availability(recipe, names, self.matcher)
            for recipe in snapshot.recipes_owned_by(user_id)
        ]
        return RecipeAvailabilityReport(
            recipe_availability=newest_first(owned),
            suggested_recipes=self.suggest(snapshot),
        )

    async def get_suggested_recipes(self) -> list[AvailabilityResult]:
        """Return every fully available recipe regardless of owner."""
        snapshot = await load_snapshot(self.recipe_repository, self.inventory_repository)
        return self.suggest(snapshot)

    def suggest(self, snapshot: KitchenSnapshot) -> list[AvailabilityResult]:
        """Return fully available recipes from a loaded snapshot, newest first."""
        names = inventory_names(item.ingredient_name for item in snapshot.inventory)
        results = (
            calculate_availability(recipe, names, self.matcher)
            for recipe in snapshot.recipes
        )
        return newest_first(
            result for result in results if result.percent == READY_PERCENT
        )

    def import_suggested_recipe(self, user_id: str, source_recipe_id: str) -> Recipe:
        """Copy a recipe into the owner's collection under a new id."""
        source = self.recipe_repository.get_recipe(source_recipe_id)
        if source is None:
            raise RecipeNotFoundError(source_recipe_id)
        draft = copy_for_owner(source, user_id, datetime.now(tz=UTC))
        if self.recipe_repository.find_by_title(user_id, draft.title):
            raise DuplicateRecipeError(user_id, draft.title)
        recipe_id = next_identifier(self.sequences, RECIPE_SEQUENCE, RECIPE_ID_PREFIX)
        created = self.recipe_repository.create_recipe(
            Recipe(recipe_id=recipe_id, **asdict(draft))
        )
        logger.info(
            "Imported suggested recipe",
            extra={"source_recipe_id": source_recipe_id, "recipe_id": recipe_id},
        )
        return created
