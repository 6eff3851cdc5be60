"""Supabase repository for recipes."""

from dataclasses import asdict, dataclass

from postgrest.exceptions import APIError
from supabase import Client

from kitchen_inventory.adapters.supabase_rows import (
    EPOCH,
    parse_datetime,
    serialize_value,
)
from kitchen_inventory.domain.errors import DuplicateRecipeError
from kitchen_inventory.domain.recipes import Recipe
from kitchen_inventory.services.recipes import RecipeRepository

UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipe queries."""

    client: Client

    def list_recipes(self, user_id: str | None = None) -> list[Recipe]:
        """Return recipes, newest first."""
        query = self.client.table("recipes").select("*")
        if user_id is not None:
            query = query.eq("user_id", user_id)
        response = query.order("created_date", desc=True).execute()
        return [_parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("recipe_id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def find_by_title(self, user_id: str, title: str) -> Recipe | None:
        """Return an owner's recipe with the given title, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("user_id", user_id)
            .eq("title", title)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def create_recipe(self, recipe: Recipe) -> Recipe:
        """Insert a recipe and return the stored row."""
        payload = {key: serialize_value(value) for key, value in asdict(recipe).items()}
        try:
            response = self.client.table("recipes").insert(payload).execute()
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise DuplicateRecipeError(recipe.user_id, recipe.title) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return _parse_recipe(response.data[0])


def _parse_recipe(row: dict[str, object]) -> Recipe:
    return Recipe(
        recipe_id=str(row["recipe_id"]),
        user_id=str(row["user_id"]),
        title=str(row.get("title", "")),
        chef=str(row.get("chef", "")),
        ingredients=tuple(str(entry) for entry in row.get("ingredients") or []),
        instructions=tuple(str(entry) for entry in row.get("instructions") or []),
        meal_type=str(row.get("meal_type", "")),
        cuisine_type=str(row.get("cuisine_type", "")),
        prep_time=int(row.get("prep_time", 0)),
        difficulty=str(row.get("difficulty", "")),
        servings=int(row.get("servings", 0)),
        created_date=parse_datetime(row.get("created_date")) or EPOCH,
    )
