"""Domain models for recipes."""

from dataclasses import dataclass
from datetime import datetime

RECIPE_ID_PREFIX = "R"
MEAL_TYPES = ("Breakfast", "Lunch", "Dinner", "Snack")
CUISINE_TYPES = (
    "Italian",
    "Asian",
    "Mexican",
    "American",
    "French",
    "Indian",
    "Mediterranean",
    "Other",
)
DIFFICULTY_TYPES = ("Easy", "Medium", "Hard")
COPY_SUFFIX = " (Copy)"


@dataclass(frozen=True)
class Recipe:
    """A chef-owned recipe."""

    recipe_id: str
    user_id: str
    title: str
    chef: str
    ingredients: tuple[str, ...]
    instructions: tuple[str, ...]
    meal_type: str
    cuisine_type: str
    prep_time: int
    difficulty: str
    servings: int
    created_date: datetime


@dataclass(frozen=True)
class RecipeDraft:
    """Recipe content before an identifier has been assigned."""

    user_id: str
    title: str
    chef: str
    ingredients: tuple[str, ...]
    instructions: tuple[str, ...]
    meal_type: str
    cuisine_type: str
    prep_time: int
    difficulty: str
    servings: int
    created_date: datetime


def copy_for_owner(recipe: Recipe, user_id: str, created_date: datetime) -> RecipeDraft:
    """Return a detached copy of a recipe owned by another user."""
    return RecipeDraft(
        user_id=user_id,
        title=f"{recipe.title}{COPY_SUFFIX}",
        chef=recipe.chef,
        ingredients=recipe.ingredients,
        instructions=recipe.instructions,
        meal_type=recipe.meal_type,
        cuisine_type=recipe.cuisine_type,
        prep_time=recipe.prep_time,
        difficulty=recipe.difficulty,
        servings=recipe.servings,
        created_date=created_date,
    )


def format_sequence_id(prefix: str, number: int) -> str:
    """Format a sequence value as a human-readable id, e.g. R-00042."""
    return f"{prefix}-{number:05d}"
