"""Recipe availability against the current inventory."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from kitchen_inventory.domain.recipes import Recipe

READY_TO_COOK = "Ready to Cook!"
MOSTLY_AVAILABLE = "Mostly Available"
PARTIALLY_AVAILABLE = "Partially Available"
NOT_AVAILABLE = "Not Available"

READY_PERCENT = 100
MOSTLY_AVAILABLE_PERCENT = 60
PARTIALLY_AVAILABLE_PERCENT = 30

IngredientMatcher = Callable[[str, str], bool]


def substring_match(recipe_ingredient: str, inventory_name: str) -> bool:
    """Return true when the inventory name occurs inside the ingredient text.

    Matching is case-insensitive containment with no tokenization, so
    "egg" also satisfies "100g eggplant".
    """
    return inventory_name.lower() in recipe_ingredient.lower()


@dataclass(frozen=True)
class AvailabilityResult:
    """Availability of one recipe's ingredients."""

    recipe: Recipe
    available: tuple[str, ...]
    missing: tuple[str, ...]
    percent: int
    status: str


def availability_status(percent: int) -> str:
    """Map an availability percent to its status label."""
    if percent == READY_PERCENT:
        return READY_TO_COOK
    if percent >= MOSTLY_AVAILABLE_PERCENT:
        return MOSTLY_AVAILABLE
    if percent >= PARTIALLY_AVAILABLE_PERCENT:
        return PARTIALLY_AVAILABLE
    return NOT_AVAILABLE


def split_ingredients(
    ingredients: Sequence[str],
    inventory_names: Sequence[str],
    matcher: IngredientMatcher = substring_match,
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Partition ingredients into available and missing, preserving order."""
    available = []
    missing = []
    for ingredient in ingredients:
        if any(matcher(ingredient, name) for name in inventory_names):
            available.append(ingredient)
        else:
            missing.append(ingredient)
    return tuple(available), tuple(missing)


def calculate_availability(
    recipe: Recipe,
    inventory_names: Sequence[str],
    matcher: IngredientMatcher = substring_match,
) -> AvailabilityResult:
    """Compute the availability result for a single recipe."""
    available, missing = split_ingredients(recipe.ingredients, inventory_names, matcher)
    total = len(recipe.ingredients)
    # len(available) * 100 // total is the floor of the ratio without float error.
    percent = len(available) * 100 // total if total else 0
    return AvailabilityResult(
        recipe=recipe,
        available=available,
        missing=missing,
        percent=percent,
        status=availability_status(percent),
    )


def inventory_names(names: Iterable[str]) -> list[str]:
    """Lower-case inventory names for matching; duplicates are kept."""
    return [name.lower() for name in names]


def newest_first(results: Iterable[AvailabilityResult]) -> list[AvailabilityResult]:
    """Sort availability results by recipe creation date, newest first."""
    return sorted(results, key=lambda result: result.recipe.created_date, reverse=True)
