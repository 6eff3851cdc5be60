"""Inventory insight projections."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, tzinfo

from kitchen_inventory.domain.alerts import find_expiring
from kitchen_inventory.domain.availability import (
    IngredientMatcher,
    inventory_names,
    split_ingredients,
    substring_match,
)
from kitchen_inventory.domain.inventory import InventoryItem
from kitchen_inventory.domain.recipes import Recipe

SHOPPING_LIST_LIMIT = 10
SHOPPING_LIST_EXAMPLES = 5


@dataclass(frozen=True)
class RecipeRef:
    """Short reference to a recipe."""

    recipe_id: str
    title: str


@dataclass(frozen=True)
class WasteRiskItem:
    """An expiring item together with the recipes that could use it."""

    item: InventoryItem
    days_left: int
    value_at_risk: float
    recipes_using: list[RecipeRef]


@dataclass(frozen=True)
class MonthlySpend:
    """Purchase spend for one category in one month."""

    year: int
    month: int
    category: str
    total_spent: float
    purchases: int


@dataclass(frozen=True)
class ShoppingListEntry:
    """A missing ingredient ranked by how many recipes need it."""

    ingredient: str
    recipe_count: int
    recipes: list[RecipeRef]


@dataclass(frozen=True)
class InventoryInsights:
    """Combined insight report."""

    expiration_waste: list[WasteRiskItem]
    monthly_spending_by_category: list[MonthlySpend]
    smart_shopping_list: list[ShoppingListEntry]


def recipes_using(
    ingredient_name: str,
    recipes: Sequence[Recipe],
    matcher: IngredientMatcher = substring_match,
) -> list[RecipeRef]:
    """Return recipes with at least one ingredient matching the inventory name."""
    name = ingredient_name.lower()
    return [
        RecipeRef(recipe_id=recipe.recipe_id, title=recipe.title)
        for recipe in recipes
        if any(matcher(ingredient, name) for ingredient in recipe.ingredients)
    ]


def expiration_waste(  # noqa: PLR0913
    items: Sequence[InventoryItem],
    recipes: Sequence[Recipe],
    *,
    today: date,
    tz: tzinfo,
    horizon_days: int,
    matcher: IngredientMatcher = substring_match,
) -> list[WasteRiskItem]:
    """Cross-reference expiring items with the recipes that use them."""
    return [
        WasteRiskItem(
            item=entry.item,
            days_left=entry.days_left,
            value_at_risk=entry.value_at_risk,
            recipes_using=recipes_using(entry.item.ingredient_name, recipes, matcher),
        )
        for entry in find_expiring(items, today, horizon_days, tz)
    ]


def monthly_spending(items: Sequence[InventoryItem], tz: tzinfo) -> list[MonthlySpend]:
    """Group purchase spend by year, month and category."""
    totals: dict[tuple[int, int, str], float] = {}
    purchases: dict[tuple[int, int, str], int] = {}
    for item in items:
        if item.purchase_date is None:
            continue
        purchased = item.purchase_date.astimezone(tz)
        key = (purchased.year, purchased.month, item.category)
        totals[key] = totals.get(key, 0.0) + item.cost * item.quantity
        purchases[key] = purchases.get(key, 0) + 1
    rows = [
        MonthlySpend(
            year=year,
            month=month,
            category=category,
            total_spent=round(total, 2),
            purchases=purchases[(year, month, category)],
        )
        for (year, month, category), total in totals.items()
    ]
    rows.sort(key=lambda row: (-row.year, -row.month, -row.total_spent))
    return rows


def smart_shopping_list(
    recipes: Sequence[Recipe],
    items: Sequence[InventoryItem],
    matcher: IngredientMatcher = substring_match,
    limit: int = SHOPPING_LIST_LIMIT,
) -> list[ShoppingListEntry]:
    """Rank missing ingredients by the number of recipes that need them."""
    names = inventory_names(item.ingredient_name for item in items)
    needed_by: dict[str, dict[str, RecipeRef]] = {}
    for recipe in recipes:
        _, missing = split_ingredients(recipe.ingredients, names, matcher)
        for ingredient in missing:
            refs = needed_by.setdefault(ingredient, {})
            refs.setdefault(
                recipe.recipe_id,
                RecipeRef(recipe_id=recipe.recipe_id, title=recipe.title),
            )
    entries = [
        ShoppingListEntry(
            ingredient=ingredient,
            recipe_count=len(refs),
            recipes=list(refs.values())[:SHOPPING_LIST_EXAMPLES],
        )
        for ingredient, refs in needed_by.items()
    ]
    entries.sort(key=lambda entry: entry.recipe_count, reverse=True)
    return entries[:limit]
