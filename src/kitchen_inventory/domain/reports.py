"""Admin analytics projections over all recipes."""

from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass
from datetime import tzinfo

from kitchen_inventory.domain.availability import (
    AvailabilityResult,
    IngredientMatcher,
    substring_match,
)
from kitchen_inventory.domain.inventory import InventoryItem
from kitchen_inventory.domain.recipes import Recipe

TOP_N_CHEFS = 5
TOP_N_CHEF_CUISINES = 3
TOP_N_RECIPES = 10
TOP_N_INGREDIENTS = 10
TOP_N_COST_REPORTS = 25


@dataclass(frozen=True)
class RecipeSummary:
    """Overall recipe counts and averages."""

    total_recipes: int
    avg_prep_time: int | None
    avg_servings: int | None
    cuisine_types: list[str]


@dataclass(frozen=True)
class CuisineShare:
    """Recipe count and average prep time for a cuisine."""

    cuisine: str
    count: int
    avg_prep: int
    pct: int


@dataclass(frozen=True)
class DifficultyShare:
    """Recipe count and averages for a difficulty level."""

    difficulty: str
    count: int
    avg_prep: int
    avg_servings: int
    pct: int


@dataclass(frozen=True)
class ChefSummary:
    """A chef's recipe output and favourite cuisines."""

    chef: str
    recipes: int
    avg_prep_time: int
    cuisines: list[str]


@dataclass(frozen=True)
class PopularRecipe:
    """A normalized recipe title shared across chefs."""

    title: str
    count: int
    avg_prep: int


@dataclass(frozen=True)
class IngredientUsage:
    """How often an ingredient line appears across recipes."""

    ingredient: str
    count: int


@dataclass(frozen=True)
class SeasonalTrend:
    """Recipes created in a month for a cuisine."""

    year: int
    month: int
    cuisine: str
    count: int


@dataclass(frozen=True)
class CostReport:
    """Estimated cost of a recipe from matched inventory unit costs."""

    recipe_id: str
    title: str
    estimated_cost: float


@dataclass(frozen=True)
class AdminAnalytics:
    """All admin analytics facets from a single snapshot."""

    summary: RecipeSummary
    cuisine_distribution: list[CuisineShare]
    difficulty_analysis: list[DifficultyShare]
    top_chefs: list[ChefSummary]
    popular_recipes: list[PopularRecipe]
    ingredient_usage: list[IngredientUsage]
    seasonal_trends: list[SeasonalTrend]
    cost_reports: list[CostReport]
    recommendations: list[AvailabilityResult]


def _group(
    recipes: Sequence[Recipe], key: Callable[[Recipe], Hashable]
) -> dict[Hashable, list[Recipe]]:
    """Group recipes by key, keeping first-seen group order."""
    groups: dict[Hashable, list[Recipe]] = {}
    for recipe in recipes:
        groups.setdefault(key(recipe), []).append(recipe)
    return groups


def _average(values: Sequence[float]) -> int:
    return round(sum(values) / len(values)) if values else 0


def _percent(count: int, total: int) -> int:
    return round(count / (total or 1) * 100)


def recipe_summary(recipes: Sequence[Recipe]) -> RecipeSummary:
    """Return total count, average prep time and servings."""
    if not recipes:
        return RecipeSummary(
            total_recipes=0, avg_prep_time=None, avg_servings=None, cuisine_types=[]
        )
    return RecipeSummary(
        total_recipes=len(recipes),
        avg_prep_time=_average([recipe.prep_time for recipe in recipes]),
        avg_servings=_average([recipe.servings for recipe in recipes]),
        cuisine_types=[share.cuisine for share in cuisine_distribution(recipes)],
    )


def cuisine_distribution(recipes: Sequence[Recipe]) -> list[CuisineShare]:
    """Return recipe counts per cuisine, most common first."""
    shares = [
        CuisineShare(
            cuisine=cuisine,
            count=len(group),
            avg_prep=_average([recipe.prep_time for recipe in group]),
            pct=_percent(len(group), len(recipes)),
        )
        for cuisine, group in _group(recipes, lambda r: r.cuisine_type).items()
    ]
    shares.sort(key=lambda share: share.count, reverse=True)
    return shares


def difficulty_analysis(recipes: Sequence[Recipe]) -> list[DifficultyShare]:
    """Return recipe counts and averages per difficulty, most common first."""
    shares = [
        DifficultyShare(
            difficulty=difficulty,
            count=len(group),
            avg_prep=_average([recipe.prep_time for recipe in group]),
            avg_servings=_average([recipe.servings for recipe in group]),
            pct=_percent(len(group), len(recipes)),
        )
        for difficulty, group in _group(recipes, lambda r: r.difficulty).items()
    ]
    shares.sort(key=lambda share: share.count, reverse=True)
    return shares


def top_chefs(recipes: Sequence[Recipe], limit: int = TOP_N_CHEFS) -> list[ChefSummary]:
    """Return the most prolific chefs with their top cuisines."""
    chefs: list[ChefSummary] = []
    for chef, group in _group(recipes, lambda r: r.chef).items():
        per_cuisine = _group(group, lambda r: r.cuisine_type)
        ranked = sorted(per_cuisine, key=lambda c: len(per_cuisine[c]), reverse=True)
        total_prep = sum(recipe.prep_time for recipe in group)
        chefs.append(
            ChefSummary(
                chef=chef,
                recipes=len(group),
                avg_prep_time=round(total_prep / len(group)),
                cuisines=ranked[:TOP_N_CHEF_CUISINES],
            )
        )
    chefs.sort(key=lambda summary: summary.recipes, reverse=True)
    return chefs[:limit]


def popular_recipes(
    recipes: Sequence[Recipe], limit: int = TOP_N_RECIPES
) -> list[PopularRecipe]:
    """Return the most repeated titles after trimming and lower-casing."""
    popular = [
        PopularRecipe(
            title=title,
            count=len(group),
            avg_prep=_average([recipe.prep_time for recipe in group]),
        )
        for title, group in _group(recipes, lambda r: r.title.strip().lower()).items()
    ]
    popular.sort(key=lambda entry: entry.count, reverse=True)
    return popular[:limit]


def ingredient_usage(
    recipes: Sequence[Recipe], limit: int = TOP_N_INGREDIENTS
) -> list[IngredientUsage]:
    """Count normalized ingredient lines across all recipes."""
    counts: dict[str, int] = {}
    for recipe in recipes:
        for ingredient in recipe.ingredients:
            key = ingredient.lower().strip()
            counts[key] = counts.get(key, 0) + 1
    usage = [IngredientUsage(ingredient=key, count=count) for key, count in counts.items()]
    usage.sort(key=lambda entry: entry.count, reverse=True)
    return usage[:limit]


def seasonal_trends(recipes: Sequence[Recipe], tz: tzinfo) -> list[SeasonalTrend]:
    """Count recipes created per month and cuisine, latest month first."""

    def month_and_cuisine(recipe: Recipe) -> tuple[int, int, str]:
        created = recipe.created_date.astimezone(tz)
        return created.year, created.month, recipe.cuisine_type

    trends = [
        SeasonalTrend(year=year, month=month, cuisine=cuisine, count=len(group))
        for (year, month, cuisine), group in _group(recipes, month_and_cuisine).items()
    ]
    trends.sort(key=lambda trend: (trend.year, trend.month), reverse=True)
    return trends


def cost_reports(
    recipes: Sequence[Recipe],
    items: Sequence[InventoryItem],
    matcher: IngredientMatcher = substring_match,
    limit: int = TOP_N_COST_REPORTS,
) -> list[CostReport]:
    """Estimate recipe cost as the sum of unit costs of matching inventory items.

    Unit cost is used rather than cost times quantity, unlike inventory value.
    """
    reports = []
    for recipe in recipes:
        matched = [
            item
            for item in items
            if any(
                matcher(ingredient, item.ingredient_name)
                for ingredient in recipe.ingredients
            )
        ]
        reports.append(
            CostReport(
                recipe_id=recipe.recipe_id,
                title=recipe.title,
                estimated_cost=round(sum(item.cost for item in matched), 2),
            )
        )
    reports.sort(key=lambda report: report.estimated_cost, reverse=True)
    return reports[:limit]
