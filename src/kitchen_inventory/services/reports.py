"""Admin reporting over all recipes."""

from dataclasses import dataclass
from zoneinfo import ZoneInfo

from kitchen_inventory.domain.reports import (
    AdminAnalytics,
    cost_reports,
    cuisine_distribution,
    difficulty_analysis,
    ingredient_usage,
    popular_recipes,
    recipe_summary,
    seasonal_trends,
    top_chefs,
)
from kitchen_inventory.services.inventory import InventoryRepository
from kitchen_inventory.services.recipes import (
    RecipeAvailabilityService,
    RecipeRepository,
)
from kitchen_inventory.services.snapshot import load_snapshot


@dataclass
class ReportService:
    """Builds the admin analytics dashboard."""

    recipe_repository: RecipeRepository
    inventory_repository: InventoryRepository
    availability_service: RecipeAvailabilityService
    timezone_name: str = "UTC"

    async def get_admin_analytics(self) -> AdminAnalytics:
        """Return every analytics facet computed from one snapshot."""
        snapshot = await load_snapshot(self.recipe_repository, self.inventory_repository)
        recipes = snapshot.recipes
        matcher = self.availability_service.matcher
        return AdminAnalytics(
            summary=recipe_summary(recipes),
            cuisine_distribution=cuisine_distribution(recipes),
            difficulty_analysis=difficulty_analysis(recipes),
            top_chefs=top_chefs(recipes),
            popular_recipes=popular_recipes(recipes),
            ingredient_usage=ingredient_usage(recipes),
            seasonal_trends=seasonal_trends(recipes, ZoneInfo(self.timezone_name)),
            cost_reports=cost_reports(recipes, snapshot.inventory, matcher),
            recommendations=self.availability_service.suggest(snapshot),
        )
