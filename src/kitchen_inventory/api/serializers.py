"""Response shaping for domain read-models."""

from dataclasses import asdict
from datetime import datetime

from kitchen_inventory.domain.alerts import AlertSnapshot
from kitchen_inventory.domain.availability import AvailabilityResult
from kitchen_inventory.domain.insights import InventoryInsights
from kitchen_inventory.domain.inventory import InventoryItem
from kitchen_inventory.domain.recipes import Recipe
from kitchen_inventory.domain.reports import AdminAnalytics
from kitchen_inventory.services.recipes import RecipeAvailabilityReport


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def recipe_to_dict(recipe: Recipe) -> dict[str, object]:
    return {
        "recipe_id": recipe.recipe_id,
        "user_id": recipe.user_id,
        "title": recipe.title,
        "chef": recipe.chef,
        "ingredients": list(recipe.ingredients),
        "instructions": list(recipe.instructions),
        "meal_type": recipe.meal_type,
        "cuisine_type": recipe.cuisine_type,
        "prep_time": recipe.prep_time,
        "difficulty": recipe.difficulty,
        "servings": recipe.servings,
        "created_date": recipe.created_date.isoformat(),
    }


def item_to_dict(item: InventoryItem) -> dict[str, object]:
    return {
        "inventory_id": item.inventory_id,
        "user_id": item.user_id,
        "ingredient_name": item.ingredient_name,
        "quantity": item.quantity,
        "unit": item.unit,
        "category": item.category,
        "purchase_date": _isoformat(item.purchase_date),
        "expiration_date": _isoformat(item.expiration_date),
        "location": item.location,
        "cost": item.cost,
        "created_date": _isoformat(item.created_date),
    }


def availability_to_dict(result: AvailabilityResult) -> dict[str, object]:
    return {
        "recipe": recipe_to_dict(result.recipe),
        "available_ingredients": list(result.available),
        "missing_ingredients": list(result.missing),
        "availability_percent": result.percent,
        "status": result.status,
    }


def availability_report_to_dict(
    report: RecipeAvailabilityReport,
) -> dict[str, object]:
    return {
        "recipe_availability": [
            availability_to_dict(result) for result in report.recipe_availability
        ],
        "suggested_recipes": [
            availability_to_dict(result) for result in report.suggested_recipes
        ],
    }


def alerts_to_dict(snapshot: AlertSnapshot) -> dict[str, object]:
    """Flatten the alert snapshot; nested items keep their stored fields."""
    return {
        "expiring_soon": [
            {
                **item_to_dict(entry.item),
                "days_left": entry.days_left,
                "value_at_risk": entry.value_at_risk,
            }
            for entry in snapshot.expiring_soon
        ],
        "low_stock": [
            {**item_to_dict(entry.item), "suggested_order": entry.suggested_order}
            for entry in snapshot.low_stock
        ],
        "total_items": snapshot.total_items,
        "total_value": snapshot.total_value,
        "category_overview": {
            category: asdict(totals)
            for category, totals in snapshot.category_overview.items()
        },
        "expiry_days": snapshot.expiry_days,
        "low_stock_threshold": snapshot.low_stock_threshold,
    }


def insights_to_dict(insights: InventoryInsights) -> dict[str, object]:
    return {
        "expiration_waste": [
            {
                **item_to_dict(entry.item),
                "days_left": entry.days_left,
                "value_at_risk": entry.value_at_risk,
                "recipes_using": [asdict(ref) for ref in entry.recipes_using],
            }
            for entry in insights.expiration_waste
        ],
        "monthly_spending_by_category": [
            asdict(row) for row in insights.monthly_spending_by_category
        ],
        "smart_shopping_list": [
            asdict(entry) for entry in insights.smart_shopping_list
        ],
    }


def analytics_to_dict(analytics: AdminAnalytics) -> dict[str, object]:
    return {
        "summary": asdict(analytics.summary),
        "cuisine_distribution": [asdict(row) for row in analytics.cuisine_distribution],
        "difficulty_analysis": [asdict(row) for row in analytics.difficulty_analysis],
        "top_chefs": [asdict(row) for row in analytics.top_chefs],
        "popular_recipes": [asdict(row) for row in analytics.popular_recipes],
        "ingredient_usage": [asdict(row) for row in analytics.ingredient_usage],
        "seasonal_trends": [asdict(row) for row in analytics.seasonal_trends],
        "cost_reports": [asdict(row) for row in analytics.cost_reports],
        "recommendations": [
            availability_to_dict(result) for result in analytics.recommendations
        ],
    }
