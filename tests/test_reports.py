"""Tests for admin analytics."""

import asyncio
from datetime import UTC, datetime

import pytest

from kitchen_inventory.domain.errors import AnalyticsUnavailableError
from kitchen_inventory.domain.recipes import Recipe
from kitchen_inventory.domain.reports import (
    cost_reports,
    cuisine_distribution,
    difficulty_analysis,
    ingredient_usage,
    popular_recipes,
    recipe_summary,
    seasonal_trends,
    top_chefs,
)
from kitchen_inventory.services.recipes import RecipeAvailabilityService
from kitchen_inventory.services.reports import ReportService
from tests.conftest import (
    FailingRepository,
    FakeSequenceGenerator,
    InMemoryInventoryRepository,
    InMemoryRecipeRepository,
    build_services,
    make_item,
    make_recipe,
)


def _chef_recipes() -> list[Recipe]:
    recipes = [
        make_recipe(recipe_id="R-00001", chef="A", cuisine_type="Italian", prep_time=10),
        make_recipe(recipe_id="R-00002", chef="A", cuisine_type="French", prep_time=20),
        make_recipe(recipe_id="R-00003", chef="A", cuisine_type="Italian", prep_time=30),
        make_recipe(recipe_id="R-00004", chef="A", cuisine_type="Italian", prep_time=45),
    ]
    recipes.extend(
        make_recipe(
            recipe_id=f"R-0001{n}", chef="B", cuisine_type="Mexican", prep_time=15
        )
        for n in range(5)
    )
    return recipes


def test_top_chefs_sorted_by_recipe_count_with_count_sorted_cuisines() -> None:
    chefs = top_chefs(_chef_recipes())

    assert [chef.chef for chef in chefs] == ["B", "A"]
    assert chefs[0].recipes == 5
    assert chefs[0].cuisines == ["Mexican"]
    assert chefs[1].recipes == 4
    assert chefs[1].cuisines == ["Italian", "French"]
    assert chefs[1].avg_prep_time == 26


def test_top_chefs_limits_to_five() -> None:
    recipes = [
        make_recipe(recipe_id=f"R-{n:05d}", chef=f"Chef {n}") for n in range(8)
    ]

    assert len(top_chefs(recipes)) == 5


def test_recipe_summary_averages() -> None:
    summary = recipe_summary(_chef_recipes())

    assert summary.total_recipes == 9
    assert summary.avg_prep_time == 20
    assert summary.avg_servings == 2
    assert summary.cuisine_types == ["Mexican", "Italian", "French"]


def test_recipe_summary_empty() -> None:
    summary = recipe_summary([])

    assert summary.total_recipes == 0
    assert summary.avg_prep_time is None
    assert summary.cuisine_types == []


def test_cuisine_distribution_percentages() -> None:
    shares = cuisine_distribution(_chef_recipes())

    assert [(share.cuisine, share.count, share.pct) for share in shares] == [
        ("Mexican", 5, 56),
        ("Italian", 3, 33),
        ("French", 1, 11),
    ]
    assert shares[1].avg_prep == 28


def test_difficulty_analysis_groups_by_difficulty() -> None:
    recipes = [
        make_recipe(recipe_id="R-00001", difficulty="Hard", prep_time=90, servings=6),
        make_recipe(recipe_id="R-00002", difficulty="Easy", prep_time=10, servings=1),
        make_recipe(recipe_id="R-00003", difficulty="Easy", prep_time=15, servings=2),
    ]

    shares = difficulty_analysis(recipes)

    assert [(share.difficulty, share.count) for share in shares] == [
        ("Easy", 2),
        ("Hard", 1),
    ]
    assert shares[0].avg_prep == 12
    assert shares[0].avg_servings == 2
    assert shares[0].pct == 67


def test_popular_recipes_normalize_titles() -> None:
    recipes = [
        make_recipe(recipe_id="R-00001", title="  Pasta ", prep_time=10),
        make_recipe(recipe_id="R-00002", title="PASTA", prep_time=20),
        make_recipe(recipe_id="R-00003", title="Soup", prep_time=5),
    ]

    popular = popular_recipes(recipes)

    assert popular[0].title == "pasta"
    assert popular[0].count == 2
    assert popular[0].avg_prep == 15
    assert popular[1].title == "soup"


def test_ingredient_usage_counts_whole_lines() -> None:
    recipes = [
        make_recipe(recipe_id="R-00001", ingredients=("2 Eggs ", "salt")),
        make_recipe(recipe_id="R-00002", ingredients=("2 eggs", "3 eggs")),
    ]

    usage = ingredient_usage(recipes)

    assert [(entry.ingredient, entry.count) for entry in usage] == [
        ("2 eggs", 2),
        ("salt", 1),
        ("3 eggs", 1),
    ]


def test_seasonal_trends_latest_month_first() -> None:
    recipes = [
        make_recipe(
            recipe_id="R-00001",
            cuisine_type="Asian",
            created_date=datetime(2023, 12, 5, tzinfo=UTC),
        ),
        make_recipe(
            recipe_id="R-00002",
            cuisine_type="Indian",
            created_date=datetime(2024, 2, 1, tzinfo=UTC),
        ),
        make_recipe(
            recipe_id="R-00003",
            cuisine_type="Indian",
            created_date=datetime(2024, 2, 20, tzinfo=UTC),
        ),
    ]

    trends = seasonal_trends(recipes, UTC)

    assert [(t.year, t.month, t.cuisine, t.count) for t in trends] == [
        (2024, 2, "Indian", 2),
        (2023, 12, "Asian", 1),
    ]


def test_cost_reports_sum_unit_costs() -> None:
    recipes = [
        make_recipe(recipe_id="R-00001", title="Cake", ingredients=("flour", "2 eggs")),
        make_recipe(recipe_id="R-00002", title="Bread", ingredients=("flour",)),
    ]
    items = [
        make_item(inventory_id="I-00001", ingredient_name="Flour", cost=1.5, quantity=10),
        make_item(inventory_id="I-00002", ingredient_name="egg", cost=0.25, quantity=12),
    ]

    reports = cost_reports(recipes, items)

    assert [(r.recipe_id, r.estimated_cost) for r in reports] == [
        ("R-00001", 1.75),
        ("R-00002", 1.5),
    ]


def test_get_admin_analytics_includes_recommendations() -> None:
    ready = make_recipe(
        recipe_id="R-00001", user_id="U-00002", ingredients=("flour",)
    )
    not_ready = make_recipe(recipe_id="R-00002", ingredients=("saffron",))
    recipes = InMemoryRecipeRepository([ready, not_ready])
    inventory = InMemoryInventoryRepository([make_item(ingredient_name="flour")])
    _, _, service = build_services(recipes, inventory)

    analytics = asyncio.run(service.get_admin_analytics())

    assert analytics.summary.total_recipes == 2
    assert [r.recipe.recipe_id for r in analytics.recommendations] == ["R-00001"]
    assert analytics.cost_reports[0].recipe_id == "R-00001"


def test_get_admin_analytics_fails_as_a_whole() -> None:
    failing = FailingRepository()
    availability_service = RecipeAvailabilityService(
        recipe_repository=failing,
        inventory_repository=InMemoryInventoryRepository(),
        sequences=FakeSequenceGenerator(),
    )
    service = ReportService(
        recipe_repository=failing,
        inventory_repository=InMemoryInventoryRepository(),
        availability_service=availability_service,
    )

    with pytest.raises(AnalyticsUnavailableError):
        asyncio.run(service.get_admin_analytics())
