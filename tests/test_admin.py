"""Tests for admin authentication and analytics."""

from fastapi.testclient import TestClient

from kitchen_inventory.api.app import create_app
from kitchen_inventory.containers import AppContainer
from tests.conftest import (
    FailingRepository,
    InMemoryInventoryRepository,
    build_services,
    make_item,
    make_recipe,
)


def test_admin_health_requires_token(container: AppContainer) -> None:
    app = create_app(container)
    client = TestClient(app)

    response = client.get("/admin/health")

    assert response.status_code == 401


def test_admin_health_accepts_valid_token(container: AppContainer) -> None:
    app = create_app(container)
    client = TestClient(app)

    response = client.get("/admin/health", headers={"X-Admin-Token": "admin-token"})

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_analytics_rejects_wrong_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/analytics", headers={"X-Admin-Token": "nope"})

    assert response.status_code == 401


def test_admin_analytics_returns_all_facets(
    container: AppContainer, recipe_repository, inventory_repository
) -> None:
    recipe_repository.recipes.extend(
        [
            make_recipe(recipe_id="R-00001", chef="A", ingredients=("flour",)),
            make_recipe(recipe_id="R-00002", chef="B", ingredients=("saffron",)),
        ]
    )
    inventory_repository.items.append(make_item(ingredient_name="flour"))
    client = TestClient(create_app(container))

    response = client.get("/admin/analytics", headers={"X-Admin-Token": "admin-token"})

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {
        "summary",
        "cuisine_distribution",
        "difficulty_analysis",
        "top_chefs",
        "popular_recipes",
        "ingredient_usage",
        "seasonal_trends",
        "cost_reports",
        "recommendations",
    }
    assert data["summary"]["total_recipes"] == 2
    assert data["recommendations"][0]["recipe"]["recipe_id"] == "R-00001"
    assert data["recommendations"][0]["status"] == "Ready to Cook!"
    assert data["cost_reports"][0] == {
        "recipe_id": "R-00001",
        "title": "Pancakes",
        "estimated_cost": 1.5,
    }


def test_admin_analytics_unavailable(container: AppContainer) -> None:
    _, _, report_service = build_services(
        FailingRepository(), InMemoryInventoryRepository()
    )
    container.report_service = report_service
    client = TestClient(create_app(container))

    response = client.get("/admin/analytics", headers={"X-Admin-Token": "admin-token"})

    assert response.status_code == 503

