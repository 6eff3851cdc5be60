"""FastAPI application factory."""

import logging
from datetime import UTC, date, datetime, time, tzinfo
from zoneinfo import ZoneInfo

from fastapi import FastAPI, HTTPException, Request, status

from kitchen_inventory.api.admin import router as admin_router
from kitchen_inventory.api.models import (
    ImportSuggestedRequest,
    InventoryItemCreate,
    InventoryItemUpdate,
)
from kitchen_inventory.api.serializers import (
    alerts_to_dict,
    availability_report_to_dict,
    insights_to_dict,
    item_to_dict,
    recipe_to_dict,
)
from kitchen_inventory.app_logging import configure_logging
from kitchen_inventory.containers import AppContainer
from kitchen_inventory.domain.errors import (
    AnalyticsUnavailableError,
    DuplicateRecipeError,
    InventoryItemNotFoundError,
    InventoryValidationError,
    RecipeNotFoundError,
)
from kitchen_inventory.domain.inventory import (
    ALLOWED_CATEGORIES,
    ALLOWED_LOCATIONS,
    ALLOWED_UNITS,
    InventoryDraft,
)

ANALYTICS_UNAVAILABLE = "Analytics are temporarily unavailable"
IMPORT_UNAVAILABLE = "Recipe import is temporarily unavailable"
# Unprocessable Content.
UNPROCESSABLE = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    # Calendar dates from clients are midnight in the kitchen zone.
    kitchen_tz = ZoneInfo(container.settings.kitchen_timezone)

    app = FastAPI()
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/users/{user_id}/recipes/availability")
    async def recipe_availability(user_id: str, request: Request) -> dict[str, object]:
        """Return an owner's recipe readiness and global suggestions."""
        state_container: AppContainer = request.app.state.container
        try:
            report = await state_container.availability_service.get_recipe_availability(
                user_id
            )
        except AnalyticsUnavailableError as exc:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=ANALYTICS_UNAVAILABLE,
            ) from exc
        return availability_report_to_dict(report)

    @app.post(
        "/users/{user_id}/recipes/import-suggested",
        status_code=status.HTTP_201_CREATED,
    )
    async def import_suggested(
        user_id: str, body: ImportSuggestedRequest, request: Request
    ) -> dict[str, object]:
        """Copy a suggested recipe into the owner's collection."""
        state_container: AppContainer = request.app.state.container
        try:
            recipe = state_container.availability_service.import_suggested_recipe(
                user_id, body.source_recipe_id
            )
        except RecipeNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except DuplicateRecipeError as exc:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=str(exc)
            ) from exc
        except Exception as exc:
            logger.exception(
                "Failed to import suggested recipe",
                extra={"user_id": user_id, "source_recipe_id": body.source_recipe_id},
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=IMPORT_UNAVAILABLE,
            ) from exc
        return recipe_to_dict(recipe)

    @app.get("/inventory/alerts")
    async def inventory_alerts(request: Request) -> dict[str, object]:
        """Return expiring and low-stock items with value totals."""
        state_container: AppContainer = request.app.state.container
        try:
            snapshot = await state_container.inventory_service.get_alerts()
        except AnalyticsUnavailableError as exc:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=ANALYTICS_UNAVAILABLE,
            ) from exc
        return alerts_to_dict(snapshot)

    @app.get("/inventory/insights")
    async def inventory_insights(request: Request) -> dict[str, object]:
        """Return waste risk, monthly spend and the smart shopping list."""
        state_container: AppContainer = request.app.state.container
        try:
            insights = await state_container.inventory_service.get_insights()
        except AnalyticsUnavailableError as exc:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=ANALYTICS_UNAVAILABLE,
            ) from exc
        return insights_to_dict(insights)

    @app.get("/inventory/form-options")
    async def inventory_form_options() -> dict[str, list[str]]:
        """Return the allowed units, categories and storage locations."""
        return {
            "units": list(ALLOWED_UNITS),
            "categories": list(ALLOWED_CATEGORIES),
            "locations": list(ALLOWED_LOCATIONS),
        }

    @app.post("/users/{user_id}/inventory", status_code=status.HTTP_201_CREATED)
    async def create_inventory_item(
        user_id: str, body: InventoryItemCreate, request: Request
    ) -> dict[str, object]:
        """Add an ingredient to the inventory."""
        state_container: AppContainer = request.app.state.container
        draft = InventoryDraft(
            user_id=user_id,
            ingredient_name=body.ingredient_name,
            quantity=body.quantity,
            unit=body.unit,
            category=body.category,
            purchase_date=_start_of_day(body.purchase_date, kitchen_tz),
            expiration_date=_start_of_day(body.expiration_date, kitchen_tz),
            location=body.location,
            cost=body.cost,
            created_date=datetime.now(tz=UTC),
        )
        try:
            item = state_container.inventory_service.add_item(draft)
        except InventoryValidationError as exc:
            raise HTTPException(status_code=UNPROCESSABLE, detail=str(exc)) from exc
        return item_to_dict(item)

    @app.patch("/inventory/{inventory_id}")
    async def update_inventory_item(
        inventory_id: str, body: InventoryItemUpdate, request: Request
    ) -> dict[str, object]:
        """Apply a partial update to an inventory item."""
        state_container: AppContainer = request.app.state.container
        payload: dict[str, object] = body.model_dump(exclude_none=True)
        for field in ("purchase_date", "expiration_date"):
            if field in payload:
                payload[field] = _start_of_day(payload[field], kitchen_tz)
        if not payload:
            raise HTTPException(status_code=UNPROCESSABLE, detail="No fields to update")
        try:
            item = state_container.inventory_service.update_item(inventory_id, payload)
        except InventoryItemNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except InventoryValidationError as exc:
            raise HTTPException(status_code=UNPROCESSABLE, detail=str(exc)) from exc
        return item_to_dict(item)

    return app


def _start_of_day(value: date, tz: tzinfo) -> datetime:
    return datetime.combine(value, time.min, tzinfo=tz)
