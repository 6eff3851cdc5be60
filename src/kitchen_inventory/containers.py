"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from kitchen_inventory.adapters.supabase_inventory_repository import (
    SupabaseInventoryRepository,
)
from kitchen_inventory.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from kitchen_inventory.adapters.supabase_sequence_generator import (
    SupabaseSequenceGenerator,
)
from kitchen_inventory.config import Settings
from kitchen_inventory.services.inventory import InventoryService
from kitchen_inventory.services.recipes import RecipeAvailabilityService
from kitchen_inventory.services.reports import ReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    availability_service: RecipeAvailabilityService
    inventory_service: InventoryService
    report_service: ReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    inventory_repository = SupabaseInventoryRepository(supabase_client)
    sequences = SupabaseSequenceGenerator(supabase_client)
    availability_service = RecipeAvailabilityService(
        recipe_repository=recipe_repository,
        inventory_repository=inventory_repository,
        sequences=sequences,
    )
    inventory_service = InventoryService(
        inventory_repository=inventory_repository,
        recipe_repository=recipe_repository,
        sequences=sequences,
        timezone_name=resolved_settings.kitchen_timezone,
        expiry_days=resolved_settings.expiry_days,
        insights_expiry_days=resolved_settings.insights_expiry_days,
        low_stock_threshold=resolved_settings.low_stock_threshold,
        suggested_order_add_on=resolved_settings.suggested_order_add_on,
    )
    report_service = ReportService(
        recipe_repository=recipe_repository,
        inventory_repository=inventory_repository,
        availability_service=availability_service,
        timezone_name=resolved_settings.kitchen_timezone,
    )

    return AppContainer(
        settings=resolved_settings,
        availability_service=availability_service,
        inventory_service=inventory_service,
        report_service=report_service,
    )
