"""Inventory writes, alerts and insights."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Protocol
from zoneinfo import ZoneInfo

from kitchen_inventory.domain.alerts import AlertSnapshot, build_alert_snapshot
from kitchen_inventory.domain.availability import IngredientMatcher, substring_match
from kitchen_inventory.domain.errors import (
    AnalyticsUnavailableError,
    InventoryItemNotFoundError,
    InventoryValidationError,
)
from kitchen_inventory.domain.insights import (
    InventoryInsights,
    expiration_waste,
    monthly_spending,
    smart_shopping_list,
)
from kitchen_inventory.domain.inventory import (
    INVENTORY_ID_PREFIX,
    InventoryDraft,
    InventoryItem,
    ensure_expiration_after_purchase,
)
from kitchen_inventory.services.sequences import SequenceGenerator, next_identifier
from kitchen_inventory.services.snapshot import load_snapshot

if TYPE_CHECKING:
    from kitchen_inventory.services.recipes import RecipeRepository

INVENTORY_SEQUENCE = "inventories"

logger = logging.getLogger(__name__)


class InventoryRepository(Protocol):
    """Persistence interface for inventory items."""

    def list_items(self, user_id: str | None = None) -> list[InventoryItem]:
        """Return all inventory items, optionally for one owner."""

    def get_item(self, inventory_id: str) -> InventoryItem | None:
        """Return an inventory item by id, if present."""

    def create_item(self, item: InventoryItem) -> InventoryItem:
        """Insert an inventory item and return the stored row."""

    def update_item(
        self, inventory_id: str, payload: dict[str, object]
    ) -> InventoryItem:
        """Apply a partial update and return the stored row."""


@dataclass
class InventoryService:
    """Application service for the shared inventory."""

    inventory_repository: InventoryRepository
    recipe_repository: RecipeRepository
    sequences: SequenceGenerator
    timezone_name: str = "UTC"
    expiry_days: int = 2
    insights_expiry_days: int = 3
    low_stock_threshold: float = 3
    suggested_order_add_on: float = 5
    matcher: IngredientMatcher = substring_match

    def add_item(self, draft: InventoryDraft) -> InventoryItem:
        """Validate dates and store a new item under the next inventory id."""
        self._ensure_not_future(draft.purchase_date)
        ensure_expiration_after_purchase(draft.purchase_date, draft.expiration_date)
        inventory_id = next_identifier(
            self.sequences, INVENTORY_SEQUENCE, INVENTORY_ID_PREFIX
        )
        created = self.inventory_repository.create_item(
            InventoryItem(inventory_id=inventory_id, **asdict(draft))
        )
        logger.info("Created inventory item", extra={"inventory_id": inventory_id})
        return created

    def update_item(
        self, inventory_id: str, payload: dict[str, object]
    ) -> InventoryItem:
        """Apply a partial update, keeping expiration after purchase.

        When only one of the two dates changes, the other is read from the
        stored item.
        """
        current = self.inventory_repository.get_item(inventory_id)
        if current is None:
            raise InventoryItemNotFoundError(inventory_id)
        if "purchase_date" in payload or "expiration_date" in payload:
            purchase_date = payload.get("purchase_date", current.purchase_date)
            expiration_date = payload.get("expiration_date", current.expiration_date)
            if "purchase_date" in payload:
                self._ensure_not_future(purchase_date)
            ensure_expiration_after_purchase(purchase_date, expiration_date)
        updated = self.inventory_repository.update_item(inventory_id, payload)
        logger.info("Updated inventory item", extra={"inventory_id": inventory_id})
        return updated

    def _ensure_not_future(self, purchase_date: datetime | None) -> None:
        now = datetime.now(tz=ZoneInfo(self.timezone_name))
        if purchase_date is not None and purchase_date > now:
            raise InventoryValidationError("Purchase date cannot be in the future")

    async def get_alerts(self) -> AlertSnapshot:
        """Return expiring, low-stock and value totals for all inventory."""
        items = await _list_all_items(self.inventory_repository)
        tz = ZoneInfo(self.timezone_name)
        return build_alert_snapshot(
            items,
            today=datetime.now(tz=tz).date(),
            tz=tz,
            expiry_days=self.expiry_days,
            low_stock_threshold=self.low_stock_threshold,
            suggested_order_add_on=self.suggested_order_add_on,
        )

    async def get_insights(self) -> InventoryInsights:
        """Return waste risk, monthly spend and the smart shopping list."""
        snapshot = await load_snapshot(self.recipe_repository, self.inventory_repository)
        tz = ZoneInfo(self.timezone_name)
        return InventoryInsights(
            expiration_waste=expiration_waste(
                snapshot.inventory,
                snapshot.recipes,
                today=datetime.now(tz=tz).date(),
                tz=tz,
                horizon_days=self.insights_expiry_days,
                matcher=self.matcher,
            ),
            monthly_spending_by_category=monthly_spending(snapshot.inventory, tz),
            smart_shopping_list=smart_shopping_list(
                snapshot.recipes, snapshot.inventory, self.matcher
            ),
        )


async def _list_all_items(repository: InventoryRepository) -> list[InventoryItem]:
    try:
        return await asyncio.to_thread(repository.list_items)
    except Exception as exc:
        logger.exception("Failed to load inventory")
        raise AnalyticsUnavailableError("Analytics are temporarily unavailable") from exc
