"""Supabase repository for inventory items."""

from dataclasses import asdict, dataclass

from supabase import Client

from kitchen_inventory.adapters.supabase_rows import parse_datetime, serialize_value
from kitchen_inventory.domain.inventory import InventoryItem
from kitchen_inventory.services.inventory import InventoryRepository


@dataclass
class SupabaseInventoryRepository(InventoryRepository):
    """Supabase implementation for inventory queries."""

    client: Client

    def list_items(self, user_id: str | None = None) -> list[InventoryItem]:
        """Return inventory items, most recently created first."""
        query = self.client.table("inventories").select("*")
        if user_id is not None:
            query = query.eq("user_id", user_id)
        response = query.order("created_date", desc=True).execute()
        return [_parse_item(row) for row in response.data or []]

    def get_item(self, inventory_id: str) -> InventoryItem | None:
        """Return an inventory item by id, if present."""
        response = (
            self.client.table("inventories")
            .select("*")
            .eq("inventory_id", inventory_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create_item(self, item: InventoryItem) -> InventoryItem:
        """Insert an inventory item and return the stored row."""
        payload = {key: serialize_value(value) for key, value in asdict(item).items()}
        response = self.client.table("inventories").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create inventory item")
        return _parse_item(response.data[0])

    def update_item(
        self, inventory_id: str, payload: dict[str, object]
    ) -> InventoryItem:
        """Apply a partial update and return the stored row."""
        response = (
            self.client.table("inventories")
            .update({key: serialize_value(value) for key, value in payload.items()})
            .eq("inventory_id", inventory_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update inventory item")
        return _parse_item(response.data[0])


def _parse_item(row: dict[str, object]) -> InventoryItem:
    return InventoryItem(
        inventory_id=str(row["inventory_id"]),
        user_id=str(row["user_id"]),
        ingredient_name=str(row.get("ingredient_name", "")),
        quantity=float(row.get("quantity", 0.0)),
        unit=str(row.get("unit", "")),
        category=str(row.get("category", "")),
        purchase_date=parse_datetime(row.get("purchase_date")),
        expiration_date=parse_datetime(row.get("expiration_date")),
        location=str(row.get("location", "")),
        cost=float(row.get("cost", 0.0)),
        created_date=parse_datetime(row.get("created_date")),
    )
