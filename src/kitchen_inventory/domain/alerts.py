"""Inventory alert projections: expiring stock, low stock, and totals."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta, tzinfo

from kitchen_inventory.domain.inventory import InventoryItem


@dataclass(frozen=True)
class ExpiringItem:
    """An inventory item inside the expiry horizon."""

    item: InventoryItem
    days_left: int
    value_at_risk: float


@dataclass(frozen=True)
class LowStockItem:
    """An inventory item below the stock threshold."""

    item: InventoryItem
    suggested_order: float


@dataclass(frozen=True)
class CategoryTotals:
    """Item count and stock value for one category."""

    count: int
    value: float


@dataclass(frozen=True)
class AlertSnapshot:
    """Point-in-time inventory alert report."""

    expiring_soon: list[ExpiringItem]
    low_stock: list[LowStockItem]
    total_items: int
    total_value: float
    category_overview: dict[str, CategoryTotals]
    expiry_days: int
    low_stock_threshold: float


def find_expiring(
    items: Sequence[InventoryItem], today: date, horizon_days: int, tz: tzinfo
) -> list[ExpiringItem]:
    """Return items expiring on or before the last day of the horizon.

    Items already past their expiration date are included with a negative
    ``days_left``.
    """
    last_day = today + timedelta(days=horizon_days)
    expiring = []
    for item in items:
        if item.expiration_date is None:
            continue
        expiration_day = item.expiration_date.astimezone(tz).date()
        if expiration_day > last_day:
            continue
        expiring.append(
            ExpiringItem(
                item=item,
                days_left=(expiration_day - today).days,
                value_at_risk=item.value,
            )
        )
    expiring.sort(key=lambda entry: entry.item.expiration_date)
    return expiring


def find_low_stock(
    items: Sequence[InventoryItem], threshold: float, add_on: float
) -> list[LowStockItem]:
    """Return items below the threshold with a reorder suggestion."""
    low = [
        LowStockItem(item=item, suggested_order=item.quantity + add_on)
        for item in items
        if item.quantity < threshold
    ]
    low.sort(key=lambda entry: entry.item.quantity)
    return low


def category_overview(items: Sequence[InventoryItem]) -> dict[str, CategoryTotals]:
    """Group item counts and stock value by category."""
    counts: dict[str, int] = {}
    values: dict[str, float] = {}
    for item in items:
        counts[item.category] = counts.get(item.category, 0) + 1
        values[item.category] = values.get(item.category, 0.0) + item.cost * item.quantity
    return {
        category: CategoryTotals(count=count, value=round(values[category], 2))
        for category, count in counts.items()
    }


def build_alert_snapshot(  # noqa: PLR0913
    items: Sequence[InventoryItem],
    *,
    today: date,
    tz: tzinfo,
    expiry_days: int,
    low_stock_threshold: float,
    suggested_order_add_on: float,
) -> AlertSnapshot:
    """Build the full alert report from one inventory snapshot."""
    return AlertSnapshot(
        expiring_soon=find_expiring(items, today, expiry_days, tz),
        low_stock=find_low_stock(items, low_stock_threshold, suggested_order_add_on),
        total_items=len(items),
        total_value=round(sum(item.cost * item.quantity for item in items), 2),
        category_overview=category_overview(items),
        expiry_days=expiry_days,
        low_stock_threshold=low_stock_threshold,
    )
