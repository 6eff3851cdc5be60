"""Tests for container wiring."""

from kitchen_inventory.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.availability_service is not None
    assert container.inventory_service.expiry_days == settings.expiry_days
    assert container.inventory_service.insights_expiry_days == 3
    assert (
        container.report_service.availability_service
        is container.availability_service
    )
