from __future__ import annotations

import pytest

from src.presentation.http.routes import (
    ResourceRoute,
    RouteKind,
    RouteTable,
    build_route_table,
)
from tests.conftest import DEVICE_ID


@pytest.fixture()
def table() -> RouteTable:
    return build_route_table()


def test_collection_paths(table: RouteTable) -> None:
    tasks = table.match("/api/tasks")
    assert tasks is not None
    assert tasks.kind is RouteKind.COLLECTION
    assert tasks.allowed_methods == ("GET", "POST")
    assert tasks.item_id is None

    devices = table.match("/api/devices")
    assert devices is not None
    assert devices.allowed_methods == ("GET",)


def test_item_path_extracts_id(table: RouteTable) -> None:
    match = table.match(f"/api/tasks/{DEVICE_ID}")

    assert match is not None
    assert match.resource == "tasks"
    assert match.kind is RouteKind.ITEM
    assert match.item_id == DEVICE_ID
    assert match.allowed_methods == ("GET", "PUT", "DELETE")


@pytest.mark.parametrize(
    "path",
    [
        "/",
        "/api",
        "/api/unknown",
        "/api/tasks/",
        "/api/tasks/short",
        "/api/tasks/UPPERCASE1",
        "/api/tasks/" + "a" * 25,
        f"/api/tasks/{DEVICE_ID}/extra",
        "/other/tasks",
    ],
)
def test_unmatched_paths(table: RouteTable, path: str) -> None:
    assert table.match(path) is None


def test_custom_prefix() -> None:
    table = build_route_table("/v2/")

    assert table.match("/v2/devices") is not None
    assert table.match("/api/devices") is None


def test_duplicate_resources_rejected() -> None:
    route = ResourceRoute(name="tasks", collection_methods=("GET",), item_methods=())

    with pytest.raises(ValueError):
        RouteTable(resources=(route, route))
