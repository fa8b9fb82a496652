from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.main.app import create_app
from src.main.container import get_container
from tests.conftest import DEVICE_ID, MISSING_ID, FakeMongoDatabase

JSON = {"Accept": "application/json"}


@pytest.fixture()
def store() -> FakeMongoDatabase:
    store = FakeMongoDatabase()
    store.seed(
        "devices",
        {"_id": DEVICE_ID, "name": "Pump 3", "year": 2019, "type": "centrifugal"},
    )
    return store


@pytest.fixture()
def client(store: FakeMongoDatabase):
    app = create_app()
    container = get_container()
    container.mongo_database.override(providers.Object(store))

    with TestClient(app) as test_client:
        yield test_client

    container.mongo_database.reset_override()


def test_lifespan_prepares_and_closes_store(store: FakeMongoDatabase) -> None:
    app = create_app()
    get_container().mongo_database.override(providers.Object(store))

    with TestClient(app):
        assert store.indexes_created is True

    assert store.closed is True


def test_list_devices(client: TestClient) -> None:
    response = client.get("/api/devices", headers=JSON)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == [
        {"_id": DEVICE_ID, "name": "Pump 3", "year": 2019, "type": "centrifugal"}
    ]


def test_view_device(client: TestClient) -> None:
    assert client.get(f"/api/devices/{DEVICE_ID}", headers=JSON).json()["name"] == (
        "Pump 3"
    )
    missing = client.get(f"/api/devices/{MISSING_ID}", headers=JSON)
    assert missing.status_code == 404
    assert missing.content == b""


def test_create_and_fetch_task(client: TestClient, task_payload) -> None:
    created = client.post("/api/tasks", json=task_payload, headers=JSON)

    assert created.status_code == 201
    body = created.json()
    assert body["recordTime"] == "2023-01-01T00:00:00Z"

    fetched = client.get(f"/api/tasks/{body['_id']}", headers=JSON)
    assert fetched.json() == body
    assert client.get("/api/tasks", headers=JSON).json() == [body]


def test_create_task_missing_fields(client: TestClient) -> None:
    response = client.post("/api/tasks", json={"criticality": "high"}, headers=JSON)

    assert response.status_code == 400
    assert response.json() == {
        "error": [
            "Missing target",
            "Missing recordTime",
            "Missing description",
            "Missing state",
        ]
    }


def test_create_task_invalid_bodies(client: TestClient) -> None:
    malformed = client.post(
        "/api/tasks",
        content=b"{oops",
        headers={**JSON, "Content-Type": "application/json"},
    )
    wrong_type = client.post(
        "/api/tasks",
        content=b"state=open",
        headers={**JSON, "Content-Type": "application/x-www-form-urlencoded"},
    )

    assert malformed.status_code == 400
    assert malformed.json() == {"error": "Invalid JSON body"}
    assert wrong_type.status_code == 400
    assert wrong_type.json() == {
        "error": "Invalid Content-Type. Expected application/json"
    }


def test_update_and_delete_task(client: TestClient, task_payload) -> None:
    task_id = client.post("/api/tasks", json=task_payload, headers=JSON).json()["_id"]

    updated = client.put(
        f"/api/tasks/{task_id}", json={**task_payload, "state": "done"}, headers=JSON
    )
    assert updated.status_code == 200
    assert updated.json()["state"] == "done"

    deleted = client.delete(f"/api/tasks/{task_id}", headers=JSON)
    assert deleted.status_code == 200
    assert deleted.json()["_id"] == task_id

    assert client.get(f"/api/tasks/{task_id}", headers=JSON).status_code == 404
    assert client.delete(f"/api/tasks/{task_id}", headers=JSON).status_code == 404


def test_preflight(client: TestClient) -> None:
    response = client.options(f"/api/tasks/{DEVICE_ID}")

    assert response.status_code == 204
    assert response.headers["access-control-allow-methods"] == "GET,PUT,DELETE"
    assert response.headers["access-control-max-age"] == "86400"


def test_method_not_allowed(client: TestClient) -> None:
    response = client.delete("/api/devices", headers=JSON)

    assert response.status_code == 405
    assert response.headers["allow"] == "GET"


def test_not_acceptable(client: TestClient) -> None:
    response = client.get("/api/tasks", headers={"Accept": "text/html"})

    assert response.status_code == 406


@pytest.mark.parametrize("path", ["/", "/docs", "/api", "/api/tasks/not_an_id"])
def test_unknown_paths(client: TestClient, path: str) -> None:
    assert client.get(path, headers=JSON).status_code == 404


def test_falsy_required_field_is_missing(client: TestClient, task_payload) -> None:
    response = client.post(
        "/api/tasks", json={**task_payload, "criticality": 0}, headers=JSON
    )

    assert response.status_code == 400
    assert response.json() == {"error": ["Missing criticality"]}
