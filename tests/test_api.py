"""HTTP level tests for the products and users endpoints."""

import pytest

from catalog_api.app.core.config import Settings
from catalog_api.app.main import create_app
from fastapi.testclient import TestClient

RESOURCES = ["products", "users"]


@pytest.mark.parametrize("resource", RESOURCES)
def test_list_is_empty_initially(client, resource):
    resp = client.get(f"/{resource}")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.parametrize("resource", RESOURCES)
def test_post_echoes_body_with_201(client, resource):
    body = {"name": "x", "nested": {"values": [1, 2.5, None, True]}, "empty": {}}
    resp = client.post(f"/{resource}", json=body)
    assert resp.status_code == 201
    assert resp.json() == body


def test_product_widget_scenario(client):
    resp = client.post("/products", json={"name": "Widget"})
    assert resp.json() == {"name": "Widget"}
    assert client.get("/products").json() == [{"name": "Widget"}]


def test_users_order_preserved(client):
    client.post("/users", json={"id": 1})
    client.post("/users", json={"id": 2})
    assert client.get("/users").json() == [{"id": 1}, {"id": 2}]


def test_many_posts_listed_in_order(client):
    bodies = [{"n": i} for i in range(20)] + [{"n": 3}]
    for b in bodies:
        assert client.post("/products", json=b).status_code == 201
    assert client.get("/products").json() == bodies


def test_list_twice_returns_same_result(client):
    client.post("/products", json={"sku": "A-1"})
    first = client.get("/products").json()
    second = client.get("/products").json()
    assert first == second == [{"sku": "A-1"}]


def test_resources_are_isolated(client):
    client.post("/products", json={"name": "Widget"})
    client.post("/users", json={"id": 7})
    assert client.get("/products").json() == [{"name": "Widget"}]
    assert client.get("/users").json() == [{"id": 7}]


def test_apps_do_not_share_stores(client):
    client.post("/users", json={"id": 1})
    with TestClient(create_app(Settings())) as other:
        assert other.get("/users").json() == []
    assert client.get("/users").json() == [{"id": 1}]


def test_stores_are_attached_to_app_state(app, client):
    client.post("/products", json={"name": "Widget"})
    assert app.state.product_service.list_all() == [{"name": "Widget"}]
    assert len(app.state.user_service) == 0


@pytest.mark.parametrize("resource", RESOURCES)
def test_non_object_body_is_rejected_by_framework(client, resource):
    resp = client.post(f"/{resource}", json=[1, 2, 3])
    assert resp.status_code == 422
    resp = client.post(
        f"/{resource}", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 422
    assert client.get(f"/{resource}").json() == []


def test_unknown_route_and_method(client):
    assert client.get("/orders").status_code == 404
    assert client.delete("/products").status_code == 405


def test_api_prefix_moves_routes():
    app = create_app(Settings(api_prefix="/api/v1"))
    with TestClient(app) as c:
        assert c.post("/api/v1/products", json={"name": "Widget"}).status_code == 201
        assert c.get("/api/v1/products").json() == [{"name": "Widget"}]
        assert c.get("/products").status_code == 404
