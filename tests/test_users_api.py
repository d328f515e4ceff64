import pytest
from fastapi.testclient import TestClient

from shop_services.core.store import RecordStore
from shop_services.main import create_user_app
from shop_services.schemas.user import SEED_USERS


@pytest.fixture
def user_store():
    return RecordStore(SEED_USERS)


@pytest.fixture
def client(test_settings, user_store):
    with TestClient(create_user_app(test_settings, store=user_store)) as client:
        yield client


def test_list_users(client):
    response = client.get("/users")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert [u["id"] for u in response.json()] == [1, 2]


def test_create_user_ignores_client_id(client, user_store):
    response = client.post("/users", json={"id": 42, "name": "Alice", "email": "alice@example.com"})
    assert response.status_code == 201
    assert response.json() == {"id": 3, "name": "Alice", "email": "alice@example.com"}
    assert user_store.get(42) is None
    assert user_store.next_id == 4


def test_get_user(client):
    response = client.get("/users/1")
    assert response.status_code == 200
    assert response.json() == SEED_USERS[0].model_dump()


def test_get_missing_user(client, user_store):
    response = client.get("/users/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"
    assert len(user_store) == 2


def test_get_user_bad_id(client):
    response = client.get("/users/abc")
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid user ID"


def test_create_user_malformed_json(client, user_store):
    response = client.post("/users", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert user_store.next_id == 3


def test_create_user_wrong_type(client, user_store):
    response = client.post("/users", json={"name": 5})
    assert response.status_code == 400
    assert len(user_store) == 2


def test_method_not_allowed(client):
    assert client.put("/users", json={}).status_code == 405
    assert client.delete("/users").status_code == 405


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.text == "OK"


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "7", "name": "x", "email": "y"},
        {"id": True, "name": "x", "email": "y"},
        {"name": "x", "email": 1},
    ],
)
def test_create_user_rejects_coercible_types(client, user_store, payload):
    response = client.post("/users", json=payload)
    assert response.status_code == 400
    assert user_store.next_id == 3


@pytest.mark.parametrize("path", ["/users/", "/users/9223372036854775808", "/users/" + "9" * 40])
def test_get_user_unparseable_id(client, path):
    response = client.get(path)
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid user ID"


def test_get_user_largest_id_is_not_found(client):
    assert client.get("/users/9223372036854775807").status_code == 404
