"""
HTTP tests for the store routes, backed by the in-memory adapters.
"""

import pytest

from storehub.core.domain import generate_uuid_str

BASE = "/api/v1/stores"


def _body(user_id: str, category_id: str, **overrides) -> dict:
    body = {
        "name": "Coffee",
        "description": "",
        "category_id": category_id,
        "user_id": user_id,
        "tags": ["hot", "drink"],
        "latitude": -8.8867698,
        "longitude": 13.4771186,
    }
    body.update(overrides)
    return body


@pytest.fixture
def created_store(api_client, user_id, active_category) -> dict:
    response = api_client.post(BASE, json=_body(user_id, active_category.id))
    assert response.status_code == 201
    return response.json()


# ============================================================================
# Create and Get
# ============================================================================


@pytest.mark.integration
@pytest.mark.api
class TestCreateAndGet:
    def test_create_returns_pending_store(self, created_store, user_id):
        assert created_store["status"] == "pending"
        assert created_store["user_id"] == user_id
        assert created_store["tags"] == ["hot", "drink"]
        assert created_store["location"] == {"lat": -8.8867698, "lng": 13.4771186}

    def test_get(self, api_client, created_store):
        response = api_client.get(f"{BASE}/{created_store['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == created_store["id"]

    def test_get_for_other_owner(self, api_client, created_store):
        response = api_client.get(f"{BASE}/{created_store['id']}", params={"owner_id": generate_uuid_str()})

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_get_malformed_id(self, api_client):
        response = api_client.get(f"{BASE}/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["kind"] == "bad_request"
        assert response.json()["field"] == "id"

    def test_create_inactive_category(self, api_client, user_id, pending_category):
        response = api_client.post(BASE, json=_body(user_id, pending_category.id))
        assert response.status_code == 404

    def test_create_invalid_coordinates(self, api_client, user_id, active_category):
        response = api_client.post(BASE, json=_body(user_id, active_category.id, latitude=95))

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"

    def test_create_unparseable_body(self, api_client, user_id):
        response = api_client.post(BASE, json={"user_id": user_id})
        assert response.status_code == 422

    def test_correlation_id_is_echoed(self, api_client, created_store):
        response = api_client.get(f"{BASE}/{created_store['id']}", headers={"X-Correlation-ID": "req-7"})
        assert response.headers["X-Correlation-ID"] == "req-7"


# ============================================================================
# Transitions, Update, Delete
# ============================================================================


@pytest.mark.integration
@pytest.mark.api
class TestMutations:
    def test_activate_then_activate_again(self, api_client, created_store):
        url = f"{BASE}/{created_store['id']}/activate"

        assert api_client.patch(url).status_code == 204

        response = api_client.patch(url)
        assert response.status_code == 409
        assert response.json()["code"] == "FAILED_PRECONDITION"
        assert response.json()["message"] == "Is already active"
        assert response.json()["kind"] == "active"

    def test_block_pending(self, api_client, created_store):
        response = api_client.patch(f"{BASE}/{created_store['id']}/block")

        assert response.status_code == 409
        assert response.json()["kind"] == "pending"

    def test_unknown_action(self, api_client, created_store):
        response = api_client.patch(f"{BASE}/{created_store['id']}/archive")
        assert response.status_code == 422

    def test_update(self, api_client, created_store, user_id, active_category):
        body = _body(user_id, active_category.id, name="Tea", tags=["tea"])

        response = api_client.put(f"{BASE}/{created_store['id']}", json=body)
        assert response.status_code == 204

        store = api_client.get(f"{BASE}/{created_store['id']}").json()
        assert (store["name"], store["tags"], store["status"]) == ("Tea", ["tea"], "pending")

    def test_update_unknown_category(self, api_client, created_store, user_id):
        body = _body(user_id, generate_uuid_str(), name="Tea")

        response = api_client.put(f"{BASE}/{created_store['id']}", json=body)

        assert response.status_code == 404
        assert api_client.get(f"{BASE}/{created_store['id']}").json()["name"] == "Coffee"

    def test_delete(self, api_client, created_store, memory_container):
        response = api_client.delete(f"{BASE}/{created_store['id']}")

        assert response.status_code == 204
        assert api_client.get(f"{BASE}/{created_store['id']}").status_code == 404
        assert memory_container.memory_accounts.count() == 0

    def test_delete_unknown(self, api_client):
        assert api_client.delete(f"{BASE}/{generate_uuid_str()}").status_code == 404


# ============================================================================
# Listing
# ============================================================================


@pytest.mark.integration
@pytest.mark.api
class TestListing:
    def test_list_with_total_header(self, api_client, user_id, active_category):
        for i in range(3):
            api_client.post(BASE, json=_body(user_id, active_category.id, name=f"Store {i}"))

        response = api_client.get(BASE, params={"sort": "name", "limit": 2})

        assert response.status_code == 200
        assert response.headers["X-Total"] == "3"
        assert [s["name"] for s in response.json()] == ["Store 0", "Store 1"]

    def test_list_filters(self, api_client, created_store, user_id):
        api_client.patch(f"{BASE}/{created_store['id']}/activate")

        active = api_client.get(BASE, params={"user_id": user_id, "status": "active"})
        pending = api_client.get(BASE, params={"status": "pending"})
        tagged = api_client.get(BASE, params=[("tags", "cold"), ("tags", "hot")])

        assert active.headers["X-Total"] == "1"
        assert pending.headers["X-Total"] == "0"
        assert tagged.headers["X-Total"] == "1"

    @pytest.mark.parametrize("params", [{"limit": 101}, {"limit": -1}, {"page": -1}, {"sort": "price"}])
    def test_list_rejects_bad_query(self, api_client, params):
        assert api_client.get(BASE, params=params).status_code == 400


# ============================================================================
# Health
# ============================================================================


@pytest.mark.integration
@pytest.mark.api
def test_health_counts_events(api_client, created_store):
    api_client.patch(f"{BASE}/{created_store['id']}/activate")

    body = api_client.get("/health").json()

    assert body["status"] == "ok"
    assert body["storage"] == "memory"
    assert body["events_published"] == {"store.new": 1, "store.update": 1, "store.delete": 0}
