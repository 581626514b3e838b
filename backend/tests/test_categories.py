from citydir.application import categories as category_store
from citydir.application import businesses as business_store
from citydir.extensions import db
from citydir.models import Type


def create(client, headers, **data):
    response = client.post("/api/categories", json=data, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_create_then_get_round_trip(client, auth_headers):
    created = create(client, auth_headers, name="Café Central!", description="Coffee")

    assert created["slug"] == "cafe-central"
    assert created["display_order"] == 0

    response = client.get(f"/api/categories/{created['id']}")
    assert response.status_code == 200
    body = response.get_json()
    assert body["name"] == "Café Central!"
    assert body["description"] == "Coffee"

    by_slug = client.get("/api/categories/slug/cafe-central").get_json()
    assert by_slug["id"] == created["id"]


def test_public_reads_hide_timestamps(client, auth_headers):
    created = create(client, auth_headers, name="Food")

    public = client.get(f"/api/categories/{created['id']}").get_json()
    admin = client.get(f"/api/categories/{created['id']}", headers=auth_headers).get_json()

    assert "created_at" not in public
    assert admin["created_at"] is not None


def test_writes_require_a_session(client):
    response = client.post("/api/categories", json={"name": "Food"})
    assert response.status_code == 401
    assert response.get_json()["error"] == "Unauthorized"


def test_name_is_required(client, auth_headers):
    response = client.post("/api/categories", json={"name": "  "}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["error"] == "ValidationError"


def test_duplicate_slug_is_a_conflict(client, auth_headers):
    create(client, auth_headers, name="Food")
    response = client.post("/api/categories", json={"name": "FOOD"}, headers=auth_headers)

    assert response.status_code == 409
    assert response.get_json()["message"] == "Slug already exists"


def test_unknown_id_is_not_found(client):
    response = client.get("/api/categories/does-not-exist")
    assert response.status_code == 404
    assert response.get_json()["error"] == "NotFound"


def test_sparse_update_and_slug_regeneration(client, auth_headers):
    created = create(client, auth_headers, name="Food", description="Eat")

    response = client.put(
        f"/api/categories/{created['id']}",
        json={"name": "Street Food", "slug": ""},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["slug"] == "street-food"
    assert body["description"] == "Eat"


def test_empty_update_is_a_no_op(client, auth_headers):
    created = create(client, auth_headers, name="Food")

    response = client.put(f"/api/categories/{created['id']}", json={}, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()["updated_at"] == created["updated_at"]


def test_stale_write_is_rejected(client, auth_headers):
    created = create(client, auth_headers, name="Food")

    response = client.put(
        f"/api/categories/{created['id']}",
        json={"name": "Drinks"},
        headers={**auth_headers, "If-Unmodified-Since": "Wed, 21 Oct 2015 07:28:00 GMT"},
    )
    assert response.status_code == 409
    assert response.get_json()["error"] == "StaleWrite"
    assert category_store.get_category(created["id"])["name"] == "Food"


def test_reorder_assigns_dense_positions(client, auth_headers):
    a = create(client, auth_headers, name="A")
    b = create(client, auth_headers, name="B")
    c = create(client, auth_headers, name="C")

    response = client.post(
        "/api/categories/reorder",
        json={"orderedIds": [c["id"], a["id"], b["id"]]},
        headers=auth_headers,
    )
    assert response.status_code == 200

    listed = client.get("/api/categories").get_json()
    assert [item["id"] for item in listed] == [c["id"], a["id"], b["id"]]
    assert [item["display_order"] for item in listed] == [0, 1, 2]


def test_partial_reorder_appends_remaining_rows(client, auth_headers):
    a = create(client, auth_headers, name="A")
    b = create(client, auth_headers, name="B")
    c = create(client, auth_headers, name="C")

    client.put("/api/categories/reorder", json=[c["id"]], headers=auth_headers)

    listed = client.get("/api/categories").get_json()
    assert [item["id"] for item in listed] == [c["id"], a["id"], b["id"]]
    assert [item["display_order"] for item in listed] == [0, 1, 2]


def test_reorder_rejects_unknown_and_duplicate_ids(client, auth_headers):
    a = create(client, auth_headers, name="A")

    unknown = client.post(
        "/api/categories/reorder", json={"orderedIds": [a["id"], "ghost"]}, headers=auth_headers
    )
    duplicate = client.post(
        "/api/categories/reorder", json={"orderedIds": [a["id"], a["id"]]}, headers=auth_headers
    )

    assert unknown.status_code == 400
    assert duplicate.status_code == 400


def test_delete_is_blocked_while_in_use(client, auth_headers):
    category = create(client, auth_headers, name="Food")
    business = business_store.create_business({"name": "Ćevabdžinica", "category_ids": [category["id"]]})

    usage = client.get(f"/api/categories/{category['id']}/usage").get_json()
    assert usage["usage_count"] == 1

    response = client.delete(f"/api/categories/{category['id']}", headers=auth_headers)
    assert response.status_code == 409
    assert response.get_json()["error"] == "InUse"

    business_store.delete_business(business["id"])
    assert category_store.get_category_usage_count(category["id"]) == 0

    response = client.delete(f"/api/categories/{category['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get(f"/api/categories/{category['id']}").status_code == 404


def test_delete_detaches_child_types(client, auth_headers):
    category = create(client, auth_headers, name="Food")
    type_ = client.post(
        "/api/types", json={"name": "Pizza", "category_id": category["id"]}, headers=auth_headers
    ).get_json()
    assert type_["category_name"] == "Food"

    client.delete(f"/api/categories/{category['id']}", headers=auth_headers)

    assert db.session.get(Type, type_["id"]).category_id is None


def test_search_filter(client, auth_headers):
    create(client, auth_headers, name="Restaurants")
    create(client, auth_headers, name="Museums")

    listed = client.get("/api/categories?search=rest").get_json()
    assert [item["slug"] for item in listed] == ["restaurants"]
