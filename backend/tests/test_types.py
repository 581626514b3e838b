from citydir.application import attractions as attraction_store
from citydir.application import types as type_store


def test_types_filter_by_category(client, auth_headers):
    food = client.post("/api/categories", json={"name": "Food"}, headers=auth_headers).get_json()
    client.post("/api/types", json={"name": "Pizza", "category_id": food["id"]}, headers=auth_headers)
    client.post("/api/types", json={"name": "Opera"}, headers=auth_headers)

    listed = client.get(f"/api/types?category_id={food['id']}").get_json()
    assert [item["name"] for item in listed] == ["Pizza"]
    assert listed[0]["category_name"] == "Food"


def test_unknown_category_is_rejected(client, auth_headers):
    response = client.post(
        "/api/types", json={"name": "Pizza", "category_id": "ghost"}, headers=auth_headers
    )
    assert response.status_code == 400


def test_usage_counts_every_kind_of_item(client, auth_headers):
    type_ = type_store.create_type({"name": "Museum"})
    attraction = attraction_store.create_attraction({"name": "Vijećnica", "type_ids": [type_["id"]]})

    assert client.get(f"/api/types/{type_['id']}/usage").get_json()["usage_count"] == 1

    response = client.delete(f"/api/types/{type_['id']}", headers=auth_headers)
    assert response.status_code == 409

    attraction_store.update_attraction(attraction["id"], {"type_ids": []})
    assert type_store.get_type_usage_count(type_["id"]) == 0
    assert client.delete(f"/api/types/{type_['id']}", headers=auth_headers).status_code == 200


def test_reorder_types(client, auth_headers):
    first = type_store.create_type({"name": "First"})
    second = type_store.create_type({"name": "Second"})

    type_store.reorder_types([second["id"], first["id"]])

    listed = client.get("/api/types").get_json()
    assert [item["id"] for item in listed] == [second["id"], first["id"]]


def test_get_by_slug(client):
    type_store.create_type({"name": "Bed & Breakfast"})

    response = client.get("/api/types/slug/bed-breakfast")
    assert response.status_code == 200
    assert response.get_json()["name"] == "Bed & Breakfast"
