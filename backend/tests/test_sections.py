from citydir.application import attractions as attraction_store
from citydir.application import businesses as business_store
from citydir.application import events as event_store
from citydir.application import sections as section_store


def test_section_lists_its_members(client, auth_headers):
    section = client.post(
        "/api/sections",
        json={"name": "Summer Festival", "domain": "festival.example.com", "meta": {"theme": "sun"}},
        headers=auth_headers,
    ).get_json()

    business_store.create_business(
        {"name": "Zlatna Ribica", "section_ids": [{"id": section["id"], "is_highlight": True}]}
    )
    attraction_store.create_attraction({"name": "Sebilj", "section_ids": [section["id"]]})
    event_store.create_event({"name": "Opening Night", "section_ids": [section["id"]]})

    body = client.get("/api/sections/slug/summer-festival").get_json()

    assert body["meta"] == {"theme": "sun"}
    assert body["usage_count"] == 3
    assert body["businesses"][0]["name"] == "Zlatna Ribica"
    assert body["businesses"][0]["is_highlight"] is True
    assert [a["name"] for a in body["attractions"]] == ["Sebilj"]
    assert [e["slug"] for e in body["events"]] == ["opening-night"]


def test_section_filters(client):
    section_store.create_section({"name": "Active", "domain": "a.example.com"})
    section_store.create_section({"name": "Hidden", "is_active": False, "featured": True})

    active = client.get("/api/sections?is_active=true").get_json()
    featured = client.get("/api/sections?featured=true").get_json()
    by_domain = client.get("/api/sections?domain=a.example.com").get_json()

    assert [s["name"] for s in active] == ["Active"]
    assert [s["name"] for s in featured] == ["Hidden"]
    assert [s["name"] for s in by_domain] == ["Active"]
    assert "businesses" not in active[0]


def test_section_with_members_cannot_be_deleted(client, auth_headers):
    section = section_store.create_section({"name": "Old Town"})
    attraction = attraction_store.create_attraction({"name": "Sebilj", "sections": [section["id"]]})

    assert client.get(f"/api/sections/{section['id']}/usage").get_json()["usage_count"] == 1
    assert client.delete(f"/api/sections/{section['id']}", headers=auth_headers).status_code == 409

    attraction_store.delete_attraction(attraction["id"])
    assert client.delete(f"/api/sections/{section['id']}", headers=auth_headers).status_code == 200


def test_reorder_sections(client, auth_headers):
    first = section_store.create_section({"name": "First"})
    second = section_store.create_section({"name": "Second"})

    response = client.post(
        "/api/sections/reorder",
        json={"orderedIds": [second["id"], first["id"]]},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert [s["name"] for s in section_store.list_sections()] == ["Second", "First"]


def test_null_is_active_means_active(app):
    section = section_store.create_section({"name": "Night Life", "is_active": None, "featured": None})

    assert section["is_active"] is True
    assert section["featured"] is False
