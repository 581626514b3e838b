from citydir.application import hotspot as hotspot_store


def test_defaults_before_anything_is_saved(client):
    assert client.get("/api/hotspot/blocks").get_json() == {"blockSets": []}
    assert client.get("/api/hotspot/editors-picks").get_json() == {"picks": []}

    footer = client.get("/api/hotspot/footer").get_json()
    assert footer["icons"] == []
    assert footer["styles"] == hotspot_store.FOOTER_STYLES

    quick_fun = client.get("/api/hotspot/quick-fun").get_json()
    assert quick_fun["titleEnglish"] == ""


def test_block_sets_are_sanitized(client, auth_headers):
    response = client.put(
        "/api/hotspot/blocks",
        json={"blockSets": [{
            "styles": {"titleColor": "rgba(1, 2, 3, 1)"},
            "blocks": [{"title": "Ferhadija", "unknown": "dropped"}],
        }]},
        headers=auth_headers,
    )
    assert response.status_code == 200, response.get_json()

    [block_set] = client.get("/api/hotspot/blocks").get_json()["blockSets"]
    assert block_set["id"]
    assert block_set["styles"]["titleColor"] == "rgba(1, 2, 3, 1)"
    assert block_set["styles"]["blockBackground"] == "rgba(31, 31, 31, 1)"

    [block] = block_set["blocks"]
    assert block["id"]
    assert block["title"] == "Ferhadija"
    assert block["buttonText"] == ""
    assert "unknown" not in block


def test_non_list_block_sets_store_nothing(app):
    hotspot_store.save_block_sets([{"blocks": []}])

    assert hotspot_store.save_block_sets("not a list") == []
    assert hotspot_store.get_block_sets() == []


def test_footer_caps_icons(client, auth_headers):
    icons = [{"name": f"icon {i}", "url": "https://example.com"} for i in range(5)]

    response = client.put("/api/hotspot/footer", json={"icons": icons}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["error"] == "ValidationError"


def test_picks_and_discovery_keep_ids(client, auth_headers):
    client.put(
        "/api/hotspot/editors-picks",
        json={"picks": [{"id": "pick-1", "titleEnglish": "Old bridge"}, {"titleBosnian": "Stari most"}]},
        headers=auth_headers,
    )
    client.put(
        "/api/hotspot/discovery",
        json={"places": [{"nameEnglish": "Baščaršija", "link": "/bascarsija"}]},
        headers=auth_headers,
    )

    picks = client.get("/api/hotspot/editors-picks").get_json()["picks"]
    assert picks[0]["id"] == "pick-1"
    assert picks[1]["id"] and picks[1]["titleBosnian"] == "Stari most"

    [place] = client.get("/api/hotspot/discovery").get_json()["places"]
    assert place["id"]
    assert place["link"] == "/bascarsija"


def test_saving_one_part_keeps_the_others(app):
    hotspot_store.save_utilities({"cityName": "Sarajevo", "baseCurrency": "BAM"})
    hotspot_store.save_quick_fun({"titleEnglish": "Quiz night"})

    assert hotspot_store.get_utilities()["cityName"] == "Sarajevo"
    assert hotspot_store.get_quick_fun()["titleEnglish"] == "Quiz night"


def test_writes_need_a_session(client):
    response = client.put("/api/hotspot/utilities", json={"cityName": "Mostar"})

    assert response.status_code == 401
    assert client.get("/api/hotspot/utilities").get_json()["cityName"] == ""
