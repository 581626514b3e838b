import json
import logging

import httpx
import pytest

from citydir.client import DirectoryClient


def make_client(handler):
    return DirectoryClient("http://directory.test", timeout=1.0, transport=httpx.MockTransport(handler))


def test_list_businesses_passes_filters():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[{"id": "b1", "name": "Bistro"}])

    with make_client(handler) as client:
        result = client.list_businesses(category_id="c1", highlight=True, search=None)

    assert result == [{"id": "b1", "name": "Bistro"}]
    assert seen["path"] == "/api/businesses"
    assert seen["params"] == {"category_id": "c1", "highlight": "true"}


def test_get_section_by_slug():
    def handler(request):
        assert request.url.path == "/api/sections/slug/old-town"
        return httpx.Response(200, json={"id": "s1", "slug": "old-town", "businesses": []})

    with make_client(handler) as client:
        assert client.get_section_by_slug("old-town")["id"] == "s1"


@pytest.mark.parametrize("status", [500, 503])
def test_list_calls_degrade_to_empty_list(status, caplog):
    with make_client(lambda request: httpx.Response(status, json={"error": "StoreError"})) as client:
        with caplog.at_level(logging.WARNING, logger="citydir.client"):
            assert client.list_categories() == []

    assert "GET /categories failed" in caplog.text


def test_transport_errors_degrade_gracefully():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with make_client(handler) as client:
        assert client.list_events() == []
        assert client.get_business("b1") is None


def test_missing_item_is_none():
    def handler(request):
        return httpx.Response(404, json={"error": "NotFound", "message": "Business not found"})

    with make_client(handler) as client:
        assert client.get_business("ghost") is None


def test_unexpected_payload_shape():
    def handler(request):
        return httpx.Response(200, content=json.dumps({"not": "a list"}))

    with make_client(handler) as client:
        assert client.list_attractions() == []
        assert client.list_sections() == []


def test_against_the_real_app(app, auth_headers):
    """Drive the client through the Flask app with a WSGI transport."""
    app.test_client().post("/api/categories", json={"name": "Food"}, headers=auth_headers)

    transport = httpx.WSGITransport(app=app)
    with DirectoryClient("http://directory.test", transport=transport) as client:
        assert [c["slug"] for c in client.list_categories()] == ["food"]
        assert client.get_business("ghost") is None
