import json
import re

import httpx
import pytest
from loguru import logger

import api.products_client as products_client
from api.products_client import MAX_BODY_LENGTH, ProductsApiClient
from data.products_api_data import VALID_PRODUCT

BASE_URL = "https://fakestoreapi.com/"


class FakeStore:
    """Records requests and answers like the catalog API."""

    def __init__(self):
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if request.method == "GET" and path == "/products":
            return httpx.Response(200, json=[{"id": 1, "title": "Backpack"}, {"id": 2, "title": "Shirt"}])
        if request.method == "GET" and path == "/products/big":
            return httpx.Response(200, text="x" * (MAX_BODY_LENGTH + 500))
        if request.method in ("POST", "PUT"):
            body = json.loads(request.content)
            return httpx.Response(200, json={"id": 21, **body})
        if request.method == "DELETE":
            return httpx.Response(200, text="null")
        return httpx.Response(404)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def attachments(monkeypatch):
    recorded = []
    monkeypatch.setattr(products_client.allure, "attach",
                        lambda body, name=None, attachment_type=None: recorded.append((name, body)))
    return recorded


@pytest.mark.unit
class TestProductsApiClient:

    def test_get_joins_base_url(self, store, attachments):
        with ProductsApiClient(BASE_URL, transport=httpx.MockTransport(store)) as client:
            response = client.get("products")

        assert response.status_code == 200
        assert len(response.json()) == 2
        assert str(store.requests[0].url) == "https://fakestoreapi.com/products"
        assert store.requests[0].headers["Accept"] == "application/json"

    def test_post_and_put_send_json(self, store, attachments):
        with ProductsApiClient(BASE_URL, transport=httpx.MockTransport(store)) as client:
            created = client.post("products", VALID_PRODUCT)
            updated = client.put("products/1", {"title": "Renamed"})

        assert created.json()["title"] == VALID_PRODUCT["title"]
        assert json.loads(store.requests[0].content) == VALID_PRODUCT
        assert updated.json()["title"] == "Renamed"
        assert [r.method for r in store.requests] == ["POST", "PUT"]

    def test_delete(self, store, attachments):
        with ProductsApiClient(BASE_URL, transport=httpx.MockTransport(store)) as client:
            response = client.delete("products/1")
        assert response.text == "null"

    def test_error_statuses_are_returned_not_raised(self, store, attachments):
        with ProductsApiClient(BASE_URL, transport=httpx.MockTransport(store)) as client:
            assert client.get("unknown").status_code == 404

    def test_every_call_is_attached(self, store, attachments):
        with ProductsApiClient(BASE_URL, transport=httpx.MockTransport(store)) as client:
            client.post("products", VALID_PRODUCT)

        name, body = attachments[0]
        assert name == "POST products"
        assert "Request body:" in body
        assert "Status: 200" in body

    def test_large_bodies_are_truncated_in_attachments(self, store, attachments):
        with ProductsApiClient(BASE_URL, transport=httpx.MockTransport(store)) as client:
            response = client.get("products/big")

        assert len(response.text) == MAX_BODY_LENGTH + 500
        _, body = attachments[0]
        assert body.endswith("...(truncated)")
        assert len(body) < MAX_BODY_LENGTH + 200

    def test_preloaded_response_is_logged_with_timing(self, store, attachments):
        messages = []
        sink_id = logger.add(messages.append, format="{message}", level="INFO")
        try:
            with ProductsApiClient(BASE_URL, transport=httpx.MockTransport(store)) as client:
                client.get("products")
        finally:
            logger.remove(sink_id)

        assert any(re.search(r"GET https://fakestoreapi.com/products -> 200 \(\d+ms\)", m) for m in messages)

    def test_session_is_closed_on_exit(self, store):
        client = ProductsApiClient(BASE_URL, transport=httpx.MockTransport(store))
        with client:
            assert client.session is not None
        assert client.session is None

    def test_requires_context_manager(self):
        with pytest.raises(RuntimeError, match="context manager"):
            ProductsApiClient(BASE_URL).get("products")
