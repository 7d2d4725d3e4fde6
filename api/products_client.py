"""
Thin client for the FakeStore product catalog API.

Each call is a direct pass-through to httpx: no retries and no status checks.
Tests assert on the returned httpx.Response.
"""
import json
import time
from typing import Any, Optional

import allure
import httpx
from allure_commons.types import AttachmentType
from loguru import logger

MAX_BODY_LENGTH = 3000


class ProductsApiClient:
    """
    Usage:
        >>> with ProductsApiClient("https://fakestoreapi.com/") as client:
        ...     response = client.get("products")
    """

    def __init__(self, base_url: str, timeout: float = 60.0, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport
        self.session: Optional[httpx.Client] = None

    def __enter__(self) -> "ProductsApiClient":
        self.session = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers={"Accept": "application/json"},
            transport=self.transport,
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            self.session.close()
            self.session = None

    # ================= requests =================
    def get(self, endpoint: str) -> httpx.Response:
        return self._send("GET", endpoint)

    def post(self, endpoint: str, data: Any) -> httpx.Response:
        return self._send("POST", endpoint, json=data)

    def put(self, endpoint: str, data: Any) -> httpx.Response:
        return self._send("PUT", endpoint, json=data)

    def delete(self, endpoint: str) -> httpx.Response:
        return self._send("DELETE", endpoint)

    def _send(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        if self.session is None:
            raise RuntimeError("ProductsApiClient must be used as a context manager: 'with ProductsApiClient(...)'")

        start = time.perf_counter()
        response = self.session.request(method, endpoint, **kwargs)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{method} {response.request.url} -> {response.status_code} ({elapsed_ms:.0f}ms)")
        self._attach(method, endpoint, kwargs.get("json"), response)
        return response

    @staticmethod
    def _attach(method: str, endpoint: str, payload: Any, response: httpx.Response):
        body = response.text
        if len(body) > MAX_BODY_LENGTH:
            body = body[:MAX_BODY_LENGTH] + "...(truncated)"
        lines = [f"{method} {endpoint}"]
        if payload is not None:
            lines.append(f"Request body: {json.dumps(payload, ensure_ascii=False)}")
        lines.append(f"Status: {response.status_code}")
        lines.append(f"Response body: {body}")
        allure.attach("\n".join(lines), name=f"{method} {endpoint}", attachment_type=AttachmentType.TEXT)
