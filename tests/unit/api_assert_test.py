import httpx
import pytest

from assertions.api_assert import ApiAssert


@pytest.mark.unit
class TestApiAssert:

    def test_status_code(self):
        ApiAssert.status_code(httpx.Response(200), 200)
        with pytest.raises(AssertionError, match="Expected status 201, got 200"):
            ApiAssert.status_code(httpx.Response(200), 201)

    def test_status_in(self):
        ApiAssert.status_in(httpx.Response(404), (400, 404))
        with pytest.raises(AssertionError):
            ApiAssert.status_in(httpx.Response(500), (400, 404))

    def test_json_array(self):
        assert ApiAssert.json_array(httpx.Response(200, json=[{"id": 1}])) == [{"id": 1}]
        with pytest.raises(AssertionError, match="array"):
            ApiAssert.json_array(httpx.Response(200, json={"id": 1}))
        with pytest.raises(AssertionError):
            ApiAssert.json_array(httpx.Response(200, text="<html>"))

    @pytest.mark.parametrize("response, outcome", [
        (httpx.Response(400, text="bad request"), "error_status"),
        (httpx.Response(200, json={"id": 21}), "soft_error"),
    ])
    def test_error_status_or_soft_error_accepts(self, response, outcome):
        assert ApiAssert.error_status_or_soft_error(response, 400) == outcome

    @pytest.mark.parametrize("response", [
        httpx.Response(500, text="server error"),
        httpx.Response(200, json={"title": "no id"}),
        httpx.Response(200, text="null"),
    ])
    def test_error_status_or_soft_error_rejects(self, response):
        with pytest.raises(AssertionError):
            ApiAssert.error_status_or_soft_error(response, 400)

    @pytest.mark.parametrize("response, outcome", [
        (httpx.Response(404), "not_found"),
        (httpx.Response(200, content=b""), "empty_body"),
        (httpx.Response(200, text="null"), "empty_body"),
        (httpx.Response(200, json={"error": "Product not found"}), "error_body"),
    ])
    def test_deleted_or_not_found_accepts(self, response, outcome):
        assert ApiAssert.deleted_or_not_found(response) == outcome

    @pytest.mark.parametrize("response", [
        httpx.Response(500),
        httpx.Response(200, json={"id": 9999}),
    ])
    def test_deleted_or_not_found_rejects(self, response):
        with pytest.raises(AssertionError):
            ApiAssert.deleted_or_not_found(response)

    def test_faster_than(self):
        ApiAssert.faster_than(120.0, 3000)
        with pytest.raises(AssertionError, match="API took too long"):
            ApiAssert.faster_than(3000.0, 3000)
