import json


def _json_or_none(response):
    try:
        return response.json()
    except (json.JSONDecodeError, ValueError):
        return None


class ApiAssert:

    @staticmethod
    def status_code(response, expect: int):
        assert response.status_code == expect, \
            f"Expected status {expect}, got {response.status_code}. Response: {response.text}"

    @staticmethod
    def status_in(response, expect: tuple):
        assert response.status_code in expect, \
            f"Status {response.status_code} not in {expect}. Response: {response.text}"

    @staticmethod
    def json_array(response):
        body = _json_or_none(response)
        assert isinstance(body, list), f"Expected an array of products, got: {response.text[:200]}"
        return body

    @staticmethod
    def error_status_or_soft_error(response, error_status: int, soft_key: str = "id"):
        """The catalog API answers some invalid requests with 200 + a body instead of an error status.
           Both are accepted: error_status, or 200 whose JSON carries soft_key."""
        if response.status_code == 200:
            body = _json_or_none(response)
            assert isinstance(body, dict) and soft_key in body, \
                f"Expected '{soft_key}' in 200 response for invalid request, got: {response.text}"
            return "soft_error"
        assert response.status_code == error_status, \
            f"Unexpected status code {response.status_code} (expected {error_status} or 200). Response: {response.text}"
        return "error_status"

    @staticmethod
    def deleted_or_not_found(response):
        """Delete of a missing id: 404, or 200 with an empty/null body, or 200 with an 'error' property."""
        if response.status_code == 404:
            return "not_found"
        assert response.status_code == 200, f"Unexpected status code: {response.status_code}"
        body_text = response.text.strip()
        if body_text in ("", "null"):
            return "empty_body"
        body = _json_or_none(response)
        assert isinstance(body, dict) and "error" in body, \
            f"Expected an error property in response but none was found: {body_text}"
        return "error_body"

    @staticmethod
    def faster_than(elapsed_ms: float, threshold_ms: float):
        assert elapsed_ms < threshold_ms, f"API took too long: {elapsed_ms:.0f}ms (threshold {threshold_ms}ms)"
