import re
from decimal import Decimal


class CheckoutAssert:

    @staticmethod
    def no_input_error(has_error: bool, message: str = ""):
        assert not has_error, f"Input error detected after submitting shipping information: {message}"

    @staticmethod
    def input_error(has_error: bool, actual_msg: str, expect_msg: str):
        assert has_error, "Expected a shipping form error, none was displayed"
        assert expect_msg in actual_msg, f"Expected error: {expect_msg}, not found in: {actual_msg}"

    @staticmethod
    def price_format(price: str):
        """Only the price format matters, not the label wording"""
        assert re.match(r"^[A-Za-z ]+: \$\d+(\.\d{2})$", price), f"Wrong price format: {price!r}"

    @staticmethod
    def price_positive(price: Decimal):
        assert price > 0, f"Order total must be greater than 0: {price}"

    @staticmethod
    def url_ends_with(actual_url: str, expect_path: str):
        assert actual_url.endswith(expect_path), \
            f"Checkout process was not completed successfully! Current URL: {actual_url}"

    @staticmethod
    def still_on(actual_url: str, expect_path: str):
        assert expect_path in actual_url, f"Navigation went past {expect_path}: {actual_url}"
