from pages.login_page import NO_ERROR_MESSAGE


class LoginAssert:

    @staticmethod
    def login_succeeded(result: bool, username: str):
        assert result is True, f"Login failed for user: {username}"

    @staticmethod
    def login_rejected(result: bool, username: str):
        assert result is False, f"Login unexpectedly succeeded for user: {username}"

    @staticmethod
    def landed_on(actual_url: str, expect_url: str):
        assert actual_url.rstrip("/").lower() == expect_url.rstrip("/").lower(), \
            f"Expected url after login: {expect_url}, actual url: {actual_url}"

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        assert actual_msg != NO_ERROR_MESSAGE, "No login error message was displayed"
        assert expect_msg in actual_msg, f"Expected login error: {expect_msg}, actual login error: {actual_msg}"
