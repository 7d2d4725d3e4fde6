"""
End-to-end purchase flow: login -> add all products -> verify cart ->
checkout -> shipping -> total -> finish.

Expected negative outcomes (bad login, missing products, input error, no total)
end the run with a failed WorkflowResult naming the stage. Raised failures are
written to the report and propagate from run(); run_for_users() records them per
user and moves on.
"""
import time
from dataclasses import dataclass
from enum import Enum

import allure
from loguru import logger

from config.pages import PATHS
from config.settings import Settings
from pages.cart_page import CartPage
from pages.checkout_page import CheckoutPage
from pages.login_page import LoginPage
from pages.product_page import ProductPage
from utils.credentials import Credential
from utils.report_sink import ReportSink


@dataclass(frozen=True)
class ShippingInfo:
    first_name: str
    last_name: str
    zip_code: str


class Stage(Enum):
    LOGIN = "login"
    ADD_TO_CART = "add_to_cart"
    CART_VERIFY = "cart_verify"
    CHECKOUT = "checkout"
    SHIPPING = "shipping"
    INPUT_CHECK = "input_check"
    TOTAL_PRICE = "total_price"
    FINISH = "finish"
    DONE = "done"


@dataclass(frozen=True)
class WorkflowResult:
    username: str
    passed: bool
    stage: Stage
    message: str
    total_price: str = ""


class PurchaseWorkflow:

    def __init__(self, driver, report: ReportSink, settings: Settings = None,
                 clock=time.monotonic, sleep=time.sleep):
        self.driver = driver
        self.report = report
        self.settings = settings or Settings()
        page_kwargs = {"timeouts": self.settings.timeouts, "clock": clock, "sleep": sleep}
        self.login_page = LoginPage(driver, report, **page_kwargs)
        self.product_page = ProductPage(driver, report, **page_kwargs)
        self.cart_page = CartPage(driver, report, **page_kwargs)
        self.checkout_page = CheckoutPage(driver, report, **page_kwargs)
        self.stage = Stage.LOGIN
        self.logged_in = False

    def _fail(self, username: str, message: str) -> WorkflowResult:
        self.report.write(f"User '{username}' - {message}")
        logger.warning(message)
        return WorkflowResult(username=username, passed=False, stage=self.stage, message=message)

    def run(self, credential: Credential, expected_products: list[str], shipping: ShippingInfo) -> WorkflowResult:
        username = credential.username
        self.stage = Stage.LOGIN
        self.logged_in = False
        try:
            return self._run(credential, expected_products, shipping)
        except Exception as e:
            self.report.write(f"User '{username}' - Test failed at stage '{self.stage.value}' with error: {e}")
            raise

    def _run(self, credential: Credential, expected_products: list[str], shipping: ShippingInfo) -> WorkflowResult:
        username = credential.username

        with allure.step(f"Login as {username}"):
            self.login_page.open_login(self.settings.urls["login"])
            if not self.login_page.login(username, credential.password):
                return self._fail(username, f"Login failed for user '{username}'.")
            self.logged_in = True

        self.stage = Stage.ADD_TO_CART
        with allure.step("Add all products to cart"):
            self.product_page.add_all_products_to_cart()
            self.product_page.go_to_cart()

        self.stage = Stage.CART_VERIFY
        with allure.step("Verify cart contents"):
            if not self.cart_page.verify_all_products_in_cart(expected_products):
                return self._fail(username, f"Product verification failed for user '{username}'. "
                                            f"Expected: {', '.join(expected_products)}")

        self.stage = Stage.CHECKOUT
        with allure.step("Proceed to checkout"):
            self.cart_page.checkout()

        self.stage = Stage.SHIPPING
        with allure.step("Submit shipping information"):
            if not self.checkout_page.submit_shipping_information(shipping.first_name, shipping.last_name,
                                                                  shipping.zip_code):
                return self._fail(username, f"Shipping information submission failed for user '{username}'.")

        self.stage = Stage.INPUT_CHECK
        if self.checkout_page.has_input_error():
            message = self.checkout_page.get_input_error_message()
            return self._fail(username, f"Input error after shipping information for user '{username}': {message}")

        self.stage = Stage.TOTAL_PRICE
        with allure.step("Read total price"):
            total_price = self.checkout_page.get_total_price()
            if not total_price:
                return self._fail(username, f"Total price is missing for user '{username}'.")

        self.stage = Stage.FINISH
        with allure.step("Finish checkout"):
            if not self.checkout_page.click_finish_button():
                return self._fail(username, f"Checkout process not completed for user '{username}'. "
                                            f"Current URL: {self.driver.url}")
            if not self.driver.url.endswith(PATHS["checkout_complete"]):
                return self._fail(username, f"Checkout process not completed successfully for user '{username}'. "
                                            f"Current URL: {self.driver.url}")

        self.stage = Stage.DONE
        message = f"Test passed successfully for user '{username}'."
        self.report.write(f"User '{username}' - {message}")
        return WorkflowResult(username=username, passed=True, stage=Stage.DONE, message=message,
                              total_price=total_price)

    def run_for_users(self, credentials: list[Credential], expected_products: list[str],
                      shipping: ShippingInfo) -> list[WorkflowResult]:
        results = []
        for credential in credentials:
            username = credential.username
            logger.info(f"Running test for user: {username}")
            try:
                result = self.run(credential, expected_products, shipping)
            except Exception as e:
                result = WorkflowResult(username=username, passed=False, stage=self.stage,
                                        message=f"Test failed for user '{username}' with error: {e}")
            finally:
                if self.logged_in:
                    self._logout(username)
            results.append(result)
        return results

    def _logout(self, username: str):
        try:
            self.login_page.logout()
        except Exception as e:
            logger.warning(f"Logout failed for user '{username}': {e}")
            self.report.write(f"User '{username}' - Logout failed: {e}")
        finally:
            self.logged_in = False
