from enum import Enum

from loguru import logger

from config.locators import CHECKOUT_LOCATORS
from config.pages import PATHS
from pages.base_page import BasePage
from utils.exceptions import InvalidStateError
from utils.retry import Succeeded
from utils.wait import element_present


class CheckoutState(Enum):
    SHIPPING_FORM = "shipping_form"
    SHIPPING_SUBMITTED = "shipping_submitted"
    OVERVIEW = "overview"
    FINISHED = "finished"
    INPUT_ERROR = "input_error"  # terminal for the attempt
    UNKNOWN = "unknown"


class CheckoutPage(BasePage):
    # step one: shipping info
    firstName_input = CHECKOUT_LOCATORS["firstName_input"]
    lastName_input = CHECKOUT_LOCATORS["lastName_input"]
    postalCode_input = CHECKOUT_LOCATORS["postalCode_input"]
    continue_button = CHECKOUT_LOCATORS["continue_button"]
    input_error_msg = CHECKOUT_LOCATORS["input_error_msg"]
    # step two: overview
    total_label = CHECKOUT_LOCATORS["total_label"]
    finish_button = CHECKOUT_LOCATORS["finish_button"]

    def _fail(self, message: str):
        self.report.write(f"Error during shipping information submission: {message}")
        raise InvalidStateError(message)

    # ========== step one ==========
    def enter_shipping_information(self, first_name: str, last_name: str, zip_code: str):
        """Fill the shipping form and continue. Raises InvalidStateError naming the field that never showed up."""
        fields = (
            (self.firstName_input, first_name, "First name field"),
            (self.lastName_input, last_name, "Last name field"),
            (self.postalCode_input, zip_code, "ZIP code field"),
        )
        for selector, value, name in fields:
            if not self.wait_visible(selector):
                self._fail(f"{name} not found.")
            self.fill(selector, value)

        if not self.wait_visible(self.continue_button):
            self._fail("Continue button not found.")
        self.click(self.continue_button)
        logger.info(f"Shipping information submitted: {first_name}, {last_name}, {zip_code}")

    def submit_shipping_information(self, first_name: str, last_name: str, zip_code: str) -> bool:
        try:
            self.enter_shipping_information(first_name, last_name, zip_code)
            return True
        except Exception as e:
            logger.warning(f"Error during shipping information submission: {e}")
            self.report.write(f"Shipping information not submitted: {e}")
            return False

    def has_input_error(self) -> bool:
        if self.wait_for(element_present(self.driver, self.input_error_msg),
                         timeout=self.timeouts.probe,
                         description="checkout input error"):
            message = self.get_input_error_message()
            logger.info(f"Error Message Displayed: {message}")
            self.report.write(f"Checkout input error: {message}")
            return True
        logger.info("No error message detected.")
        return False

    def get_input_error_message(self) -> str:
        messages = self.get_texts(self.input_error_msg)
        return messages[0] if messages else ""

    # ========== step two ==========
    def get_total_price(self) -> str:
        """Summary total label text, or "" when it never renders."""
        def attempt(n: int):
            if not self.wait_visible(self.total_label):
                logger.info(f"Attempt {n}: Total price label not found.")
                return False, ""
            try:
                price = self.text(self.total_label)
            except Exception as e:
                # the label re-renders; a detached or timed-out read is a failed attempt
                logger.info(f"Attempt {n}: Total price label could not be read: {e}")
                return False, ""
            logger.info(f"Attempt {n}: Total price found: {price}")
            return bool(price.strip()), price

        result = self.retry(attempt, description="total price retrieval")
        if isinstance(result, Succeeded):
            return result.value
        self.report.write(f"Total price retrieval failed after {result.attempts} attempts.")
        return ""

    def click_finish_button(self) -> bool:
        try:
            if not self.wait_visible(self.finish_button):
                logger.info("Finish button not found.")
                self.report.write("Finish button not found.")
                return False
            self.click(self.finish_button)
        except Exception as e:
            logger.warning(f"Error clicking finish button: {e}")
            self.report.write(f"Error clicking finish button: {e}")
            return False
        self.wait_url(PATHS["checkout_complete"])
        return True

    def finish_checkout(self):
        if not self.click_finish_button():
            raise InvalidStateError("Finish button not clicked.")

    # ========== state ==========
    def get_state(self) -> CheckoutState:
        url = self.current_url
        if self.is_present(self.input_error_msg):
            return CheckoutState.INPUT_ERROR
        if PATHS["checkout_complete"] in url:
            return CheckoutState.FINISHED
        if self.is_present(self.total_label):
            return CheckoutState.OVERVIEW
        if PATHS["checkout_step_two"] in url:
            return CheckoutState.SHIPPING_SUBMITTED
        if self.is_present(self.firstName_input):
            return CheckoutState.SHIPPING_FORM
        return CheckoutState.UNKNOWN
