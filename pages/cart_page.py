from loguru import logger

from config.locators import CART_LOCATORS
from config.pages import PATHS
from pages.base_page import BasePage
from utils.exceptions import ElementNotFoundError, InvalidStateError, NoSuchElementError
from utils.retry import Succeeded


def _normalize(name: str) -> str:
    return name.strip().casefold()


class CartPage(BasePage):
    cart_item_name = CART_LOCATORS["cart_item_name"]  # cart line item names
    checkout_button = CART_LOCATORS["checkout_button"]  # checkout button

    # ================= page actions =================
    def checkout(self):
        try:
            button = self.driver.find_element(self.checkout_button)
        except NoSuchElementError as e:
            self.report.write(f"Error clicking checkout button: {e}")
            raise ElementNotFoundError("Checkout button not found.") from e

        if not (button.is_displayed() and button.is_enabled()):
            self.report.write("Error clicking checkout button: Checkout button is not clickable.")
            raise InvalidStateError("Checkout button is not clickable.")

        button.click()
        self.wait_url(PATHS["checkout_step_one"])
        logger.info("Proceeded to checkout.")

    # ================= data =================
    def get_cart_item_names(self) -> list[str]:
        """Live cart snapshot, in DOM order."""
        names = self.get_texts(self.cart_item_name)
        logger.debug(f"Retrieved cart items: {', '.join(names)}")
        return names

    def get_cart_item_count(self) -> int:
        count = self.get_count(self.cart_item_name)
        logger.info(f"Number of items in the cart: {count}")
        return count

    # ================= checks =================
    def verify_product_in_cart(self, product_name: str) -> bool:
        cart_items = self.get_cart_item_names()
        logger.info(f"Cart contains: {', '.join(cart_items)}")
        if _normalize(product_name) in {_normalize(item) for item in cart_items}:
            return True
        self.report.write(f"Product '{product_name}' not found in the cart. Cart contains: {', '.join(cart_items)}")
        return False

    def verify_all_products_in_cart(self, expected_products: list[str]) -> bool:
        """
        True once every expected name shows up in the cart.

        The cart can lag behind the add-to-cart clicks, so the listing is polled
        up to retry_attempts times with a fixed backoff in between.
        """
        def attempt(n: int):
            cart_items = self.get_cart_item_names()
            in_cart = {_normalize(item) for item in cart_items}
            missing = [p for p in expected_products if _normalize(p) not in in_cart]
            logger.info(f"Attempt {n}: Cart contains: {', '.join(cart_items)}")
            if missing:
                logger.info(f"Missing products: {', '.join(missing)}")
            return not missing, missing

        result = self.retry(attempt, description="cart product verification")
        if isinstance(result, Succeeded):
            logger.info("All expected products are present in the cart.")
            return True

        self.report.write(f"Product verification failed after {result.attempts} attempts. "
                          f"Missing: {', '.join(result.last_value)}")
        return False
