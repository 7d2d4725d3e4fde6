from loguru import logger

from config.locators import ADD_TO_CART_TEXT, PRODUCT_LOCATORS
from config.pages import PATHS
from pages.base_page import BasePage
from utils.exceptions import ElementNotFoundError, InvalidStateError, NoSuchElementError
from utils.wait import element_present


class ProductPage(BasePage):
    add_to_cart_button = PRODUCT_LOCATORS["add_to_cart_button"]  # add/remove buttons
    item_product_name = PRODUCT_LOCATORS["item_product_name"]  # product names
    shopping_cart_icon = PRODUCT_LOCATORS["shopping_cart_icon"]  # cart icon
    shopping_cart_badge = PRODUCT_LOCATORS["shopping_cart_badge"]  # count on the cart icon

    # ================= page actions =================
    def add_all_products_to_cart(self) -> int:
        """
        Click every visible, enabled "Add to cart" button on the page.

        Buttons already toggled to "Remove" are skipped so a product that is in
        the cart stays there. Returns the number of clicks made.
        Raises ElementNotFoundError when the page renders no buttons at all.
        """
        self.wait_for(element_present(self.driver, self.add_to_cart_button), description="add-to-cart buttons")
        buttons = self.driver.find_elements(self.add_to_cart_button)
        if not buttons:
            logger.warning("No products found to add to cart.")
            self.report.write("Error while adding products to cart: No products found on the page.")
            raise ElementNotFoundError("No products found on the page.")

        clicked = 0
        for button in buttons:
            if button.is_displayed() and button.is_enabled() and button.text.strip().lower() == ADD_TO_CART_TEXT:
                button.click()
                clicked += 1
        logger.info(f"Added {clicked} of {len(buttons)} products to the cart.")
        return clicked

    def go_to_cart(self):
        try:
            icon = self.driver.find_element(self.shopping_cart_icon)
        except NoSuchElementError as e:
            self.report.write(f"Error navigating to cart: {e}")
            raise ElementNotFoundError("Cart icon not found.") from e

        if not icon.is_displayed():
            self.report.write("Error navigating to cart: Cart icon is not displayed.")
            raise InvalidStateError("Cart icon is not displayed.")

        icon.click()
        if self.wait_url(PATHS["cart"]):
            logger.info("Navigated to the cart page.")
        else:
            logger.warning(f"Cart icon clicked but url is still {self.current_url}")

    # ================= data =================
    def get_product_names(self) -> list[str]:
        names = self.get_texts(self.item_product_name)
        logger.info(f"Products on page: {', '.join(names)}")
        return names

    def get_cart_badge_count(self) -> int:
        badges = self.driver.find_elements(self.shopping_cart_badge)
        if not badges:
            return 0
        text = badges[0].text.strip()
        if not text.isdigit():
            # badge caught mid re-render
            logger.debug(f"Cart badge text is not a number: {text!r}")
            return 0
        return int(text)
