from loguru import logger

from config.locators import LOGIN_LOCATORS
from pages.base_page import BasePage
from utils.exceptions import ElementNotFoundError, InvalidStateError, NoSuchElementError

NO_ERROR_MESSAGE = "No error message displayed."


class LoginPage(BasePage):
    username_input = LOGIN_LOCATORS["username_input"]  # username field
    password_input = LOGIN_LOCATORS["password_input"]  # password field
    login_button = LOGIN_LOCATORS["login_button"]  # login button
    error_message = LOGIN_LOCATORS["error_msg"]  # login error banner
    inventory_container = LOGIN_LOCATORS["inventory_container"]  # shown after login
    menu_button = LOGIN_LOCATORS["menu_button"]
    logout_link = LOGIN_LOCATORS["logout_link"]

    # ================= page actions =================
    def open_login(self, login_url: str):
        self.open(login_url)
        self.wait_visible(self.username_input)

    def login(self, username: str, password: str) -> bool:
        """Submit credentials. False when the page shows a login error, never raises for bad credentials."""
        if not self.wait_visible(self.username_input):
            self.report.write("Login form did not render: username field not visible.")
            raise ElementNotFoundError("Username field not found.")

        self.fill(self.username_input, username)
        self.fill(self.password_input, password)
        self.click(self.login_button)

        # either the error banner or the inventory shows up once the form is handled
        self.wait_for(lambda: self.is_present(self.error_message) or self.is_present(self.inventory_container),
                      timeout=self.timeouts.probe,
                      description="login outcome")

        errors = self.driver.find_elements(self.error_message)
        if errors:
            message = errors[0].text
            self.report.write(f"Login failed for user '{username}': {message}")
            logger.info(f"Login failed for user '{username}': {message}")
            return False
        logger.info(f"Login succeeded for user '{username}'")
        return True

    def logout(self):
        """Menu -> logout link. Raises InvalidStateError when either is not clickable in time."""
        logger.info("Attempting to log out...")
        for selector, name in ((self.menu_button, "Menu button"), (self.logout_link, "Logout link")):
            if not self.wait_clickable(selector):
                message = f"Logout failed: {name} not clickable within {self.timeouts.element}s."
                self.report.write(message)
                raise InvalidStateError(message)
            self.click(selector)
        logger.info("Logout successful.")

    # ================= data =================
    def get_error_message(self) -> str:
        errors = self.driver.find_elements(self.error_message)
        if not errors:
            return NO_ERROR_MESSAGE
        message = errors[0].text
        self.report.write(f"Validation Error: {message}")
        return message

    # ========== checks ==========
    def is_login_successful(self) -> bool:
        try:
            return self.driver.find_element(self.inventory_container).is_displayed()
        except NoSuchElementError:
            return False
