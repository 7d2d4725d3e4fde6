from playwright.sync_api import Locator, Page

from utils.exceptions import NoSuchElementError

# element-level calls should fail fast; waiting is the page objects' business
ACTION_TIMEOUT_MS = 5000


class PlaywrightElement:
    def __init__(self, locator: Locator):
        self.locator = locator

    @property
    def text(self) -> str:
        return self.locator.inner_text(timeout=ACTION_TIMEOUT_MS)

    def click(self):
        self.locator.scroll_into_view_if_needed(timeout=ACTION_TIMEOUT_MS)
        self.locator.click(timeout=ACTION_TIMEOUT_MS)

    def send_keys(self, text: str):
        self.locator.press_sequentially(text, timeout=ACTION_TIMEOUT_MS)

    def clear(self):
        self.locator.clear(timeout=ACTION_TIMEOUT_MS)

    def is_displayed(self) -> bool:
        return self.locator.is_visible()

    def is_enabled(self) -> bool:
        return self.locator.is_enabled(timeout=ACTION_TIMEOUT_MS)


class PlaywrightDriver:
    """BrowserDriver over a Playwright sync Page. Every lookup re-queries the live DOM."""

    def __init__(self, page: Page):
        self.page = page

    @property
    def url(self) -> str:
        return self.page.url

    def navigate(self, url: str):
        self.page.goto(url)

    def find_element(self, selector: str) -> PlaywrightElement:
        locator = self.page.locator(selector)
        if locator.count() == 0:
            raise NoSuchElementError(selector)
        return PlaywrightElement(locator.first)

    def find_elements(self, selector: str) -> list[PlaywrightElement]:
        locator = self.page.locator(selector)
        return [PlaywrightElement(locator.nth(i)) for i in range(locator.count())]
