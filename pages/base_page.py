import time

from config.settings import Timeouts
from drivers.browser_driver import BrowserDriver
from utils.report_sink import ReportSink
from utils.retry import retry_fixed
from utils.wait import element_clickable, element_displayed, url_contains, wait_until


class BasePage:

    def __init__(self, driver: BrowserDriver, report: ReportSink, timeouts: Timeouts = None,
                 clock=time.monotonic, sleep=time.sleep):
        self.driver = driver
        self.report = report
        self.timeouts = timeouts or Timeouts()
        self.clock = clock
        self.sleep = sleep

    # ========= basic actions =========
    def open(self, url: str):
        self.driver.navigate(url)

    def click(self, selector: str):
        self.driver.find_element(selector).click()

    def fill(self, selector: str, value: str):
        element = self.driver.find_element(selector)
        element.clear()
        element.send_keys(value)

    def text(self, selector: str) -> str:
        return self.driver.find_element(selector).text

    def get_texts(self, selector: str) -> list[str]:
        return [element.text for element in self.driver.find_elements(selector)]

    def get_count(self, selector: str) -> int:
        return len(self.driver.find_elements(selector))

    def is_present(self, selector: str) -> bool:
        return self.get_count(selector) > 0

    @property
    def current_url(self) -> str:
        return self.driver.url

    # ========= waits =========
    def wait_for(self, predicate, timeout: float = None, description: str = "") -> bool:
        return wait_until(predicate,
                          timeout=self.timeouts.element if timeout is None else timeout,
                          poll_interval=self.timeouts.poll,
                          clock=self.clock,
                          sleep=self.sleep,
                          description=description)

    def wait_visible(self, selector: str, timeout: float = None) -> bool:
        return self.wait_for(element_displayed(self.driver, selector), timeout, f"'{selector}' visible")

    def wait_clickable(self, selector: str, timeout: float = None) -> bool:
        return self.wait_for(element_clickable(self.driver, selector), timeout, f"'{selector}' clickable")

    def wait_url(self, fragment: str, timeout: float = None) -> bool:
        return self.wait_for(url_contains(self.driver, fragment), timeout, f"url contains '{fragment}'")

    # ========= retry =========
    def retry(self, attempt_fn, description: str = ""):
        return retry_fixed(attempt_fn,
                           max_attempts=self.timeouts.retry_attempts,
                           backoff=self.timeouts.retry_backoff,
                           sleep=self.sleep,
                           description=description)
