import time
from typing import Callable

from loguru import logger

DEFAULT_TIMEOUT = 10.0
DEFAULT_POLL_INTERVAL = 0.5


def wait_until(predicate: Callable[[], bool],
               timeout: float = DEFAULT_TIMEOUT,
               poll_interval: float = DEFAULT_POLL_INTERVAL,
               clock: Callable[[], float] = time.monotonic,
               sleep: Callable[[float], None] = time.sleep,
               description: str = "") -> bool:
    """
    Poll predicate until it is truthy or the timeout elapses.

    Returns False on timeout instead of raising. A predicate that raises counts
    as "not yet satisfied" and is polled again until the deadline.
    The predicate is always evaluated at least once.
    """
    deadline = clock() + timeout
    attempt = 0
    while True:
        attempt += 1
        try:
            if predicate():
                return True
        except Exception as e:
            logger.debug(f"wait attempt {attempt} ({description or 'condition'}) raised: {e}")

        if clock() >= deadline:
            logger.debug(f"wait timed out after {timeout}s: {description or 'condition'}")
            return False
        sleep(poll_interval)


# ========= predicates =========
def element_present(driver, selector: str) -> Callable[[], bool]:
    return lambda: len(driver.find_elements(selector)) > 0


def element_displayed(driver, selector: str) -> Callable[[], bool]:
    return lambda: driver.find_element(selector).is_displayed()


def element_clickable(driver, selector: str) -> Callable[[], bool]:
    def _clickable():
        element = driver.find_element(selector)
        return element.is_displayed() and element.is_enabled()

    return _clickable


def url_contains(driver, fragment: str) -> Callable[[], bool]:
    return lambda: fragment.lower() in driver.url.lower()
