"""
Fixed-backoff retry loop for the few places where the page renders behind our
actions (cart listing, checkout total). No exponential growth, no jitter.
"""
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

from loguru import logger

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BACKOFF = 2.0


@dataclass(frozen=True)
class Succeeded:
    value: Any
    attempts: int


@dataclass(frozen=True)
class ExhaustedRetries:
    attempts: int
    last_value: Optional[Any] = None


RetryResult = Union[Succeeded, ExhaustedRetries]


def retry_fixed(attempt_fn: Callable[[int], Tuple[bool, Any]],
                max_attempts: int = DEFAULT_MAX_ATTEMPTS,
                backoff: float = DEFAULT_BACKOFF,
                sleep: Callable[[float], None] = time.sleep,
                description: str = "") -> RetryResult:
    """
    Run attempt_fn(attempt) until it reports success or max_attempts is reached.

    attempt_fn returns (ok, value). Exceptions raised by attempt_fn are not
    retried and propagate to the caller. Sleeps `backoff` seconds between
    attempts, never after the last one.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    last_value = None
    for attempt in range(1, max_attempts + 1):
        ok, value = attempt_fn(attempt)
        if ok:
            return Succeeded(value=value, attempts=attempt)
        last_value = value
        if attempt < max_attempts:
            logger.info(f"Attempt {attempt}/{max_attempts} not satisfied ({description}), retrying in {backoff}s")
            sleep(backoff)

    logger.warning(f"{description or 'operation'} failed after {max_attempts} attempts")
    return ExhaustedRetries(attempts=max_attempts, last_value=last_value)
