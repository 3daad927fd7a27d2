"""
Retry logic for Klarna API calls.

Transient failures (429, 502-504) are retried with exponential backoff;
anything else is re-raised unchanged on first sight. A RateLimitError with a
Retry-After hint sleeps for that long instead of the backoff delay.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger("klarna_checkout.retry")

T = TypeVar("T")

RETRIABLE_STATUS_CODES = {429, 502, 503, 504}
MAX_RETRIES = 3
BASE_DELAY = 0.5
MAX_DELAY = 10.0


class ProviderError(Exception):
    """Base exception for Klarna API errors."""

    def __init__(self, message: str, status_code: int = 500, retriable: bool = True):
        super().__init__(message)
        self.status_code = status_code
        self.retriable = retriable


class RateLimitError(ProviderError):
    """429 Too Many Requests from Klarna."""

    def __init__(self, message: str = "Rate limited", retry_after: float | None = None):
        super().__init__(message, status_code=429, retriable=True)
        self.retry_after = retry_after


class PermanentError(ProviderError):
    """Non-retriable error (e.g. expired authorization token, rejected payload)."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message, status_code=status_code, retriable=False)


async def with_retry(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_retries: int = MAX_RETRIES,
    base_delay: Optional[float] = None,
    **kwargs: Any,
) -> T:
    """
    Await func(*args, **kwargs), retrying retriable ProviderErrors.

    Raises:
        ProviderError: The last error, on permanent failure or exhausted retries.
    """
    delay = BASE_DELAY if base_delay is None else base_delay

    for attempt in range(max_retries + 1):
        try:
            return await func(*args, **kwargs)
        except ProviderError as e:
            if not e.retriable:
                raise
            if attempt == max_retries:
                logger.error("Giving up after %d attempts: %s", attempt + 1, e)
                raise

            sleep_for = min(delay, MAX_DELAY)
            if isinstance(e, RateLimitError) and e.retry_after is not None:
                sleep_for = min(e.retry_after, MAX_DELAY)

            logger.warning(
                "Retriable error on attempt %d/%d (status %d): %s; sleeping %.2fs",
                attempt + 1,
                max_retries + 1,
                e.status_code,
                e,
                sleep_for,
            )
            await asyncio.sleep(sleep_for)
            delay = min(delay * 2, MAX_DELAY)

    raise ProviderError("Retry loop exited without a result")
