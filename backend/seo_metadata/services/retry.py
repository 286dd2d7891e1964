"""Retry failed async operations with exponential backoff."""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MaxRetriesReachedError(Exception):
    """Raised when the retry loop ends without a result."""


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay_ms: int = 1000,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Await ``operation`` until it succeeds or attempts run out.

    Attempt ``i`` (zero-based) that fails is followed by a pause of
    ``base_delay_ms * 2**i`` milliseconds. The last failure is re-raised
    unchanged. Every exception is retried the same way.

    Args:
        operation: Zero-argument coroutine factory
        max_retries: Total number of attempts
        base_delay_ms: Delay after the first failed attempt
        sleep: Awaitable sleep taking seconds

    Returns:
        The operation's result
    """
    for attempt in range(max_retries):
        try:
            return await operation()
        except Exception as e:
            if attempt == max_retries - 1:
                raise
            delay_ms = base_delay_ms * (2 ** attempt)
            logger.warning(
                f"Attempt {attempt + 1}/{max_retries} failed: {e}. "
                f"Retrying in {delay_ms}ms"
            )
            await sleep(delay_ms / 1000)

    raise MaxRetriesReachedError("Max retries reached")
