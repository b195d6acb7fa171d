"""
Retry helper for flaky upstream calls.

Lite servers and HTTP APIs drop requests under load; wrapping the call in
with_retry() re-runs it a bounded number of times with a constant delay.
The delay is an asyncio.sleep, so other tasks on the event loop keep running
while a call waits for its next attempt.

Usage:
    from ton_tx_utils.extraction.core.retry import with_retry

    txs = await with_retry(
        lambda: client.get_transactions(address, count=16),
        max_attempts=5,
        delay_ms=500,
    )
"""

import asyncio
import inspect
import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_DELAY_MS = 1000


async def with_retry(
    operation: Callable[[], T | Awaitable[T]],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay_ms: float = DEFAULT_DELAY_MS,
) -> T:
    """
    Execute an operation, retrying on failure with a constant delay.

    Attempts run strictly one after another. The first successful result is
    returned immediately. When every attempt fails, the exception raised by
    the final attempt propagates unchanged; earlier exceptions are logged and
    discarded.

    Args:
        operation: Zero-argument callable. If it returns an awaitable, the
            awaitable is awaited as part of the attempt, so coroutine
            functions are retried on their own failures too.
        max_attempts: Total number of attempts (>= 1)
        delay_ms: Pause between attempts in milliseconds (>= 0). Constant,
            no backoff growth.

    Returns:
        The operation's result

    Raises:
        ValueError: If max_attempts < 1 or delay_ms < 0
        Exception: Whatever the final attempt raised
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    if delay_ms < 0:
        raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")

    for attempt in range(1, max_attempts + 1):
        try:
            result = operation()
            if inspect.isawaitable(result):
                result = await result
            return result

        except Exception as e:
            if attempt == max_attempts:
                logger.error(f"Operation failed after {max_attempts} attempts: {e}")
                raise

            logger.warning(
                f"Attempt {attempt}/{max_attempts} failed: "
                f"{type(e).__name__}: {e}. Retrying in {delay_ms}ms..."
            )
            await asyncio.sleep(delay_ms / 1000)

    raise RuntimeError("Operation failed but no exception was captured")
