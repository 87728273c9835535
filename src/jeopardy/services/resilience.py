"""Retry with exponential backoff for outbound trivia API calls."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


# Exceptions that should trigger retry. Status errors are not retried.
RETRYABLE_EXCEPTIONS = (
    httpx.TransportError,
    asyncio.TimeoutError,
    ConnectionError,
)


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.warning(
        f"Attempt {retry_state.attempt_number} failed: {error!r}. "
        f"Retrying in {delay:.1f}s"
    )


async def with_retry(
    func: Callable[P, Awaitable[T]],
    *args: P.args,
    max_attempts: int = 3,
    min_wait: float = 0.5,
    max_wait: float = 5.0,
    **kwargs: P.kwargs,
) -> T:  # type: ignore[return-value]
    """Execute an async function with exponential backoff retry.

    Args:
        func: Async function to execute
        *args: Positional arguments for func
        max_attempts: Maximum attempts, including the first call
        min_wait: Minimum wait between retries (seconds)
        max_wait: Maximum wait between retries (seconds)
        **kwargs: Keyword arguments for func

    Returns:
        Result from func

    Raises:
        The last exception if all attempts fail, or any non-retryable exception immediately
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=min_wait, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
        before_sleep=_log_retry,
        reraise=True,
    ):
        with attempt:
            return await func(*args, **kwargs)
