import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from status_checker.logging.logger import Log
from status_checker.processor.exceptions import QueryError

T = TypeVar("T")


class RetryPolicy:
    """Retries an async operation with exponential backoff.

    Delays grow from `base_delay_seconds` and double per attempt
    (1s, 2s, 4s, ... capped at `max_delay_seconds`).
    """

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay_seconds: float = 1.0,
        max_delay_seconds: float = 30.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.base_delay_seconds = base_delay_seconds
        self.max_delay_seconds = max_delay_seconds
        self._sleep = sleep

    async def call(self, operation: Callable[[], Awaitable[T]], *, label: str) -> T:
        """Run `operation` until it succeeds or attempts run out.

        Raises:
            QueryError: with the last error's message once attempts are exhausted.
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(
                multiplier=self.base_delay_seconds,
                min=self.base_delay_seconds,
                max=self.max_delay_seconds,
            ),
            retry=retry_if_exception_type(Exception),
            before=self._log_attempt(label),
            before_sleep=self._log_failure(label),
            sleep=self._sleep,
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    result = await operation()
        except Exception as exc:
            Log.error(f"{label}: giving up after {self.max_attempts} attempts: {exc}")
            raise QueryError(str(exc)) from exc
        return result

    def _log_attempt(self, label: str) -> Callable[[RetryCallState], None]:
        def before(state: RetryCallState) -> None:
            Log.info(f"{label}: attempt {state.attempt_number}/{self.max_attempts}")

        return before

    def _log_failure(self, label: str) -> Callable[[RetryCallState], None]:
        def before_sleep(state: RetryCallState) -> None:
            exc = state.outcome.exception() if state.outcome else None
            delay = state.next_action.sleep if state.next_action else 0.0
            Log.warning(
                f"{label}: attempt {state.attempt_number} failed: {exc}; "
                f"retrying in {delay:.1f}s"
            )

        return before_sleep
