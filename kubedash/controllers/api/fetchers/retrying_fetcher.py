"""Retrying fetcher - bounded linear-backoff retries around one HTTP call."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from kubedash.constants.limits import MAX_RETRY_ATTEMPTS
from kubedash.constants.timeouts import RETRY_BASE_DELAY
from kubedash.controllers.api.errors import (
    ExhaustedRetries,
    FetchError,
    HttpError,
    ParseError,
    TransportError,
)

logger = logging.getLogger(__name__)

RequestFactory = Callable[[], Awaitable[httpx.Response]]
SleepFunc = Callable[[float], Awaitable[Any]]


class RetryingFetcher:
    """Runs a request with bounded, linearly increasing retry delays.

    After failed attempt ``k`` (1-based) the fetcher awaits
    ``base_delay * k`` before trying again, so three attempts with a one
    second base wait 1s then 2s. The wait is an ``await`` on the event loop
    and never blocks other coroutines.
    """

    def __init__(
        self,
        *,
        max_attempts: int = MAX_RETRY_ATTEMPTS,
        base_delay: float = RETRY_BASE_DELAY,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """Initialize with default retry budget.

        Args:
            max_attempts: Total attempts per fetch, including the first one
            base_delay: Seconds multiplied by the attempt number between tries
            sleep: Awaitable sleep, replaced in tests
        """
        self._validate(max_attempts, base_delay)
        self._max_attempts = max_attempts
        self._base_delay = base_delay
        self._sleep = sleep
        self.retry_attempts = 0

    @staticmethod
    def _validate(max_attempts: int, base_delay: float) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if base_delay < 0:
            raise ValueError(f"base_delay must not be negative, got {base_delay}")

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def base_delay(self) -> float:
        return self._base_delay

    def backoff_delay(self, attempt: int, base_delay: float | None = None) -> float:
        """Delay to wait after failed attempt number ``attempt``."""
        base = self._base_delay if base_delay is None else base_delay
        return base * attempt

    async def fetch(
        self,
        request: RequestFactory,
        max_attempts: int | None = None,
        base_delay: float | None = None,
        *,
        description: str = "request",
    ) -> Any:
        """Perform the request until it yields parsed JSON or attempts run out.

        Args:
            request: Zero-argument callable producing the response coroutine.
                Called once per attempt.
            max_attempts: Override of the default attempt budget
            base_delay: Override of the default backoff base (seconds)
            description: Label used in log messages

        Returns:
            The decoded JSON body.

        Raises:
            ExhaustedRetries: When every attempt failed. ``last_error`` holds
                the final TransportError, HttpError or ParseError.
        """
        attempts_budget = self._max_attempts if max_attempts is None else max_attempts
        delay_base = self._base_delay if base_delay is None else base_delay
        self._validate(attempts_budget, delay_base)

        self.retry_attempts = 0
        last_error: FetchError | None = None
        for attempt in range(1, attempts_budget + 1):
            try:
                payload = await self._attempt(request)
            except FetchError as exc:
                last_error = exc
                self.retry_attempts = attempt
                if attempt < attempts_budget:
                    delay = self.backoff_delay(attempt, delay_base)
                    logger.warning(
                        "%s failed (attempt %s/%s): %s, retrying in %.1fs",
                        description,
                        attempt,
                        attempts_budget,
                        exc,
                        delay,
                    )
                    await self._sleep(delay)
                    continue
                break
            self.retry_attempts = 0
            return payload

        assert last_error is not None
        logger.error(
            "%s failed after %s attempts: %s", description, attempts_budget, last_error
        )
        raise ExhaustedRetries(last_error, attempts_budget) from last_error

    @staticmethod
    async def _attempt(request: RequestFactory) -> Any:
        """Run one attempt, translating every failure into a FetchError."""
        try:
            response = await request()
        except httpx.DecodingError as exc:
            # Body read but its Content-Encoding could not be undone
            raise ParseError(f"Undecodable response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            try:
                body = response.text
            except (UnicodeDecodeError, httpx.ResponseNotRead):
                body = ""
            raise HttpError(response.status_code, body)

        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(f"Malformed JSON body: {exc}") from exc


__all__ = [
    "RequestFactory",
    "RetryingFetcher",
    "SleepFunc",
]
