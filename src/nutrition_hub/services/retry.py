"""Bounded retry around the external nutrition client."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_hub.adapters.calorieninjas_client import NutritionClient
from nutrition_hub.domain.errors import (
    ExternalApiError,
    ExternalServiceError,
    QuotaExceededError,
)
from nutrition_hub.domain.foods import NutritionResponse

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_DELAYS_SECONDS = (1.0, 2.0, 4.0)

_logger = logging.getLogger(__name__)


@dataclass
class RetryingNutritionClient(NutritionClient):
    """Retries server errors with exponential backoff; other failures propagate.

    `on_failed_call` is invoked once for every attempt the provider answered
    with an error status, including attempts that precede a successful retry.
    Rate-limit responses and transport failures are not reported.
    """

    client: NutritionClient
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delays_seconds: tuple[float, ...] = DEFAULT_DELAYS_SECONDS
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    on_failed_call: Callable[[], None] | None = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if not self.delays_seconds or any(d < 0 for d in self.delays_seconds):
            raise ValueError("delays_seconds must be non-empty and non-negative")

    async def fetch(self, query: str) -> NutritionResponse:
        """Fetch with up to `max_attempts` attempts."""
        attempt = 0
        while True:
            try:
                return await self.client.fetch(query)
            except QuotaExceededError:
                raise
            except ExternalServiceError as exc:
                attempt += 1
                self._report_failed_call(exc)
                if attempt >= self.max_attempts:
                    _logger.error(
                        "Nutrition fetch failed after %s attempts: "
                        "operation=fetch query=%s status=%s",
                        attempt,
                        query,
                        exc.status_code,
                    )
                    raise ExternalServiceError(
                        f"External API failed after {attempt} attempts",
                        exc.status_code,
                        attempts=attempt,
                    ) from exc
                delay = self._delay_for(attempt)
                _logger.info(
                    "Retrying nutrition fetch: attempt=%s/%s delay_ms=%s query=%s",
                    attempt,
                    self.max_attempts,
                    int(delay * 1000),
                    query,
                )
                await self.sleep(delay)
            except ExternalApiError as exc:
                self._report_failed_call(exc)
                raise

    def _delay_for(self, attempt: int) -> float:
        index = min(attempt - 1, len(self.delays_seconds) - 1)
        return self.delays_seconds[index]

    def _report_failed_call(self, exc: ExternalApiError) -> None:
        if self.on_failed_call is not None and exc.reached_provider:
            self.on_failed_call()
