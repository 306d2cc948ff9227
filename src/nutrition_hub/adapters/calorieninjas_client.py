"""CalorieNinjas nutrition API client."""

import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Protocol

import httpx
from pydantic import ValidationError

from nutrition_hub.domain.errors import (
    ConfigurationError,
    ExternalServiceError,
    QuotaExceededError,
    RequestFailedError,
)
from nutrition_hub.domain.foods import NutritionResponse

_logger = logging.getLogger(__name__)


class NutritionClient(Protocol):
    """Interface for external nutrition lookups."""

    async def fetch(self, query: str) -> NutritionResponse:
        """Return nutrition items matching the query."""


@dataclass
class HttpxCalorieNinjasClient(NutritionClient):
    """HTTPX-backed CalorieNinjas client making a single call per fetch."""

    api_key: str | None
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0

    @classmethod
    def create(
        cls, api_key: str | None, base_url: str, timeout_seconds: float = 15.0
    ) -> "HttpxCalorieNinjasClient":
        """Create a client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch(self, query: str) -> NutritionResponse:
        """Fetch nutrition items and classify the provider response."""
        if not self.api_key:
            _logger.critical(
                "CalorieNinjas API key not configured: operation=fetch query=%s",
                query,
            )
            raise ConfigurationError("CalorieNinjas API key not configured")

        try:
            response = await self.http_client.get(
                f"{self.base_url}/nutrition",
                params={"query": query},
                headers={"X-Api-Key": self.api_key},
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            _logger.error(
                "CalorieNinjas request error: operation=fetch query=%s error=%s",
                query,
                exc,
            )
            raise ExternalServiceError("External API request error") from exc

        status_code = response.status_code
        if status_code == HTTPStatus.TOO_MANY_REQUESTS:
            _logger.warning(
                "CalorieNinjas quota exceeded: operation=fetch query=%s", query
            )
            raise QuotaExceededError("API quota exceeded", status_code)
        if status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
            _logger.error(
                "CalorieNinjas server error: operation=fetch query=%s status=%s",
                query,
                status_code,
            )
            raise ExternalServiceError("External API server error", status_code)
        if status_code >= HTTPStatus.BAD_REQUEST:
            _logger.error(
                "CalorieNinjas client error: operation=fetch query=%s status=%s",
                query,
                status_code,
            )
            raise RequestFailedError("API request failed", status_code)

        try:
            return NutritionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            _logger.error(
                "Invalid CalorieNinjas response: operation=fetch query=%s error=%s",
                query,
                exc,
            )
            raise RequestFailedError("Invalid API response", status_code) from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
