"""Food lookups served from the local store with an external API fallback."""

import logging
import time
from dataclasses import dataclass
from typing import Protocol

from nutrition_hub.adapters.calorieninjas_client import NutritionClient
from nutrition_hub.domain.errors import (
    ExternalApiError,
    QueryValidationError,
    QuotaExceededError,
)
from nutrition_hub.domain.foods import (
    SERVING_SIZE_G,
    SOURCE_CALORIENINJAS,
    CacheSummary,
    Food,
    NutritionItem,
)
from nutrition_hub.domain.lookup import LookupResult
from nutrition_hub.services.metrics import SearchMetricsService
from nutrition_hub.services.quota import QuotaService
from nutrition_hub.services.slugify import slugify
from nutrition_hub.services.validation import validate_search_query

_NUTRIENT_FIELDS = (
    "calories",
    "protein_g",
    "carbohydrates_total_g",
    "fat_total_g",
    "fat_saturated_g",
    "fiber_g",
    "sugar_g",
    "sodium_mg",
    "potassium_mg",
    "cholesterol_mg",
)

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for cached foods."""

    def get_by_slug(self, slug: str) -> Food | None:
        """Return the food stored under a slug, if present."""

    def insert_if_absent(self, payload: dict[str, object]) -> None:
        """Insert a food row; a row with the same slug wins silently."""

    def count_foods(self, data_source: str | None = None) -> int:
        """Count stored foods, optionally by data source."""


@dataclass
class FoodCacheService:
    """Resolves food names to nutrition facts.

    A lookup checks the store first. On a miss it asks the quota ledger for
    permission, calls the provider through the retry wrapper and stores the
    first returned item with insert-if-absent semantics, so concurrent lookups
    for the same new food converge on a single row.
    """

    repository: FoodRepository
    nutrition_client: NutritionClient
    quota_service: QuotaService
    metrics_service: SearchMetricsService

    async def lookup(self, raw_query: str | None) -> LookupResult:
        """Look up a food by name."""
        validation = validate_search_query(raw_query)
        if not validation.is_valid:
            raise QueryValidationError(validation.errors)
        query = validation.normalized_query
        slug = slugify(query)
        if not slug:
            raise QueryValidationError(
                ["Search query must contain letters or numbers"]
            )

        started = time.perf_counter()
        cached = self.repository.get_by_slug(slug)
        if cached is not None:
            self._record_metric(query, slug, started, cache_hit=True)
            return LookupResult.found(cached)

        if not self.quota_service.admit_call():
            _logger.warning(
                "API quota exceeded, cache miss not served: "
                "operation=lookup query=%s slug=%s",
                query,
                slug,
            )
            self._record_metric(query, slug, started, cache_hit=False)
            return LookupResult.unavailable(slug)

        try:
            response = await self.nutrition_client.fetch(query)
        except QuotaExceededError:
            self._record_metric(query, slug, started, cache_hit=False)
            return LookupResult.unavailable(slug)
        except ExternalApiError as exc:
            _logger.error(
                "Food lookup failed: operation=lookup query=%s slug=%s error=%s",
                query,
                slug,
                exc,
            )
            raise

        self.quota_service.record_call()
        if not response.items:
            self._record_metric(query, slug, started, cache_hit=False)
            return LookupResult.not_found(slug)

        food = self._store(response.items[0], slug)
        self._record_metric(query, slug, started, cache_hit=False)
        return LookupResult.found(food)

    def get_food(self, slug: str) -> Food | None:
        """Return a stored food without consulting the provider."""
        return self.repository.get_by_slug(slug)

    def cache_summary(self) -> CacheSummary:
        """Return how many foods are stored and how many came from the API."""
        return CacheSummary(
            total_foods=self.repository.count_foods(),
            from_api=self.repository.count_foods(data_source=SOURCE_CALORIENINJAS),
        )

    def _store(self, item: NutritionItem, slug: str) -> Food:
        """Insert the item if absent and return whichever row won."""
        self.repository.insert_if_absent(_to_payload(item, slug))
        stored = self.repository.get_by_slug(slug)
        if stored is None:
            raise RuntimeError(f"Failed to cache food entry: slug={slug}")
        return stored

    def _record_metric(
        self, query: str, slug: str, started: float, *, cache_hit: bool
    ) -> None:
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        self.metrics_service.record(query, slug, cache_hit, elapsed_ms)


def _to_payload(item: NutritionItem, slug: str) -> dict[str, object]:
    """Build a row for the item, scaled to a 100 g serving."""
    factor = 1.0
    if item.serving_size_g > 0 and item.serving_size_g != SERVING_SIZE_G:
        factor = SERVING_SIZE_G / item.serving_size_g
    payload: dict[str, object] = {
        "name": item.name,
        "slug": slug,
        "serving_size_g": SERVING_SIZE_G,
        "data_source": SOURCE_CALORIENINJAS,
    }
    for field_name in _NUTRIENT_FIELDS:
        value: float = getattr(item, field_name)
        payload[field_name] = round(value * factor, 2) if factor != 1.0 else value
    return payload
