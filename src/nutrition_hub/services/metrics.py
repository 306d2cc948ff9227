"""Search metrics recording and aggregation."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from nutrition_hub.domain.usage import CacheMetrics

_logger = logging.getLogger(__name__)


class SearchMetricsRepository(Protocol):
    """Persistence interface for per-lookup metrics."""

    def create_metric(  # noqa: PLR0913
        self,
        query: str,
        slug: str,
        cache_hit: bool,
        response_time_ms: int,
        created_at: datetime,
    ) -> None:
        """Append a lookup metric."""

    def count_metrics(
        self, start: datetime, end: datetime, cache_hit: bool | None = None
    ) -> int:
        """Count metrics created in [start, end), optionally by cache outcome."""

    def average_response_time_ms(self, start: datetime, end: datetime) -> float:
        """Average response time of metrics created in [start, end); 0 if none."""


@dataclass
class SearchMetricsService:
    """Records lookups and reports today's cache performance."""

    repository: SearchMetricsRepository
    timezone_name: str = "UTC"

    def record(
        self, query: str, slug: str, cache_hit: bool, response_time_ms: int
    ) -> None:
        """Record a lookup; storage failures are logged, not raised."""
        try:
            self.repository.create_metric(
                query=query,
                slug=slug,
                cache_hit=cache_hit,
                response_time_ms=response_time_ms,
                created_at=datetime.now(tz=UTC),
            )
        except Exception:
            _logger.exception("Failed to record search metric: query=%s", query)

    def metrics_today(self) -> CacheMetrics:
        """Aggregate today's lookups in the store."""
        tz = ZoneInfo(self.timezone_name)
        start = datetime.now(tz=tz).replace(hour=0, minute=0, second=0, microsecond=0)
        end = start + timedelta(days=1)
        start, end = start.astimezone(UTC), end.astimezone(UTC)

        total = self.repository.count_metrics(start, end)
        if not total:
            return CacheMetrics(
                total_lookups=0,
                cache_hits=0,
                cache_misses=0,
                cache_hit_rate=0.0,
                average_response_time_ms=0.0,
            )
        hits = self.repository.count_metrics(start, end, cache_hit=True)
        return CacheMetrics(
            total_lookups=total,
            cache_hits=hits,
            cache_misses=total - hits,
            cache_hit_rate=hits / total * 100,
            average_response_time_ms=self.repository.average_response_time_ms(
                start, end
            ),
        )
