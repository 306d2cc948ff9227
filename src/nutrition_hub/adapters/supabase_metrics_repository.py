"""Supabase repository for search metrics."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from nutrition_hub.services.metrics import SearchMetricsRepository

AVERAGE_RESPONSE_TIME_FUNCTION = "search_metrics_average_response_time"


@dataclass
class SupabaseSearchMetricsRepository(SearchMetricsRepository):
    """Supabase implementation for lookup metrics.

    Aggregates are computed by the database so results are not subject to the
    row cap PostgREST applies to plain selects.
    """

    client: Client

    def create_metric(  # noqa: PLR0913
        self,
        query: str,
        slug: str,
        cache_hit: bool,
        response_time_ms: int,
        created_at: datetime,
    ) -> None:
        """Append a lookup metric."""
        self.client.table("search_metrics").insert(
            {
                "query": query,
                "slug": slug,
                "cache_hit": cache_hit,
                "response_time_ms": response_time_ms,
                "created_at": created_at.isoformat(),
            }
        ).execute()

    def count_metrics(
        self, start: datetime, end: datetime, cache_hit: bool | None = None
    ) -> int:
        """Count metrics created in [start, end)."""
        query = (
            self.client.table("search_metrics")
            .select("id", count="exact")
            .gte("created_at", start.isoformat())
            .lt("created_at", end.isoformat())
        )
        if cache_hit is not None:
            query = query.eq("cache_hit", cache_hit)
        response = query.limit(1).execute()
        return int(response.count or 0)

    def average_response_time_ms(self, start: datetime, end: datetime) -> float:
        """Average response time over [start, end) via a SQL function."""
        response = self.client.rpc(
            AVERAGE_RESPONSE_TIME_FUNCTION,
            {"start_at": start.isoformat(), "end_at": end.isoformat()},
        ).execute()
        return float(response.data or 0.0)
