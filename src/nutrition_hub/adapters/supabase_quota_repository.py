"""Supabase repository for API usage records."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from nutrition_hub.services.quota import QuotaRepository


@dataclass
class SupabaseQuotaRepository(QuotaRepository):
    """Supabase-backed append-only API usage log."""

    client: Client

    def create_call(self, endpoint: str, created_at: datetime) -> None:
        """Append a usage record."""
        self.client.table("api_usage_logs").insert(
            {"api_endpoint": endpoint, "created_at": created_at.isoformat()}
        ).execute()

    def count_calls(self, start: datetime, end: datetime) -> int:
        """Count usage records created in [start, end)."""
        response = (
            self.client.table("api_usage_logs")
            .select("id", count="exact")
            .gte("created_at", start.isoformat())
            .lt("created_at", end.isoformat())
            .execute()
        )
        return int(response.count or 0)
