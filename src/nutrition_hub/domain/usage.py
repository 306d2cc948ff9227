"""Domain models for API quota and search metrics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuotaStatus:
    """Provider usage against the configured daily and monthly limits."""

    daily_calls: int
    monthly_calls: int
    daily_limit: int
    monthly_limit: int
    daily_percentage: float
    monthly_percentage: float
    is_daily_warning: bool
    is_monthly_warning: bool
    is_daily_quota_exceeded: bool
    is_monthly_quota_exceeded: bool


@dataclass(frozen=True)
class CacheMetrics:
    """Aggregated lookup performance."""

    total_lookups: int
    cache_hits: int
    cache_misses: int
    cache_hit_rate: float
    average_response_time_ms: float
