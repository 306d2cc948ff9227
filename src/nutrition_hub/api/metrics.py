"""Cache and quota metrics endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse  # noqa: TC002

from nutrition_hub.api.responses import success_response

if TYPE_CHECKING:
    from nutrition_hub.containers import AppContainer

router = APIRouter(prefix="/api/metrics", tags=["metrics"])


@router.get("/cache")
async def cache_metrics(request: Request) -> JSONResponse:
    """Return cache size, today's lookup performance and quota usage."""
    container: AppContainer = request.app.state.container
    summary = container.food_cache_service.cache_summary()
    metrics = container.metrics_service.metrics_today()
    quota = container.quota_service.status()
    return success_response(
        {
            "cache": {
                "totalFoods": summary.total_foods,
                "fromApi": summary.from_api,
            },
            "performance": {
                "today": {
                    "cacheHits": metrics.cache_hits,
                    "cacheMisses": metrics.cache_misses,
                    "totalLookups": metrics.total_lookups,
                    "cacheHitRate": f"{metrics.cache_hit_rate:.2f}%",
                    "averageResponseTimeMs": round(metrics.average_response_time_ms),
                }
            },
            "quota": {
                "dailyCalls": quota.daily_calls,
                "dailyLimit": quota.daily_limit,
                "dailyPercentage": f"{quota.daily_percentage * 100:.1f}%",
                "monthlyCalls": quota.monthly_calls,
                "monthlyLimit": quota.monthly_limit,
                "monthlyPercentage": f"{quota.monthly_percentage * 100:.1f}%",
                "isDailyWarning": quota.is_daily_warning,
                "isMonthlyWarning": quota.is_monthly_warning,
                "isDailyQuotaExceeded": quota.is_daily_quota_exceeded,
                "isMonthlyQuotaExceeded": quota.is_monthly_quota_exceeded,
            },
        }
    )
