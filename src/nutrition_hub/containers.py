"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_hub.adapters.calorieninjas_client import HttpxCalorieNinjasClient
from nutrition_hub.adapters.supabase_food_repository import SupabaseFoodRepository
from nutrition_hub.adapters.supabase_metrics_repository import (
    SupabaseSearchMetricsRepository,
)
from nutrition_hub.adapters.supabase_quota_repository import SupabaseQuotaRepository
from nutrition_hub.config import Settings
from nutrition_hub.services.food_cache import FoodCacheService
from nutrition_hub.services.metrics import SearchMetricsService
from nutrition_hub.services.quota import QuotaService
from nutrition_hub.services.retry import RetryingNutritionClient


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_cache_service: FoodCacheService
    quota_service: QuotaService
    metrics_service: SearchMetricsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    quota_service = QuotaService(
        repository=SupabaseQuotaRepository(supabase_client),
        daily_limit=resolved_settings.quota_daily_limit,
        monthly_limit=resolved_settings.quota_monthly_limit,
        warning_threshold=resolved_settings.quota_warning_threshold,
        timezone_name=resolved_settings.quota_timezone,
    )
    metrics_service = SearchMetricsService(
        repository=SupabaseSearchMetricsRepository(supabase_client),
        timezone_name=resolved_settings.quota_timezone,
    )
    calorieninjas_client = HttpxCalorieNinjasClient.create(
        api_key=resolved_settings.calorieninjas_api_key,
        base_url=resolved_settings.calorieninjas_base_url,
        timeout_seconds=resolved_settings.calorieninjas_timeout_seconds,
    )
    food_cache_service = FoodCacheService(
        repository=SupabaseFoodRepository(supabase_client),
        nutrition_client=RetryingNutritionClient(
            client=calorieninjas_client,
            max_attempts=resolved_settings.retry_max_attempts,
            delays_seconds=resolved_settings.retry_delays_seconds,
            on_failed_call=(
                quota_service.record_call
                if resolved_settings.record_failed_provider_calls
                else None
            ),
        ),
        quota_service=quota_service,
        metrics_service=metrics_service,
    )

    async def close_resources() -> None:
        await calorieninjas_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_cache_service=food_cache_service,
        quota_service=quota_service,
        metrics_service=metrics_service,
        close_resources=close_resources,
    )
