"""Tests for container wiring."""

import asyncio

import pytest
from pydantic import ValidationError

from nutrition_hub.config import Settings
from nutrition_hub.containers import build_container
from nutrition_hub.services.retry import RetryingNutritionClient


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.food_cache_service is not None
    assert isinstance(
        container.food_cache_service.nutrition_client, RetryingNutritionClient
    )
    assert container.quota_service.monthly_limit == settings.quota_monthly_limit
    asyncio.run(container.close_resources())


def test_failed_provider_calls_reported_only_when_enabled(settings) -> None:
    enabled = build_container(
        settings.model_copy(update={"record_failed_provider_calls": True})
    )
    disabled = build_container(settings)

    enabled_client = enabled.food_cache_service.nutrition_client
    disabled_client = disabled.food_cache_service.nutrition_client
    assert enabled_client.on_failed_call == enabled.quota_service.record_call
    assert disabled_client.on_failed_call is None
    asyncio.run(enabled.close_resources())
    asyncio.run(disabled.close_resources())


@pytest.mark.parametrize(
    "overrides",
    [
        {"retry_delays_seconds": ()},
        {"retry_delays_seconds": (1.0, -2.0)},
        {"retry_max_attempts": 0},
    ],
)
def test_settings_reject_unusable_retry_schedule(overrides) -> None:
    with pytest.raises(ValidationError):
        Settings(
            supabase_url="https://example.supabase.co",
            supabase_service_key="service-key",
            **overrides,
        )
