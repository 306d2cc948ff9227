"""Quota ledger for external nutrition API calls."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from nutrition_hub.domain.usage import QuotaStatus

DECEMBER = 12
DEFAULT_ENDPOINT = "calorieninjas"

_logger = logging.getLogger(__name__)


class QuotaRepository(Protocol):
    """Persistence interface for API usage records."""

    def create_call(self, endpoint: str, created_at: datetime) -> None:
        """Append a usage record."""

    def count_calls(self, start: datetime, end: datetime) -> int:
        """Count usage records created in [start, end)."""


@dataclass
class QuotaService:
    """Tracks provider calls against daily and monthly limits."""

    repository: QuotaRepository
    daily_limit: int = 1000
    monthly_limit: int = 10000
    warning_threshold: float = 0.8
    timezone_name: str = "UTC"

    def record_call(self, endpoint: str = DEFAULT_ENDPOINT, count: int = 1) -> None:
        """Record provider calls and warn when the monthly quota runs low."""
        try:
            now = datetime.now(tz=UTC)
            for _ in range(count):
                self.repository.create_call(endpoint, now)
            status = self.status()
        except Exception:
            _logger.exception("Failed to record API call: endpoint=%s", endpoint)
            return

        if status.is_monthly_quota_exceeded:
            _logger.error(
                "API quota exceeded: endpoint=%s monthly_calls=%s monthly_limit=%s",
                endpoint,
                status.monthly_calls,
                status.monthly_limit,
            )
        elif status.is_monthly_warning:
            _logger.warning(
                "API quota at %.1f%%: endpoint=%s monthly_calls=%s",
                status.monthly_percentage * 100,
                endpoint,
                status.monthly_calls,
            )

    def status(self) -> QuotaStatus:
        """Return usage for today and the current calendar month."""
        tz = ZoneInfo(self.timezone_name)
        now = datetime.now(tz=tz)
        day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        day_end = day_start + timedelta(days=1)
        month_start = day_start.replace(day=1)
        if month_start.month == DECEMBER:
            month_end = month_start.replace(year=month_start.year + 1, month=1)
        else:
            month_end = month_start.replace(month=month_start.month + 1)

        daily_calls = self.repository.count_calls(
            day_start.astimezone(UTC), day_end.astimezone(UTC)
        )
        monthly_calls = self.repository.count_calls(
            month_start.astimezone(UTC), month_end.astimezone(UTC)
        )
        return QuotaStatus(
            daily_calls=daily_calls,
            monthly_calls=monthly_calls,
            daily_limit=self.daily_limit,
            monthly_limit=self.monthly_limit,
            daily_percentage=daily_calls / self.daily_limit,
            monthly_percentage=monthly_calls / self.monthly_limit,
            is_daily_warning=daily_calls >= self.daily_limit * self.warning_threshold,
            is_monthly_warning=(
                monthly_calls >= self.monthly_limit * self.warning_threshold
            ),
            is_daily_quota_exceeded=daily_calls >= self.daily_limit,
            is_monthly_quota_exceeded=monthly_calls >= self.monthly_limit,
        )

    def admit_call(self) -> bool:
        """Return whether an outbound call is allowed.

        Only the monthly ceiling blocks; the daily window is informational.
        """
        return not self.status().is_monthly_quota_exceeded
