"""Error taxonomy for food lookups."""


class NutritionHubError(Exception):
    """Base class for application errors."""


class QueryValidationError(NutritionHubError):
    """Raised when a search query is rejected before any lookup work."""

    def __init__(self, reasons: list[str]) -> None:
        super().__init__("; ".join(reasons))
        self.reasons = reasons


class ConfigurationError(NutritionHubError):
    """Raised when required configuration is missing."""


class ExternalApiError(NutritionHubError):
    """Failure talking to the external nutrition provider."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def reached_provider(self) -> bool:
        """Whether the provider answered with an HTTP status."""
        return self.status_code is not None


class QuotaExceededError(ExternalApiError):
    """Provider rate limit (HTTP 429)."""


class ExternalServiceError(ExternalApiError):
    """Provider server error or transport failure; retryable."""

    def __init__(
        self, message: str, status_code: int | None = None, attempts: int = 1
    ) -> None:
        super().__init__(message, status_code)
        self.attempts = attempts


class RequestFailedError(ExternalApiError):
    """Provider client error or malformed response; not retryable."""
