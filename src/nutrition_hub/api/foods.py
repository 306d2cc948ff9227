"""Food search endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse  # noqa: TC002

from nutrition_hub.api.responses import error_response, serialize_food, success_response
from nutrition_hub.domain.errors import (
    ConfigurationError,
    ExternalServiceError,
    QueryValidationError,
    RequestFailedError,
)
from nutrition_hub.domain.lookup import LookupStatus

if TYPE_CHECKING:
    from nutrition_hub.containers import AppContainer

router = APIRouter(prefix="/api/foods", tags=["foods"])

_logger = logging.getLogger(__name__)


@router.get("/search")
async def search_food(request: Request, q: str | None = None) -> JSONResponse:
    """Look up a food by name, falling back to the external API on a miss."""
    container: AppContainer = request.app.state.container
    try:
        result = await container.food_cache_service.lookup(q)
    except QueryValidationError as exc:
        return error_response(
            "; ".join(exc.reasons), "VALIDATION_ERROR", status.HTTP_400_BAD_REQUEST
        )
    except ExternalServiceError:
        return error_response(
            "External API server error",
            "EXTERNAL_API_ERROR",
            status.HTTP_502_BAD_GATEWAY,
        )
    except RequestFailedError:
        return error_response(
            "API request failed", "API_REQUEST_FAILED", status.HTTP_502_BAD_GATEWAY
        )
    except ConfigurationError:
        _logger.exception("Food search misconfigured: route=/api/foods/search")
        return error_response(
            "Internal server error",
            "INTERNAL_ERROR",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if result.status is LookupStatus.UNAVAILABLE:
        return error_response(
            "Search temporarily unavailable. Please try again later.",
            "API_QUOTA_EXCEEDED",
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    if result.status is LookupStatus.NOT_FOUND or result.food is None:
        return error_response(
            "Food not found", "FOOD_NOT_FOUND", status.HTTP_404_NOT_FOUND
        )
    return success_response(serialize_food(result.food))


@router.get("/{slug}")
async def get_food(slug: str, request: Request) -> JSONResponse:
    """Return a stored food by slug."""
    container: AppContainer = request.app.state.container
    food = container.food_cache_service.get_food(slug)
    if food is None:
        return error_response(
            "Food not found", "FOOD_NOT_FOUND", status.HTTP_404_NOT_FOUND
        )
    return success_response(serialize_food(food))
