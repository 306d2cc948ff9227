"""Input validation for search queries."""

from nutrition_hub.domain.lookup import ValidationResult

MIN_QUERY_LENGTH = 2
MAX_QUERY_LENGTH = 200


def validate_search_query(query: str | None) -> ValidationResult:
    """Validate a raw search query and return its trimmed form."""
    trimmed = (query or "").strip()
    if not trimmed:
        return ValidationResult(
            is_valid=False,
            errors=["Search query is required"],
            normalized_query="",
        )

    errors: list[str] = []
    if len(trimmed) < MIN_QUERY_LENGTH:
        errors.append(f"Search query must be at least {MIN_QUERY_LENGTH} characters")
    if len(trimmed) > MAX_QUERY_LENGTH:
        errors.append(f"Search query must be at most {MAX_QUERY_LENGTH} characters")

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        normalized_query=trimmed,
    )
