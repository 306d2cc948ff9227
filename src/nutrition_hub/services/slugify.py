"""Slug normalization shared by cache reads and writes."""

import re

_APOSTROPHES = re.compile(r"'+")
_UNDERSCORES = re.compile(r"_+")
_DISALLOWED = re.compile(r"[^a-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def slugify(text: str) -> str:
    r"""Convert text to a lowercase, URL-safe slug.

    >>> slugify("Chicken Breast")
    'chicken-breast'
    >>> slugify("Trader Joe's")
    'trader-joes'
    >>> slugify("chicken\u00a0breast")
    'chicken-breast'
    >>> slugify("Jalapeño")
    'jalapeo'
    """
    slug = text.lower().strip()
    slug = _APOSTROPHES.sub("", slug)
    slug = _UNDERSCORES.sub("-", slug)
    slug = _DISALLOWED.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")
