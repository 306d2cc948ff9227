"""Supabase repository for cached foods."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from nutrition_hub.domain.foods import SERVING_SIZE_G, Food
from nutrition_hub.services.food_cache import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed store of nutrition facts keyed by slug."""

    client: Client

    def get_by_slug(self, slug: str) -> Food | None:
        """Return the food stored under a slug, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("slug", slug)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def insert_if_absent(self, payload: dict[str, object]) -> None:
        """Insert a food row, ignoring conflicts on the unique slug."""
        self.client.table("foods").upsert(
            payload, on_conflict="slug", ignore_duplicates=True
        ).execute()

    def count_foods(self, data_source: str | None = None) -> int:
        """Count stored foods, optionally by data source."""
        query = self.client.table("foods").select("id", count="exact")
        if data_source is not None:
            query = query.eq("data_source", data_source)
        response = query.execute()
        return int(response.count or 0)


def _parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a foods row into a domain model."""
    return Food(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        slug=str(row["slug"]),
        serving_size_g=float(row.get("serving_size_g") or SERVING_SIZE_G),
        calories=float(row.get("calories") or 0.0),
        protein_g=float(row.get("protein_g") or 0.0),
        carbohydrates_total_g=float(row.get("carbohydrates_total_g") or 0.0),
        fat_total_g=float(row.get("fat_total_g") or 0.0),
        fat_saturated_g=float(row.get("fat_saturated_g") or 0.0),
        fiber_g=float(row.get("fiber_g") or 0.0),
        sugar_g=float(row.get("sugar_g") or 0.0),
        sodium_mg=float(row.get("sodium_mg") or 0.0),
        potassium_mg=float(row.get("potassium_mg") or 0.0),
        cholesterol_mg=float(row.get("cholesterol_mg") or 0.0),
        data_source=str(row.get("data_source", "")),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )
