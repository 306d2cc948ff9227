"""Food domain models."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, Field

SERVING_SIZE_G = 100.0

SOURCE_SEED = "seed"
SOURCE_CALORIENINJAS = "calorieninjas"


@dataclass(frozen=True)
class Food:
    """Nutrition facts for a food, stored per 100 g and keyed by slug."""

    id: int
    name: str
    slug: str
    serving_size_g: float
    calories: float
    protein_g: float
    carbohydrates_total_g: float
    fat_total_g: float
    fat_saturated_g: float
    fiber_g: float
    sugar_g: float
    sodium_mg: float
    potassium_mg: float
    cholesterol_mg: float
    data_source: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class CacheSummary:
    """Size of the local food store."""

    total_foods: int
    from_api: int


class NutritionItem(BaseModel):
    """Single item returned by the CalorieNinjas nutrition endpoint."""

    name: str
    calories: float = Field(ge=0)
    serving_size_g: float = Field(default=SERVING_SIZE_G, ge=0)
    protein_g: float = Field(default=0.0, ge=0)
    carbohydrates_total_g: float = Field(default=0.0, ge=0)
    fat_total_g: float = Field(default=0.0, ge=0)
    fat_saturated_g: float = Field(default=0.0, ge=0)
    fiber_g: float = Field(default=0.0, ge=0)
    sugar_g: float = Field(default=0.0, ge=0)
    sodium_mg: float = Field(default=0.0, ge=0)
    potassium_mg: float = Field(default=0.0, ge=0)
    cholesterol_mg: float = Field(default=0.0, ge=0)


class NutritionResponse(BaseModel):
    """Body of a successful CalorieNinjas response."""

    items: list[NutritionItem]
