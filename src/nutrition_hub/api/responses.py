"""Standard JSON response envelope."""

from dataclasses import asdict

from fastapi.responses import JSONResponse

from nutrition_hub.domain.foods import Food


def success_response(data: object, status_code: int = 200) -> JSONResponse:
    """Wrap data in a success envelope."""
    return JSONResponse(
        status_code=status_code, content={"data": data, "success": True}
    )


def error_response(message: str, code: str, status_code: int) -> JSONResponse:
    """Wrap an error in the failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "data": None,
            "success": False,
            "error": {"message": message, "code": code, "statusCode": status_code},
        },
    )


def serialize_food(food: Food) -> dict[str, object]:
    """Render a food with camelCase keys."""
    raw = asdict(food)
    return {
        "id": raw["id"],
        "name": raw["name"],
        "slug": raw["slug"],
        "servingSizeG": raw["serving_size_g"],
        "calories": raw["calories"],
        "proteinG": raw["protein_g"],
        "carbohydratesTotalG": raw["carbohydrates_total_g"],
        "fatTotalG": raw["fat_total_g"],
        "fatSaturatedG": raw["fat_saturated_g"],
        "fiberG": raw["fiber_g"],
        "sugarG": raw["sugar_g"],
        "sodiumMg": raw["sodium_mg"],
        "potassiumMg": raw["potassium_mg"],
        "cholesterolMg": raw["cholesterol_mg"],
        "dataSource": raw["data_source"],
        "createdAt": food.created_at.isoformat() if food.created_at else None,
        "updatedAt": food.updated_at.isoformat() if food.updated_at else None,
    }
