"""Tests for food definitions."""

from uuid import uuid4

import pytest

from calorie_tracker.services.errors import FoodAlreadyExistsError
from calorie_tracker.services.foods import FoodService
from tests.conftest import InMemoryFoodRepository


def test_create_food_applies_defaults() -> None:
    service = FoodService(InMemoryFoodRepository())
    user_id = uuid4()

    food = service.create_food(user_id, "  Oatmeal ", 150)

    assert food.name == "Oatmeal"
    assert food.calories_per_unit == 150
    assert food.unit == "Number"
    assert food.default_quantity == 1


def test_create_food_rejects_duplicate_name_per_user() -> None:
    service = FoodService(InMemoryFoodRepository())
    user_id = uuid4()
    service.create_food(user_id, "Apple", 95)

    with pytest.raises(FoodAlreadyExistsError):
        service.create_food(user_id, "Apple", 80)
    assert service.create_food(uuid4(), "Apple", 80).calories_per_unit == 80


def test_list_foods_newest_first() -> None:
    service = FoodService(InMemoryFoodRepository())
    user_id = uuid4()
    service.create_food(user_id, "Apple", 95)
    service.create_food(user_id, "Bread", 80, unit="slice", default_quantity=2)

    names = [food.name for food in service.list_foods(user_id)]

    assert names == ["Bread", "Apple"]


def test_resolve_calories_multiplies_quantity() -> None:
    service = FoodService(InMemoryFoodRepository())
    user_id = uuid4()
    service.create_food(user_id, "Egg", 78)

    assert service.resolve_calories(user_id, "Egg", 3) == 234
    assert service.resolve_calories(user_id, "Unknown", 3) == 0
    assert service.resolve_calories(user_id, "Unknown", 3, fallback=120) == 120
