"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from calorie_tracker.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from calorie_tracker.adapters.supabase_measurement_repository import (
    SupabaseMeasurementRepository,
)
from calorie_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from calorie_tracker.config import Settings
from calorie_tracker.services.foods import FoodService
from calorie_tracker.services.meals import MealLogService
from calorie_tracker.services.measurements import MeasurementService
from calorie_tracker.services.stats import StatsService
from calorie_tracker.services.tokens import TokenService
from calorie_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    token_service: TokenService
    food_service: FoodService
    meal_log_service: MealLogService
    measurement_service: MeasurementService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    meal_log_repository = SupabaseMealLogRepository(supabase_client)
    measurement_repository = SupabaseMeasurementRepository(supabase_client)
    food_service = FoodService(food_repository)
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(
            repository=user_repository,
            bcrypt_rounds=resolved_settings.bcrypt_rounds,
        ),
        token_service=TokenService(
            secret=resolved_settings.jwt_secret,
            ttl_days=resolved_settings.token_ttl_days,
        ),
        food_service=food_service,
        meal_log_service=MealLogService(
            food_service=food_service,
            repository=meal_log_repository,
        ),
        measurement_service=MeasurementService(measurement_repository),
        stats_service=StatsService(
            meal_log_repository=meal_log_repository,
            measurement_repository=measurement_repository,
        ),
    )
