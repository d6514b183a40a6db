"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from calorie_tracker.api.app import create_app
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.foods import FoodDefinition
from calorie_tracker.domain.meals import MealLogInput, MealLogRecord
from calorie_tracker.domain.measurements import (
    HeightRecord,
    MeasurementInput,
    MeasurementRecord,
    WeightRecord,
)
from calorie_tracker.domain.models import UserRecord
from calorie_tracker.services.foods import FoodRepository, FoodService
from calorie_tracker.services.meals import MealLogRepository, MealLogService
from calorie_tracker.services.measurements import (
    MeasurementRepository,
    MeasurementService,
)
from calorie_tracker.services.stats import StatsService
from calorie_tracker.services.tokens import TokenService
from calorie_tracker.services.users import UserRepository, UserService

_OLDEST = datetime.min.replace(tzinfo=UTC)


def _newest_first(records: list) -> list:
    return sorted(
        records,
        key=lambda record: record.date or _OLDEST,
        reverse=True,
    )


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_email(self, email: str) -> UserRecord | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def create_user(self, name: str, email: str, password_hash: str) -> UserRecord:
        user = UserRecord(
            id=uuid4(), name=name, email=email, password_hash=password_hash
        )
        self.users[user.id] = user
        return user


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: list[FoodDefinition] = field(default_factory=list)

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> FoodDefinition:
        food = FoodDefinition(
            id=uuid4(),
            user_id=user_id,
            name=str(payload["name"]),
            calories_per_unit=float(payload["calories"]),
            unit=str(payload.get("unit", "Number")),
            default_quantity=int(payload.get("qty", 1)),
            created_at=datetime.now(tz=UTC),
        )
        self.foods.insert(0, food)
        return food

    def list_foods(self, user_id: UUID) -> list[FoodDefinition]:
        return [food for food in self.foods if food.user_id == user_id]

    def get_by_name(self, user_id: UUID, name: str) -> FoodDefinition | None:
        for food in self.foods:
            if food.user_id == user_id and food.name == name:
                return food
        return None


@dataclass
class InMemoryMealLogRepository(MealLogRepository):
    """In-memory meal log repository for tests."""

    logs: list[MealLogRecord] = field(default_factory=list)

    def create_meal_log(self, user_id: UUID, entry: MealLogInput) -> MealLogRecord:
        log = MealLogRecord(
            id=uuid4(),
            user_id=user_id,
            date=entry.date,
            type=entry.type,
            meal_name=entry.meal_name,
            quantity=entry.quantity,
            calories=float(entry.calories or 0.0),
            notes=entry.notes,
        )
        self.logs.append(log)
        return log

    def list_meal_logs(self, user_id: UUID) -> list[MealLogRecord]:
        return _newest_first([log for log in self.logs if log.user_id == user_id])

    def update_meal_log(
        self, user_id: UUID, meal_log_id: UUID, entry: MealLogInput
    ) -> bool:
        for index, log in enumerate(self.logs):
            if log.id == meal_log_id and log.user_id == user_id:
                self.logs[index] = replace(
                    log,
                    date=entry.date,
                    type=entry.type,
                    meal_name=entry.meal_name,
                    quantity=entry.quantity,
                    calories=float(entry.calories or 0.0),
                    notes=entry.notes,
                )
                return True
        return False

    def delete_meal_log(self, user_id: UUID, meal_log_id: UUID) -> bool:
        for log in self.logs:
            if log.id == meal_log_id and log.user_id == user_id:
                self.logs.remove(log)
                return True
        return False


@dataclass
class InMemoryMeasurementRepository(MeasurementRepository):
    """In-memory measurement repository for tests."""

    weights: list[WeightRecord] = field(default_factory=list)
    heights: list[HeightRecord] = field(default_factory=list)
    measurements: list[MeasurementRecord] = field(default_factory=list)

    def create_weight(
        self, user_id: UUID, date: datetime, weight: float, notes: str | None
    ) -> WeightRecord:
        record = WeightRecord(
            id=uuid4(), user_id=user_id, date=date, weight=weight, notes=notes
        )
        self.weights.append(record)
        return record

    def list_weights(self, user_id: UUID) -> list[WeightRecord]:
        return _newest_first([w for w in self.weights if w.user_id == user_id])

    def create_height(
        self, user_id: UUID, date: datetime, height: float, notes: str | None
    ) -> HeightRecord:
        record = HeightRecord(
            id=uuid4(), user_id=user_id, date=date, height=height, notes=notes
        )
        self.heights.append(record)
        return record

    def list_heights(self, user_id: UUID) -> list[HeightRecord]:
        return _newest_first([h for h in self.heights if h.user_id == user_id])

    def create_measurement(
        self, user_id: UUID, entry: MeasurementInput
    ) -> MeasurementRecord:
        record = MeasurementRecord(
            id=uuid4(),
            user_id=user_id,
            date=entry.date,
            height=entry.height,
            height_unit=entry.height_unit,
            weight=entry.weight,
            notes=entry.notes,
        )
        self.measurements.append(record)
        return record

    def list_measurements(self, user_id: UUID) -> list[MeasurementRecord]:
        return _newest_first(
            [m for m in self.measurements if m.user_id == user_id]
        )

    def update_measurement(
        self, user_id: UUID, measurement_id: UUID, entry: MeasurementInput
    ) -> MeasurementRecord | None:
        for index, record in enumerate(self.measurements):
            if record.id == measurement_id and record.user_id == user_id:
                updated = replace(
                    record,
                    date=entry.date,
                    height=entry.height,
                    height_unit=entry.height_unit,
                    weight=entry.weight,
                    notes=entry.notes,
                )
                self.measurements[index] = updated
                return updated
        return None

    def delete_measurement(self, user_id: UUID, measurement_id: UUID) -> bool:
        for record in self.measurements:
            if record.id == measurement_id and record.user_id == user_id:
                self.measurements.remove(record)
                return True
        return False


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        jwt_secret="test-secret-with-enough-length-for-hs256",
        bcrypt_rounds=4,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def meal_log_repository() -> InMemoryMealLogRepository:
    return InMemoryMealLogRepository()


@pytest.fixture
def measurement_repository() -> InMemoryMeasurementRepository:
    return InMemoryMeasurementRepository()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    food_repository: InMemoryFoodRepository,
    meal_log_repository: InMemoryMealLogRepository,
    measurement_repository: InMemoryMeasurementRepository,
) -> AppContainer:
    food_service = FoodService(food_repository)
    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository, bcrypt_rounds=settings.bcrypt_rounds),
        token_service=TokenService(secret=settings.jwt_secret),
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


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    response = client.post(
        "/api/auth/signup",
        json={"name": "Ada", "email": "ada@example.com", "password": "secret"},
    )
    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}
