"""Tests for measurement service."""

from datetime import UTC, datetime
from uuid import uuid4

from calorie_tracker.domain.measurements import MeasurementInput
from calorie_tracker.services.measurements import MeasurementService
from tests.conftest import InMemoryMeasurementRepository


def test_weights_and_heights_list_most_recent_first() -> None:
    service = MeasurementService(InMemoryMeasurementRepository())
    user_id = uuid4()
    service.add_weight(user_id, datetime(2024, 1, 1, tzinfo=UTC), 80)
    service.add_weight(user_id, datetime(2024, 1, 10, tzinfo=UTC), 78, notes="")
    service.add_height(user_id, datetime(2024, 1, 1, tzinfo=UTC), 180)

    weights = service.list_weights(user_id)

    assert [w.weight for w in weights] == [78, 80]
    assert weights[0].notes is None
    assert [h.height for h in service.list_heights(user_id)] == [180]
    assert service.list_weights(uuid4()) == []


def test_measurement_update_and_delete() -> None:
    service = MeasurementService(InMemoryMeasurementRepository())
    user_id = uuid4()
    created = service.add_measurement(
        user_id,
        MeasurementInput(
            date=datetime(2024, 1, 1, tzinfo=UTC),
            height=70,
            height_unit="inches",
            weight=80,
        ),
    )
    edit = MeasurementInput(
        date=datetime(2024, 1, 2, tzinfo=UTC),
        height=178,
        height_unit="cm",
        weight=79,
        notes="morning",
    )

    assert service.update_measurement(uuid4(), created.id, edit) is None
    updated = service.update_measurement(user_id, created.id, edit)
    assert updated is not None
    assert updated.height_unit == "cm"
    assert service.list_measurements(user_id) == [updated]
    assert service.delete_measurement(user_id, created.id) is True
    assert service.delete_measurement(user_id, created.id) is False
