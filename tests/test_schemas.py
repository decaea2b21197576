import pytest
from pydantic import ValidationError

from hr_requests.schemas import RequestCreateSchema, RequestUpdateSchema


def test_create_splits_record_fields_from_items_and_employee():
    payload = RequestCreateSchema.model_validate(
        {"type": " equipment ", "employeeId": 5, "items": [{"name": "laptop"}, {"name": "bag", "quantity": 2}]}
    )

    assert payload.employee_id == 5
    assert [(i.name, i.quantity) for i in payload.items] == [("laptop", 1), ("bag", 2)]
    assert payload.record_fields() == {"type": "equipment"}


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"type": ""},
        {"type": "x", "items": [{"quantity": 1}]},
        {"type": "x", "items": [{"name": "a", "quantity": 0}]},
    ],
)
def test_create_rejects_broken_payloads(body):
    with pytest.raises(ValidationError):
        RequestCreateSchema.model_validate(body)


def test_update_only_applies_supplied_keys():
    payload = RequestUpdateSchema.model_validate({"status": "Approved", "description": None})

    assert payload.record_fields() == {"status": "Approved", "description": None}
    assert payload.replaces_items is False


def test_update_items_flag_and_employee_alias():
    payload = RequestUpdateSchema.model_validate({"items": [], "employeeId": 3})

    assert payload.replaces_items is True
    assert payload.items == []
    assert payload.record_fields() == {"employee_id": 3}


@pytest.mark.parametrize("body", [{"type": None}, {"status": None}, {"items": None}])
def test_update_rejects_null_for_required_columns(body):
    with pytest.raises(ValidationError):
        RequestUpdateSchema.model_validate(body)


def test_unknown_keys_are_dropped():
    payload = RequestCreateSchema.model_validate(
        {"type": "equipment", "priority": "high", "items": [{"name": "laptop", "serial": "X1"}]}
    )

    assert payload.record_fields() == {"type": "equipment"}
    assert payload.items[0].model_dump() == {"name": "laptop", "quantity": 1}

    update = RequestUpdateSchema.model_validate({"status": "Approved", "approver": "boss"})
    assert update.record_fields() == {"status": "Approved"}


@pytest.mark.parametrize("value", ["abc", 0, -5, 1.5, {"x": 1}])
def test_create_accepts_any_employee_id_value(value):
    payload = RequestCreateSchema.model_validate({"type": "x", "employeeId": value})
    assert payload.employee_id == value
