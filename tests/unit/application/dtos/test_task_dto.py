from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from src.application.dtos.task_dto import TaskResponseDTO, TaskWriteDTO
from tests.conftest import DEVICE_ID


def test_write_dto_casts_payload(task_payload) -> None:
    dto = TaskWriteDTO.model_validate(
        {**task_payload, "description": "  check valve  ", "criticality": 3}
    )

    assert dto.description == "check valve"
    assert dto.criticality == "3"
    assert dto.record_time == datetime(2023, 1, 1, tzinfo=timezone.utc)


def test_write_dto_ignores_unknown_fields(task_payload) -> None:
    dto = TaskWriteDTO.model_validate({**task_payload, "owner": "someone"})

    assert "owner" not in dto.model_dump()


def test_write_dto_normalizes_offsets_to_utc(task_payload) -> None:
    dto = TaskWriteDTO.model_validate(
        {**task_payload, "recordTime": "2023-01-01T02:00:00+02:00"}
    )

    assert dto.record_time == datetime(2023, 1, 1, tzinfo=timezone.utc)
    assert dto.record_time.tzinfo == timezone.utc


def test_write_dto_treats_naive_dates_as_utc(task_payload) -> None:
    dto = TaskWriteDTO.model_validate(
        {**task_payload, "recordTime": "2023-01-01T00:00:00"}
    )

    assert dto.record_time.tzinfo == timezone.utc


def test_write_dto_rejects_unparseable_date(task_payload) -> None:
    with pytest.raises(ValidationError):
        TaskWriteDTO.model_validate({**task_payload, "recordTime": "yesterday"})


def test_write_dto_rejects_blank_strings(task_payload) -> None:
    with pytest.raises(ValidationError):
        TaskWriteDTO.model_validate({**task_payload, "state": "   "})


def test_write_dto_builds_entity_without_id(task_payload) -> None:
    task = TaskWriteDTO.model_validate(task_payload).to_entity()

    assert task.id is None
    assert task.target == DEVICE_ID


def test_response_dto_uses_wire_names(sample_task) -> None:
    document = TaskResponseDTO.from_entity(sample_task).to_document()

    assert document == {
        "_id": "64b7f3c2a1e4d5f6a7b8c9d1",
        "criticality": "high",
        "target": DEVICE_ID,
        "recordTime": "2023-01-01T00:00:00Z",
        "description": "check valve",
        "state": "open",
    }


def test_write_dto_truncates_to_milliseconds(task_payload) -> None:
    dto = TaskWriteDTO.model_validate(
        {**task_payload, "recordTime": "2023-01-01T00:00:00.123456Z"}
    )

    assert dto.record_time.microsecond == 123000
