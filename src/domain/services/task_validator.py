"""Domain service checking that a task payload carries every required field."""

from typing import Any, List, Mapping

from src.domain.entities.task import TASK_REQUIRED_FIELDS


def validate_task(payload: Any) -> List[str]:
    """
    Check that every required task field is present and non-empty.

    Args:
        payload: Decoded request body. Anything other than a mapping is
            reported as missing every field.

    Returns:
        Ordered ``"Missing <field>"`` messages; empty when the payload is valid.
    """
    if not isinstance(payload, Mapping):
        return [f"Missing {name}" for name in TASK_REQUIRED_FIELDS]

    errors: List[str] = []
    for name in TASK_REQUIRED_FIELDS:
        if _is_blank(payload.get(name)):
            errors.append(f"Missing {name}")
    return errors


def _is_blank(value: Any) -> bool:
    # Containers count as present, even when empty.
    if isinstance(value, (list, dict)):
        return False
    if isinstance(value, float) and value != value:
        return True
    return not value
