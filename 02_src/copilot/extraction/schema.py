"""Structural validation of the dashboard payload.

Checks shape only: required keys and coarse kinds. Numeric ranges and
cross-field consistency (e.g. pie slices summing to 100) are left to the
prompt contract.
"""

from typing import Any

from ..models.analysis import CHART_TYPES, INSIGHT_TYPES

REQUIRED_LIST_KEYS = ("metrics", "charts", "insights", "recommendations")


class SchemaError(ValueError):
    """Payload does not match the dashboard shape."""


def _require_mapping(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise SchemaError(f"{where} must be an object, got {type(value).__name__}")
    return value


def _require_keys(item: dict, keys: tuple[str, ...], where: str) -> None:
    missing = [key for key in keys if key not in item]
    if missing:
        raise SchemaError(f"{where} is missing {', '.join(missing)}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_structured_payload(payload: Any) -> dict:
    """Return ``payload`` unchanged if it has the dashboard shape, else raise SchemaError."""
    payload = _require_mapping(payload, "payload")

    if not isinstance(payload.get("summary"), str):
        raise SchemaError("summary must be a string")

    for key in REQUIRED_LIST_KEYS:
        if not isinstance(payload.get(key), list):
            raise SchemaError(f"{key} must be an array")

    for index, metric in enumerate(payload["metrics"]):
        where = f"metrics[{index}]"
        _require_keys(_require_mapping(metric, where), ("label", "value"), where)
        if not isinstance(metric["label"], str):
            raise SchemaError(f"{where}.label must be a string")
        if not (isinstance(metric["value"], str) or _is_number(metric["value"])):
            raise SchemaError(f"{where}.value must be a string or number")
        if metric.get("change") is not None and not _is_number(metric["change"]):
            raise SchemaError(f"{where}.change must be a number")
        if metric.get("isPositive") is not None and not isinstance(metric["isPositive"], bool):
            raise SchemaError(f"{where}.isPositive must be a boolean")

    for index, chart in enumerate(payload["charts"]):
        where = f"charts[{index}]"
        _require_keys(_require_mapping(chart, where), ("type", "title", "data", "keys"), where)
        if chart["type"] not in CHART_TYPES:
            raise SchemaError(f"{where}.type must be one of {', '.join(CHART_TYPES)}")
        if not isinstance(chart["title"], str):
            raise SchemaError(f"{where}.title must be a string")
        if not isinstance(chart["data"], list) or not isinstance(chart["keys"], list):
            raise SchemaError(f"{where}.data and {where}.keys must be arrays")
        for row_index, row in enumerate(chart["data"]):
            _require_mapping(row, f"{where}.data[{row_index}]")
        if not all(isinstance(key, str) for key in chart["keys"]):
            raise SchemaError(f"{where}.keys must be strings")

    for index, insight in enumerate(payload["insights"]):
        where = f"insights[{index}]"
        _require_keys(_require_mapping(insight, where), ("type", "text"), where)
        if insight["type"] not in INSIGHT_TYPES:
            raise SchemaError(f"{where}.type must be one of {', '.join(INSIGHT_TYPES)}")
        if not isinstance(insight["text"], str):
            raise SchemaError(f"{where}.text must be a string")

    for index, recommendation in enumerate(payload["recommendations"]):
        if not isinstance(recommendation, str):
            raise SchemaError(f"recommendations[{index}] must be a string")

    return payload
