"""Validates the parsed insights JSON and builds GeneratedInsight records."""

from typing import Any

from aigate.insights.models import GeneratedInsight, InsightCategory
from aigate.llm.exceptions import ResponseValidationError

_MAX_INSIGHTS = 20
_VALID_CATEGORIES = frozenset(c.value for c in InsightCategory)


def validate_and_build_insights(data: Any) -> list[GeneratedInsight]:
    """Accepts a bare list or an object with an ``insights`` list.

    Raises:
        ResponseValidationError: on any validation failure.
    """
    if isinstance(data, dict):
        data = data.get("insights")
    if not isinstance(data, list):
        raise ResponseValidationError("'insights' must be a list")
    if len(data) > _MAX_INSIGHTS:
        raise ResponseValidationError(
            f"Too many insights: {len(data)} (max {_MAX_INSIGHTS})"
        )
    return [_build_insight(item, i) for i, item in enumerate(data)]


def _build_insight(raw: Any, index: int) -> GeneratedInsight:
    if not isinstance(raw, dict):
        raise ResponseValidationError(f"Insight at index {index} must be an object")
    category = raw.get("category")
    if category not in _VALID_CATEGORIES:
        raise ResponseValidationError(
            f"Insight at index {index}: 'category' must be one of "
            f"{sorted(_VALID_CATEGORIES)}, got {category!r}"
        )
    for key in ("title", "description"):
        value = raw.get(key)
        if not value or not isinstance(value, str):
            raise ResponseValidationError(
                f"Insight at index {index}: '{key}' must be a non-empty string"
            )
    suggestion = raw.get("suggestion")
    if suggestion is not None and not isinstance(suggestion, str):
        raise ResponseValidationError(
            f"Insight at index {index}: 'suggestion' must be a string or null"
        )
    return GeneratedInsight(
        category=InsightCategory(category),
        title=raw["title"],
        description=raw["description"],
        suggestion=suggestion or None,
        related_hours=_optional_number(raw, "relatedHours", index),
        related_amount=_optional_number(raw, "relatedAmount", index),
    )


def _optional_number(raw: dict[str, Any], key: str, index: int) -> float | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ResponseValidationError(
            f"Insight at index {index}: '{key}' must be a number or null"
        )
    return float(value)
