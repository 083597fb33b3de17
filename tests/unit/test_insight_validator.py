from typing import Any

import pytest

from aigate.insights.models import InsightCategory
from aigate.insights.validator import validate_and_build_insights
from aigate.llm.exceptions import ResponseValidationError


def _item(**overrides: Any) -> dict[str, Any]:
    item: dict[str, Any] = {
        "category": "CELEBRATION",
        "title": "Great week",
        "description": "Employee A logged every day.",
        "suggestion": None,
        "relatedHours": 37,
        "relatedAmount": None,
    }
    item.update(overrides)
    return item


class TestValidateAndBuildInsights:
    def test_accepts_wrapped_list(self) -> None:
        insights = validate_and_build_insights({"insights": [_item()]})
        assert len(insights) == 1
        assert insights[0].category is InsightCategory.CELEBRATION
        assert insights[0].related_hours == 37.0

    def test_accepts_bare_list(self) -> None:
        insights = validate_and_build_insights([_item(), _item(category="HEADS_UP")])
        assert [i.category for i in insights] == [
            InsightCategory.CELEBRATION,
            InsightCategory.HEADS_UP,
        ]

    def test_empty_list_is_valid(self) -> None:
        assert validate_and_build_insights({"insights": []}) == []

    def test_empty_suggestion_becomes_none(self) -> None:
        [insight] = validate_and_build_insights([_item(suggestion="")])
        assert insight.suggestion is None

    def test_rejects_missing_list(self) -> None:
        with pytest.raises(ResponseValidationError, match="must be a list"):
            validate_and_build_insights({"items": []})

    def test_rejects_too_many(self) -> None:
        with pytest.raises(ResponseValidationError, match="Too many insights"):
            validate_and_build_insights([_item() for _ in range(21)])

    def test_rejects_unknown_category(self) -> None:
        with pytest.raises(ResponseValidationError, match="category"):
            validate_and_build_insights([_item(category="WARNING")])

    def test_rejects_blank_title(self) -> None:
        with pytest.raises(ResponseValidationError, match="'title'"):
            validate_and_build_insights([_item(title="")])

    def test_rejects_non_numeric_hours(self) -> None:
        with pytest.raises(ResponseValidationError, match="relatedHours"):
            validate_and_build_insights([_item(relatedHours="ten")])

    def test_rejects_boolean_amount(self) -> None:
        with pytest.raises(ResponseValidationError, match="relatedAmount"):
            validate_and_build_insights([_item(relatedAmount=True)])

    def test_rejects_non_object_item(self) -> None:
        with pytest.raises(ResponseValidationError, match="index 0"):
            validate_and_build_insights(["not an object"])
