"""Validates the parsed contract-terms JSON and builds ContractTerms."""

from typing import Any

from aigate.contracts.models import ContractTerms
from aigate.llm.exceptions import ResponseValidationError


def validate_and_build_terms(data: Any) -> ContractTerms:
    """Raises:
    ResponseValidationError: on any validation failure.
    """
    if not isinstance(data, dict):
        raise ResponseValidationError("Contract terms response must be an object")
    return ContractTerms(
        max_hours=_optional_number(data, "maxHours"),
        max_budget=_optional_number(data, "maxBudget"),
        budget_currency=_optional_string(data, "budgetCurrency"),
        deadline=_optional_string(data, "deadline"),
        scope_description=_optional_string(data, "scopeDescription"),
        scope_keywords=_string_list(data, "scopeKeywords"),
        exclusions=_string_list(data, "exclusions"),
    )


def _optional_number(data: dict[str, Any], key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ResponseValidationError(f"'{key}' must be a number or null")
    return float(value)


def _optional_string(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ResponseValidationError(f"'{key}' must be a string or null")
    return value


def _string_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ResponseValidationError(f"'{key}' must be a list of strings")
    return list(value)
