"""
Input validator and normalizer for the tax endpoints.

Validation runs on the raw JSON body BEFORE any defaulting or case-folding.
It collects every violation in a single pass so callers can fix all problems
in one round trip. Only the "body is not an object" case short-circuits.

Rules (field rules live on RawTaxInput):
  1. incomeFromSalary                        mandatory, number, >= 0
  2. incomeFromRent / hraComponent / annualRent   optional, number, >= 0
  3. section80C                              optional, number, >= 0, <= 1,50,000
  4. regime                                  optional, exactly "new" or "old"
  5. isMetro                                 optional, JSON boolean

"Number" means a finite JSON number that is not a bool. Every amount is also
capped at MAX_AMOUNT.

regime is checked case-sensitively even though normalize() lower-cases it;
"NEW" is rejected here.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from taxservice.engine.constants import DEFAULT_REGIME, SECTION_80C_LIMIT
from taxservice.validation.schemas import (
    InputErrors,
    NormalizedInput,
    RawTaxInput,
    ValidationOutcome,
)

logger = logging.getLogger(__name__)

_NOT_AN_OBJECT = "Invalid input: must be an object"
_BAD_REGIME = 'regime must be either "new" or "old"'
_BAD_IS_METRO = "isMetro must be a boolean (true or false)"

# Error types raised by RawTaxInput validators with the final message
_CUSTOM_ERROR_TYPES = frozenset({"mandatory", "section_80c_limit"})


def _error_message(error: ErrorDetails) -> str:
    """Client-facing message for one Pydantic error on a RawTaxInput field."""
    field = str(error["loc"][0])
    error_type = error["type"]

    if error_type in _CUSTOM_ERROR_TYPES:
        return error["msg"]
    if field == "regime":
        return _BAD_REGIME
    if field == "isMetro":
        return _BAD_IS_METRO
    if error_type == "greater_than_equal":
        return f"{field} cannot be negative"
    if error_type == "less_than_equal":
        return f"{field} is too large"
    return f"{field} must be a valid number"


def validate(raw: Any) -> ValidationOutcome:
    """
    Check a raw request body against every field rule.

    Args:
        raw: Parsed JSON body. Anything that is not a dict fails immediately.

    Returns:
        ValidationOutcome with all violations, in field order.
    """
    if not isinstance(raw, dict):
        return ValidationOutcome(is_valid=False, errors=[_NOT_AN_OBJECT])

    try:
        RawTaxInput.model_validate(raw)
    except ValidationError as exc:
        errors = [_error_message(error) for error in exc.errors()]
        # Count only, never income values
        logger.info("Input validation failed: %d violation(s)", len(errors))
        return ValidationOutcome(is_valid=False, errors=errors)

    return ValidationOutcome(is_valid=True)


def normalize(raw: Mapping[str, Any]) -> NormalizedInput:
    """
    Fill defaults on an input that already passed validate().

    Missing or null amounts become 0, section80C is clamped to the 80C limit,
    regime defaults to "new" and is lower-cased, isMetro is True only for a
    literal boolean True.

    Calling this on unvalidated input is a programming error; go through
    validate_and_normalize() instead. Pydantic will still refuse to build a
    NormalizedInput from values that break its constraints.
    """
    section_80c = raw.get("section80C") or 0
    return NormalizedInput(
        income_from_salary=raw["incomeFromSalary"],
        income_from_rent=raw.get("incomeFromRent") or 0,
        hra_component=raw.get("hraComponent") or 0,
        annual_rent=raw.get("annualRent") or 0,
        section_80c=min(section_80c, SECTION_80C_LIMIT),
        regime=(raw.get("regime") or DEFAULT_REGIME).lower(),
        is_metro=raw.get("isMetro") is True,
    )


def validate_and_normalize(raw: Any) -> Union[NormalizedInput, InputErrors]:
    """
    Parse a raw request body into either a NormalizedInput or InputErrors.

    Never returns a partially-valid object: the caller branches on the type.
    """
    outcome = validate(raw)
    if not outcome.is_valid:
        return InputErrors(errors=outcome.errors)
    return normalize(raw)


__all__ = [
    "validate",
    "normalize",
    "validate_and_normalize",
]
