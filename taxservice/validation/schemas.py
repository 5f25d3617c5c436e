"""
schemas.py — input-side Pydantic v2 data contracts.

Defines:
  - RawTaxInput       (field rules for the untrusted request body)
  - NormalizedInput   (fully-defaulted input — the only thing the tax engine consumes)
  - ValidationOutcome (result of validate(): is_valid + ordered error strings)
  - InputErrors       (failure variant of validate_and_normalize())

Wire names are camelCase (incomeFromSalary, section80C, isMetro ...);
Python attributes are snake_case.
"""
from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from taxservice.engine.constants import MAX_AMOUNT, SECTION_80C_LIMIT

# Non-negative, finite, bounded rupee amount
Amount = Annotated[float, Field(ge=0, le=MAX_AMOUNT)]

_AMOUNT_FIELDS = (
    "income_from_salary",
    "income_from_rent",
    "hra_component",
    "annual_rent",
    "section_80c",
)


# ---------------------------------------------------------------------------
# RawTaxInput — request body as the client sent it
# ---------------------------------------------------------------------------

class RawTaxInput(BaseModel):
    """
    Structural rules for POST /calculate-tax, checked before any defaulting.

    strict=True: no "1000" → 1000 or 1 → True coercion, and regime must be
    exactly "new" or "old" (case-sensitive). Every optional field accepts null.
    Unknown keys are ignored.

    Errors come back in field order; validator.py turns them into the
    client-facing messages.
    """
    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        strict=True,
        allow_inf_nan=False,
        alias_generator=to_camel,
    )

    income_from_salary: Optional[Amount] = Field(default=None, validate_default=True)
    income_from_rent: Optional[Amount] = None
    hra_component: Optional[Amount] = None
    annual_rent: Optional[Amount] = None
    section_80c: Optional[Amount] = Field(default=None, alias="section80C")
    regime: Optional[Literal["new", "old"]] = None
    is_metro: Optional[bool] = None

    @field_validator(*_AMOUNT_FIELDS, mode="before")
    @classmethod
    def json_number_only(cls, value: Any) -> Any:
        """bool is an int subclass in Python but not a JSON number."""
        if isinstance(value, bool):
            raise PydanticCustomError("number_type", "Input should be a valid number")
        if isinstance(value, int):
            try:
                return float(value)
            except OverflowError:
                raise PydanticCustomError(
                    "number_type", "Input should be a valid number"
                ) from None
        return value

    @field_validator("income_from_salary")
    @classmethod
    def salary_is_mandatory(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            raise PydanticCustomError("mandatory", "incomeFromSalary is mandatory")
        return value

    @field_validator("section_80c")
    @classmethod
    def within_80c_limit(cls, value: Optional[float]) -> Optional[float]:
        """Over-limit 80C is rejected here; normalize() only clamps as a backstop."""
        if value is not None and value > SECTION_80C_LIMIT:
            raise PydanticCustomError(
                "section_80c_limit", "section80C cannot exceed ₹1,50,000"
            )
        return value


# ---------------------------------------------------------------------------
# NormalizedInput — the engine's input contract
# ---------------------------------------------------------------------------

class NormalizedInput(BaseModel):
    """
    Validated, defaulted income and deduction inputs for one tax computation.

    All monetary values are annual, in INR, finite, non-negative and at most
    MAX_AMOUNT. section_80c is already clamped to the Section 80C limit.
    Frozen: a NormalizedInput is never modified after normalize() builds it.
    """
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        allow_inf_nan=False,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    income_from_salary: Amount
    income_from_rent: Amount = 0
    hra_component: Amount = 0        # HRA part of salary
    annual_rent: Amount = 0          # rent actually paid in the year
    section_80c: Amount = Field(default=0, alias="section80C")
    regime: Literal["new", "old"] = "new"
    is_metro: bool = False


# ---------------------------------------------------------------------------
# Validation results
# ---------------------------------------------------------------------------

class ValidationOutcome(BaseModel):
    """Output of validate(). is_valid is True iff errors is empty."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    is_valid: bool
    errors: List[str] = Field(default_factory=list)


class InputErrors(BaseModel):
    """Every rule the raw input broke, in field order."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    errors: List[str]


__all__ = [
    "Amount",
    "RawTaxInput",
    "NormalizedInput",
    "ValidationOutcome",
    "InputErrors",
]
