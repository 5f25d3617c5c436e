"""
schemas.py — tax engine Pydantic v2 output contracts.

Defines:
  - DeductionBreakdown  (deductions actually applied, after caps)
  - TaxResult           (single-regime computation — main engine output)
  - RegimeComparison    (both regimes side by side with a recommendation)

Serialise with model_dump(by_alias=True) to get the camelCase wire shape.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = ConfigDict(
    extra="forbid",
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
)


# ---------------------------------------------------------------------------
# DeductionBreakdown — itemised deductions applied in one regime
# ---------------------------------------------------------------------------

class DeductionBreakdown(BaseModel):
    """
    All values are the deduction APPLIED, not the raw input.
    New regime: only standard_deduction is non-zero.
    standard_deduction + hra_exemption + section_80c == TaxResult.total_deductions
    """
    model_config = _WIRE_CONFIG

    standard_deduction: float = 0      # ₹75K new / ₹50K old
    hra_exemption: float = 0           # min-of-3 rule, old regime only
    section_80c: float = Field(default=0, alias="section80C")   # cap ₹1,50,000, old regime only


# ---------------------------------------------------------------------------
# TaxResult — full tax calculation for one regime
# ---------------------------------------------------------------------------

class TaxResult(BaseModel):
    """
    Complete tax computation for the requested regime.

    Computation sequence:
      1. gross_income = salary + rental income
      2. total_deductions = standard + HRA exemption + 80C (last two old regime only)
      3. taxable_income = max(0, gross_income - total_deductions)
      4. income_tax = progressive slab tax
      5. cess = 4% of income_tax
      6. total_tax_liability = income_tax + cess

    income_tax, cess and total_tax_liability are rounded to paise; the total is
    rounded from the unrounded sum, so it can differ by 0.01 from
    income_tax + cess.
    """
    model_config = _WIRE_CONFIG

    regime: Literal["new", "old"]
    gross_income: float
    total_deductions: float
    taxable_income: float
    income_tax: float
    cess: float
    total_tax_liability: float
    breakdown: DeductionBreakdown


# ---------------------------------------------------------------------------
# RegimeComparison — both regimes for the same input
# ---------------------------------------------------------------------------

class RegimeComparison(BaseModel):
    """Output of compare_regimes(). Ties recommend the new regime."""
    model_config = _WIRE_CONFIG

    new: TaxResult
    old: TaxResult
    recommended_regime: Literal["new", "old"]
    savings: float                     # abs(old total - new total)


__all__ = [
    "DeductionBreakdown",
    "TaxResult",
    "RegimeComparison",
]
