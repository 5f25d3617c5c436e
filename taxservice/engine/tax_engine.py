"""
Tax engine — pure Python, deterministic. Same input → same output.

No I/O, no shared mutable state: every function is safe to call from any
number of concurrent requests. Only the frozen tables in constants.py are
shared.

Inputs are NormalizedInput values, so every amount is already finite and
non-negative; nothing here raises for a well-formed input.
"""
from __future__ import annotations

import math
from typing import Sequence

from taxservice.engine.constants import (
    CESS_PERCENT,
    HRA_METRO_PCT,
    HRA_NON_METRO_PCT,
    HRA_RENT_EXCESS_PCT,
    REGIME_CONSTANTS,
    REGIMES,
    SECTION_80C_LIMIT,
    TaxSlab,
)
from taxservice.engine.schemas import DeductionBreakdown, RegimeComparison, TaxResult
from taxservice.validation.schemas import NormalizedInput


# ===========================================================================
# HELPERS
# ===========================================================================

def round2(value: float) -> float:
    """
    Round to 2 decimals, half away from zero.

    Works on value * 100 in binary floating point, so 1.005 rounds to 1.0
    exactly like Math.round(x * 100) / 100 does.
    """
    # Floats this large carry no fractional part
    if not math.isfinite(value) or abs(value) >= 2 ** 52:
        return value
    cents = math.floor(abs(value) * 100 + 0.5)
    return math.copysign(cents, value) / 100


def compute_hra_exemption(
    salary_excluding_hra: float,
    hra_component: float,
    annual_rent: float,
    is_metro: bool,
) -> float:
    """
    HRA exemption under Section 10(13A).
    Returns 0 if no HRA component or no rent paid.

    Component 1: HRA component itself
    Component 2: 50% of salary (metro) or 40% (non-metro)
    Component 3: max(0, annual_rent - 10% of salary)  ← clipped at 0

    salary_excluding_hra is salary NET of the HRA component; compute_tax
    passes income_from_salary - hra_component.
    """
    if hra_component == 0 or annual_rent == 0:
        return 0.0
    metro_pct = HRA_METRO_PCT if is_metro else HRA_NON_METRO_PCT
    component_1 = hra_component
    component_2 = metro_pct * salary_excluding_hra
    component_3 = max(0.0, annual_rent - HRA_RENT_EXCESS_PCT * salary_excluding_hra)
    return min(component_1, component_2, component_3)


def compute_progressive_tax(taxable_income: float, slabs: Sequence[TaxSlab]) -> float:
    """
    Apply progressive slab tax to taxable_income.

    Walks slabs in ascending order, taxing the slice of income that falls in
    each band. The last slab is unbounded, so any non-negative income is
    consumed fully. No rounding here.
    """
    if taxable_income <= 0:
        return 0.0

    tax = 0.0
    remaining = taxable_income
    for slab in slabs:
        if remaining <= 0:
            break
        slab_income = min(remaining, slab.width)
        tax += slab_income * (slab.rate_percent / 100)
        remaining -= slab_income
    return tax


# ===========================================================================
# SINGLE-REGIME CALCULATOR — public API
# ===========================================================================

def compute_tax(data: NormalizedInput) -> TaxResult:
    """
    Income tax, cess and total liability for data.regime.

    Old regime: standard deduction ₹50K + HRA exemption + 80C (capped ₹1.5L).
    New regime: standard deduction ₹75K only — HRA and 80C forced to 0.
    Cess: 4% of income tax.
    """
    regime_constants = REGIME_CONSTANTS[data.regime]

    # Step 1: Gross income
    gross_income = data.income_from_salary + data.income_from_rent

    # Step 2: Deductions
    ded_std = float(regime_constants.standard_deduction)
    if data.regime == "old":
        ded_hra = compute_hra_exemption(
            data.income_from_salary - data.hra_component,
            data.hra_component,
            data.annual_rent,
            data.is_metro,
        )
        ded_80c = min(data.section_80c, SECTION_80C_LIMIT)
    else:
        ded_hra = 0.0
        ded_80c = 0.0

    total_deductions = ded_std + ded_hra + ded_80c

    # Step 3: Taxable income (never negative)
    taxable_income = max(0.0, gross_income - total_deductions)

    # Step 4: Slab tax
    income_tax = compute_progressive_tax(taxable_income, regime_constants.slabs)

    # Step 5: Cess
    cess = income_tax * CESS_PERCENT / 100

    # Step 6: Total, rounded from the unrounded sum
    total_tax_liability = income_tax + cess

    return TaxResult(
        regime=data.regime,
        gross_income=gross_income,
        total_deductions=total_deductions,
        taxable_income=taxable_income,
        income_tax=round2(income_tax),
        cess=round2(cess),
        total_tax_liability=round2(total_tax_liability),
        breakdown=DeductionBreakdown(
            standard_deduction=ded_std,
            hra_exemption=ded_hra,
            section_80c=ded_80c,
        ),
    )


# ===========================================================================
# COMPARE REGIMES — public API
# ===========================================================================

def compare_regimes(data: NormalizedInput) -> RegimeComparison:
    """
    Run compute_tax() under both regimes for the same input.
    data.regime is ignored. Recommends the lower total liability;
    ties go to the new regime.
    """
    results = {
        regime: compute_tax(data.model_copy(update={"regime": regime}))
        for regime in REGIMES
    }
    new, old = results["new"], results["old"]

    if old.total_tax_liability < new.total_tax_liability:
        recommended = "old"
    else:
        recommended = "new"

    return RegimeComparison(
        new=new,
        old=old,
        recommended_regime=recommended,
        savings=round2(abs(old.total_tax_liability - new.total_tax_liability)),
    )


__all__ = [
    "round2",
    "compute_hra_exemption",
    "compute_progressive_tax",
    "compute_tax",
    "compare_regimes",
]
