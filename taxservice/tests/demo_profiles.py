"""
Demo request bodies for end-to-end tests.

Each entry pairs a raw JSON body (camelCase, as a client sends it) with the
hand-computed expected result. Used by test_api_calculate.py and
test_tax_engine.py.
"""
from __future__ import annotations
from typing import Any

# ---------------------------------------------------------------------------
# Salaried, new regime, salary only
# ---------------------------------------------------------------------------
# gross=1000000, std=75000, taxable=925000
# slab: 0 + 20000 + 12500 = 32500, cess=1300, total=33800
_SALARIED_NEW: dict[str, Any] = dict(
    body=dict(incomeFromSalary=1_000_000, regime="new"),
    expected=dict(
        grossIncome=1_000_000,
        totalDeductions=75_000,
        taxableIncome=925_000,
        incomeTax=32_500,
        cess=1_300,
        totalTaxLiability=33_800,
        breakdown=dict(standardDeduction=75_000, hraExemption=0, section80C=0),
    ),
)

# ---------------------------------------------------------------------------
# Metro renter, old regime, HRA + maxed 80C
# ---------------------------------------------------------------------------
# HRA against salary net of HRA: 1200000 - 300000 = 900000
#   comp1=300000, comp2=50%*900000=450000, comp3=240000-90000=150000 → 150000
# ded=50000+150000+150000=350000, taxable=850000
# slab: 12500 + 20%*350000=70000 → 82500, cess=3300, total=85800
_METRO_RENTER_OLD: dict[str, Any] = dict(
    body=dict(
        incomeFromSalary=1_200_000, hraComponent=300_000, annualRent=240_000,
        section80C=150_000, regime="old", isMetro=True,
    ),
    expected=dict(
        grossIncome=1_200_000,
        totalDeductions=350_000,
        taxableIncome=850_000,
        incomeTax=82_500,
        cess=3_300,
        totalTaxLiability=85_800,
        breakdown=dict(standardDeduction=50_000, hraExemption=150_000, section80C=150_000),
    ),
)

# ---------------------------------------------------------------------------
# Rental income only, new regime
# ---------------------------------------------------------------------------
# gross=100000, taxable=25000 (< 4L) → zero tax
_RENT_ONLY_NEW: dict[str, Any] = dict(
    body=dict(incomeFromSalary=0, incomeFromRent=100_000, regime="new"),
    expected=dict(
        grossIncome=100_000,
        totalDeductions=75_000,
        taxableIncome=25_000,
        incomeTax=0,
        cess=0,
        totalTaxLiability=0,
        breakdown=dict(standardDeduction=75_000, hraExemption=0, section80C=0),
    ),
)

# ---------------------------------------------------------------------------
# Non-metro renter, old regime, no 80C
# ---------------------------------------------------------------------------
# salary net of HRA: 1000000 - 250000 = 750000
#   comp1=250000, comp2=40%*750000=300000, comp3=200000-75000=125000 → 125000
# ded=50000+125000=175000, taxable=825000
# slab: 12500 + 20%*325000=65000 → 77500, cess=3100, total=80600
_NON_METRO_RENTER_OLD: dict[str, Any] = dict(
    body=dict(
        incomeFromSalary=1_000_000, hraComponent=250_000, annualRent=200_000,
        regime="old", isMetro=False,
    ),
    expected=dict(
        grossIncome=1_000_000,
        totalDeductions=175_000,
        taxableIncome=825_000,
        incomeTax=77_500,
        cess=3_100,
        totalTaxLiability=80_600,
        breakdown=dict(standardDeduction=50_000, hraExemption=125_000, section80C=0),
    ),
)

DEMO_PROFILES: dict[str, dict[str, Any]] = {
    "salaried_new": _SALARIED_NEW,
    "metro_renter_old": _METRO_RENTER_OLD,
    "rent_only_new": _RENT_ONLY_NEW,
    "non_metro_renter_old": _NON_METRO_RENTER_OLD,
}
