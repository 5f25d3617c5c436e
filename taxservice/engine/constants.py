"""
constants.py — statutory tax tables for both regimes.

New regime slabs follow Budget 2025 (4L/8L/12L/16L/20L/24L breakpoints).
Old regime slabs are the long-standing 2.5L/5L/10L structure.

Everything here is read-only: slabs are frozen dataclasses held in tuples,
and the per-regime lookup is a MappingProxyType. Nothing mutates these at
runtime.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping, Tuple

Regime = Literal["new", "old"]

REGIMES: Tuple[str, ...] = ("new", "old")
DEFAULT_REGIME: Regime = "new"

# ===========================================================================
# GLOBAL RATES & CAPS
# ===========================================================================

CESS_PERCENT       = 4          # Health & education cess on income tax
SECTION_80C_LIMIT  = 150_000    # Old regime only

# Upper bound on any single input amount (₹10 lakh crore). Sums of two such
# amounts, scaled to paise, stay below 2**53.
MAX_AMOUNT         = 10 ** 13

# ===========================================================================
# STANDARD DEDUCTION
# ===========================================================================

NEW_STD_DEDUCTION  = 75_000
OLD_STD_DEDUCTION  = 50_000

# ===========================================================================
# HRA EXEMPTION FACTORS
# ===========================================================================

HRA_METRO_PCT      = 0.50
HRA_NON_METRO_PCT  = 0.40
HRA_RENT_EXCESS_PCT = 0.10      # rent must exceed 10% of salary to count


@dataclass(frozen=True)
class TaxSlab:
    """
    One income band taxed at a single rate.

    Applies rate_percent to the part of taxable income in
    [lower_bound, upper_bound). The last slab of a regime has
    upper_bound = inf.
    """
    lower_bound: float
    upper_bound: float
    rate_percent: float

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound


@dataclass(frozen=True)
class RegimeConstants:
    standard_deduction: float
    slabs: Tuple[TaxSlab, ...]


# ===========================================================================
# SLAB TABLES
# ===========================================================================

NEW_REGIME_SLABS: Tuple[TaxSlab, ...] = (
    TaxSlab(0,          400_000,      0),    # 0–4L
    TaxSlab(400_000,    800_000,      5),    # 4–8L
    TaxSlab(800_000,    1_200_000,   10),    # 8–12L
    TaxSlab(1_200_000,  1_600_000,   15),    # 12–16L
    TaxSlab(1_600_000,  2_000_000,   20),    # 16–20L
    TaxSlab(2_000_000,  2_400_000,   25),    # 20–24L
    TaxSlab(2_400_000,  float("inf"), 30),   # >24L
)

OLD_REGIME_SLABS: Tuple[TaxSlab, ...] = (
    TaxSlab(0,          250_000,      0),    # 0–2.5L
    TaxSlab(250_000,    500_000,      5),    # 2.5–5L
    TaxSlab(500_000,    1_000_000,   20),    # 5–10L
    TaxSlab(1_000_000,  float("inf"), 30),   # >10L
)

REGIME_CONSTANTS: Mapping[str, RegimeConstants] = MappingProxyType({
    "new": RegimeConstants(standard_deduction=NEW_STD_DEDUCTION, slabs=NEW_REGIME_SLABS),
    "old": RegimeConstants(standard_deduction=OLD_STD_DEDUCTION, slabs=OLD_REGIME_SLABS),
})


__all__ = [
    "Regime",
    "REGIMES",
    "DEFAULT_REGIME",
    "CESS_PERCENT",
    "SECTION_80C_LIMIT",
    "MAX_AMOUNT",
    "NEW_STD_DEDUCTION",
    "OLD_STD_DEDUCTION",
    "HRA_METRO_PCT",
    "HRA_NON_METRO_PCT",
    "HRA_RENT_EXCESS_PCT",
    "TaxSlab",
    "RegimeConstants",
    "NEW_REGIME_SLABS",
    "OLD_REGIME_SLABS",
    "REGIME_CONSTANTS",
]
