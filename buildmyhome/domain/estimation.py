"""Construction cost estimation.

One pure function serves both the authoritative endpoint and the builder's
offline fallback, so the two paths can never drift apart.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from buildmyhome.domain.enums import HouseType, InteriorType
from buildmyhome.domain.home_configuration import HomeConfiguration


# ---- Rule constants ----
BASE_RATE_PER_SQFT = 2000
FLOOR_STEP = 0.2
MATERIAL_STEP = 0.05
ROUNDING_UNIT = 1000

HOUSE_TYPE_MULTIPLIERS = {
    HouseType.MODERN: 1.10,
    HouseType.TRADITIONAL: 1.00,
    HouseType.CONTEMPORARY: 1.15,
    HouseType.MINIMALIST: 0.95,
}

INTERIOR_MULTIPLIERS = {
    InteriorType.BASIC: 1.00,
    InteriorType.PREMIUM: 1.20,
    InteriorType.LUXURY: 1.40,
}


@dataclass(frozen=True)
class EstimateBreakdown:
    base: int
    floor_multiplier: float
    type_multiplier: float
    interior_multiplier: float
    materials_factor: float
    raw_total: float
    total: int


def has_estimate_inputs(config: HomeConfiguration) -> bool:
    """Caller-side precondition: never estimate without these three fields."""
    return bool(config.land_area_sqft and config.floors and config.house_type)


def round_to_unit(amount: float, unit: int = ROUNDING_UNIT) -> int:
    # Half-up on the quotient; amounts are never negative.
    return int(math.floor(amount / unit + 0.5)) * unit


def estimate_breakdown(config: HomeConfiguration) -> EstimateBreakdown:
    base = config.land_area_sqft * BASE_RATE_PER_SQFT
    floor_multiplier = 1 + (config.floors - 1) * FLOOR_STEP
    type_multiplier = HOUSE_TYPE_MULTIPLIERS.get(config.house_type, 1.0)
    interior_multiplier = INTERIOR_MULTIPLIERS.get(config.interior_type, 1.0)
    materials_factor = 1 + MATERIAL_STEP * len(config.materials)

    raw_total = base * floor_multiplier * type_multiplier * interior_multiplier * materials_factor
    return EstimateBreakdown(
        base=base,
        floor_multiplier=floor_multiplier,
        type_multiplier=type_multiplier,
        interior_multiplier=interior_multiplier,
        materials_factor=materials_factor,
        raw_total=raw_total,
        total=round_to_unit(raw_total),
    )


def estimate_cost(config: HomeConfiguration) -> int:
    """Estimated construction cost in rupees, rounded to the nearest 1000."""
    return estimate_breakdown(config).total
