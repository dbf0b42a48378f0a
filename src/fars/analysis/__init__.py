"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return new DataFrames or plain
values.

Modules:
- summary:   Month/year projection and monthly count pivot
- locations: State filtering, coordinate sentinels and map bounds
"""

from .summary import (
    select_month_year,
    count_by_month,
)

from .locations import (
    InvalidStateError,
    coerce_state,
    filter_state,
    mask_coordinate_sentinels,
    coordinate_bounds,
)

__all__ = [
    # Summary
    'select_month_year',
    'count_by_month',
    # Locations
    'InvalidStateError',
    'coerce_state',
    'filter_state',
    'mask_coordinate_sentinels',
    'coordinate_bounds',
]
