"""
FARS Accident Locations (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames and plain dicts.

Package Location: src/fars/analysis/locations.py

Sentinel Rule:
    FARS encodes an unknown position with out-of-range coordinates
    (``LONGITUD`` 999.9999, ``LATITUDE`` 99.9999 and similar).  Any
    longitude above 900 or latitude above 90 is treated as missing and
    replaced with NaN before coordinates are used for bounds or plotting.
    The replacement always returns a new DataFrame; input frames are never
    modified.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

import numpy as np
import pandas as pd

from ..utils.coerce import as_int

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

STATE_COL = "STATE"
LAT_COL = "LATITUDE"
LON_COL = "LONGITUD"

_LON_SENTINEL_MIN: float = 900.0
_LAT_SENTINEL_MIN: float = 90.0


class InvalidStateError(ValueError):
    """Raised when a state code is non-numeric or absent from the accident table."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def coerce_state(state_num: Union[int, float, str]) -> int:
    """
    Coerce a state code to ``int`` the same way years are coerced
    (``"6"``, ``6.0`` and ``"6.7"`` all give ``6``).

    Raises:
        InvalidStateError: If *state_num* is not numeric.
    """
    try:
        return as_int(state_num, label="STATE number")
    except ValueError:
        raise InvalidStateError(f"invalid STATE number: {state_num}") from None


def filter_state(df: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """
    Select the accidents recorded for one state.

    The state code is checked against the distinct ``STATE`` values of
    *df* before any filtering happens.

    Args:
        df: Accident DataFrame with a ``STATE`` column.
        state_num: FARS state code (e.g. ``1`` for Alabama).  Coerced with
            ``coerce_state``.

    Returns:
        Copy of the matching rows (index preserved).

    Raises:
        InvalidStateError: If *state_num* is not numeric or does not occur
            in ``STATE``.
    """
    state_num = coerce_state(state_num)
    if state_num not in set(df[STATE_COL].unique()):
        raise InvalidStateError(f"invalid STATE number: {state_num}")

    return df.loc[df[STATE_COL] == state_num].copy()


def mask_coordinate_sentinels(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Args:
        df: DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        New DataFrame where ``LONGITUD > 900`` and ``LATITUDE > 90`` are
        NaN.  Both columns come back as float.
    """
    lon = df[LON_COL].astype(float)
    lat = df[LAT_COL].astype(float)
    return df.assign(**{
        LON_COL: lon.where(~(lon > _LON_SENTINEL_MIN), np.nan),
        LAT_COL: lat.where(~(lat > _LAT_SENTINEL_MIN), np.nan),
    })


def coordinate_bounds(
    df: pd.DataFrame,
) -> Optional[Dict[str, Tuple[float, float]]]:
    """
    Compute the longitude/latitude ranges of the valid coordinates.

    NaN values are ignored, so run ``mask_coordinate_sentinels`` first.

    Returns:
        ``{'lon': (min, max), 'lat': (min, max)}``, or ``None`` when either
        column has no valid value.
    """
    lon = df[LON_COL].dropna()
    lat = df[LAT_COL].dropna()
    if lon.empty or lat.empty:
        return None

    return {
        "lon": (float(lon.min()), float(lon.max())),
        "lat": (float(lat.min()), float(lat.max())),
    }
