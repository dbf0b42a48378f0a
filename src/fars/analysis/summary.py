"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames.

Package Location: src/fars/analysis/summary.py

Gap Rule:
    ``count_by_month`` pivots long (year, MONTH, n) counts into one column
    per year.  A month that has no accidents in a given year has no row in
    the long table, so the pivot leaves that cell as NaN.  Gaps are NOT
    zero-filled; callers that want zeros can ``fillna(0)`` themselves.
"""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd

# ---------------------------------------------------------------------------
# Column names
# ---------------------------------------------------------------------------

MONTH_COL = "MONTH"
YEAR_COL = "year"
_COUNT_COL = "n"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_month_year(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """
    Reduce a yearly accident table to ``[MONTH, year]``.

    Args:
        df: Accident DataFrame containing a ``MONTH`` column.
        year: Constant written to the new ``year`` column.

    Returns:
        New DataFrame with exactly the columns ``MONTH`` and ``year``.

    Raises:
        KeyError: If *df* has no ``MONTH`` column.
    """
    return df.assign(**{YEAR_COL: int(year)})[[MONTH_COL, YEAR_COL]]


def count_by_month(tables: Sequence[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per month for each year and pivot years to columns.

    Args:
        tables: ``[MONTH, year]`` DataFrames as produced by
            ``select_month_year``.  ``None`` entries (years that failed to
            load) are ignored.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one column per year
        (ascending).  Cells hold accident counts; month/year pairs with no
        accidents are NaN.  When no table is supplied an empty DataFrame
        with a ``MONTH`` index is returned.
    """
    frames = [t for t in tables if t is not None]
    if not frames:
        empty = pd.DataFrame(index=pd.Index([], name=MONTH_COL))
        empty.columns.name = YEAR_COL
        return empty

    combined = pd.concat(frames, ignore_index=True)

    counts = (
        combined.groupby([YEAR_COL, MONTH_COL])
        .size()
        .reset_index(name=_COUNT_COL)
    )

    return counts.pivot(index=MONTH_COL, columns=YEAR_COL, values=_COUNT_COL)
