"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: accident DataFrame for one state (sentinels already masked) +
metadata dict.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base Map:
    A ``Scattergeo`` trace on a North America base map with state
    boundaries (``showsubunits``).  The visible region is restricted to the
    longitude/latitude range of the plotted points plus a small margin.
    Rows whose coordinates are NaN are skipped by plotly.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import LAT_COL, LON_COL, coordinate_bounds

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Degrees added on each side of the data range so edge points stay visible
# and a single-point state still gets a non-degenerate view.
_BOUNDS_PAD_DEG: float = 0.5

_MARKER_STYLE: Dict[str, Any] = {
    'size': 3,
    'color': 'black',
    'opacity': 0.8,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    metadata: Dict[str, Any],
) -> go.Figure:
    """
    Build a map of accident locations for one state and year.

    Args:
        df_state: Accident rows for a single state with columns::

            LONGITUD : float, NaN where unknown
            LATITUDE : float, NaN where unknown

        metadata: Dict with optional keys ``state_num`` and ``year`` used
            for the title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If ``df_state`` is missing a coordinate column.
    """
    _validate_columns(df_state, required=[LON_COL, LAT_COL])

    fig = go.Figure()
    fig.add_trace(
        go.Scattergeo(
            lon=df_state[LON_COL],
            lat=df_state[LAT_COL],
            mode='markers',
            marker=_MARKER_STYLE,
            name='Accident',
            hovertemplate='Lon %{lon:.4f}<br>Lat %{lat:.4f}<extra></extra>',
        )
    )

    geo: Dict[str, Any] = dict(
        scope='north america',
        projection_type='mercator',
        resolution=50,
        showsubunits=True,
        subunitcolor='gray',
        showcountries=True,
        showland=True,
        landcolor='white',
        showlakes=False,
    )
    ranges = _padded_ranges(coordinate_bounds(df_state))
    if ranges is not None:
        geo['lonaxis_range'], geo['lataxis_range'] = ranges

    fig.update_geos(**geo)
    fig.update_layout(
        title=_build_title(metadata, n_points=len(df_state)),
        showlegend=False,
        margin=dict(l=10, r=10, t=50, b=10),
        template='plotly_white',
    )
    return fig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"df_state is missing required columns: {missing}"
        )


def _padded_ranges(
    bounds: Optional[Dict[str, Tuple[float, float]]],
) -> Optional[Tuple[list, list]]:
    if bounds is None:
        return None
    lon_min, lon_max = bounds['lon']
    lat_min, lat_max = bounds['lat']
    return (
        [lon_min - _BOUNDS_PAD_DEG, lon_max + _BOUNDS_PAD_DEG],
        [lat_min - _BOUNDS_PAD_DEG, lat_max + _BOUNDS_PAD_DEG],
    )


def _build_title(metadata: Dict[str, Any], n_points: int) -> str:
    """
    Construct a plot title from metadata.

    Falls back to a generic label when state or year are absent.
    """
    state = metadata.get('state_num')
    year = metadata.get('year')

    location = f'State {state}' if state is not None else 'Accidents'
    if year is not None:
        location = f'{location}, {year}'

    return f'{location} – {n_points} accidents'
