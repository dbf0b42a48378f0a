"""
FARS Report Generators (Imperative Shell)

Thin orchestration layer: calls reader.py to load yearly files, calls the
functional core to reshape them, and calls the plotting functions to build
figures.

No file parsing lives here.  All data access goes through
src/fars/data/reader.py.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import summarize, plot_state

    summary = summarize([2013, 2014, 2015])
    fig = plot_state(1, 2013, show=False, output_path="alabama_2013.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import (
    coerce_state,
    filter_state,
    mask_coordinate_sentinels,
)
from ..analysis.summary import count_by_month
from ..data import reader
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)


def summarize(
    years: Iterable[reader.YearLike],
    data_dir: Optional[Path] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years whose file cannot be loaded are skipped with a warning (see
    ``reader.load_years``).

    Args:
        years: Years to summarize.
        data_dir: Optional override for the data directory.

    Returns:
        DataFrame indexed by ``MONTH`` with one column per loaded year.
        Month/year pairs without accidents are NaN, not zero.
    """
    tables = reader.load_years(years, data_dir=data_dir)
    summary = count_by_month(tables)
    log.debug(
        "Summarized %d of %d years", summary.shape[1], len(tables),
        extra={"years": [str(c) for c in summary.columns]},
    )
    return summary


def plot_state(
    state_num: int,
    year: reader.YearLike,
    data_dir: Optional[Path] = None,
    show: bool = True,
    output_path: Optional[Path] = None,
) -> Optional[go.Figure]:
    """
    Map the accidents recorded in one state during one year.

    Unlike ``summarize``, a missing year file is not recovered from.

    Args:
        state_num: FARS state code.
        year: Year of the file to load.
        data_dir: Optional override for the data directory.
        show: Render the figure with ``fig.show()``.
        output_path: When given, also write the figure as standalone HTML.

    Returns:
        The figure, or ``None`` when the state has no accidents to plot.

    Raises:
        AccidentFileNotFoundError: If the year's file does not exist.
        AccidentFileReadError: If the year's file cannot be parsed.
        ValueError: If *year* is not numeric.
        InvalidStateError: If *state_num* is not numeric or not present in
            the file.
    """
    filename = reader.filename_for(year)
    state_code = coerce_state(state_num)
    data = reader.read(filename, data_dir=data_dir)

    df_state = filter_state(data, state_code)
    if df_state.empty:
        log.info("no accidents to plot", extra={"state": state_code})
        return None

    df_state = mask_coordinate_sentinels(df_state)

    fig = plot_state_map(
        df_state,
        metadata={"state_num": state_code, "year": reader.coerce_year(year)},
    )

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(output_path))
        log.info("Saved state map to %s", output_path)

    if show:
        fig.show()

    return fig
