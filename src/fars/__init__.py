"""
FARS - Fatality Analysis Reporting System accident toolkit

Loads the bundled yearly FARS accident files, summarizes monthly accident
counts across years and maps accident locations for a state.

Structure:
- data/     : Imperative Shell (file naming, bundled-data lookup, CSV I/O)
- analysis/ : Functional Core (pure DataFrame transformations)
- plotting/ : (plotly figure builders)
- reports/  : orchestration of the above (summarize, plot_state)
"""

from .data.reader import (
    AccidentFileNotFoundError,
    AccidentFileReadError,
    available_years,
    filename_for,
    load_years,
    read,
)
from .analysis.locations import InvalidStateError
from .reports.generators import plot_state, summarize

__version__ = "0.1.0"

__all__ = [
    'AccidentFileNotFoundError',
    'AccidentFileReadError',
    'InvalidStateError',
    'available_years',
    'filename_for',
    'load_years',
    'plot_state',
    'read',
    'summarize',
]
