"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, analysis and figure rendering.  No analysis
logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: ``summarize`` (monthly counts per year) and
                ``plot_state`` (accident map for one state and year).
"""

from .generators import (
    summarize,
    plot_state,
)

__all__ = [
    'summarize',
    'plot_state',
]
