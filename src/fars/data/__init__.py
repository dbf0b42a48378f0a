"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: Yearly file naming, bundled-data lookup and CSV parsing
"""

from .reader import (
    AccidentFileNotFoundError,
    AccidentFileReadError,
    available_years,
    coerce_year,
    filename_for,
    load_years,
    read,
)

__all__ = [
    'AccidentFileNotFoundError',
    'AccidentFileReadError',
    'available_years',
    'coerce_year',
    'filename_for',
    'load_years',
    'read',
]
