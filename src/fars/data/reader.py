"""
FARS Data Reader (Imperative Shell)

Locates the bundled yearly accident files and parses them into DataFrames.
All file access for the package goes through this module; the analysis
and plotting packages only ever see DataFrames.

Package Location: src/fars/data/reader.py

Data location:
   Yearly files live in the ``fars/extdata`` package directory and are
   located with ``importlib.resources`` so that lookups work the same from
   a source checkout, an editable install, or a wheel.  Every public
   function accepts an optional ``data_dir`` that replaces the bundled
   directory (used by the CLI ``--data-dir`` option and the test suite).

Error policy:
   ``read`` fails hard with ``AccidentFileNotFoundError`` (missing file)
   or ``AccidentFileReadError`` (unreadable file).
   ``load_years`` catches any per-year failure, logs a warning naming the
   year and leaves ``None`` in that slot so sibling years still load.
"""

from __future__ import annotations

import logging
import re
from importlib import resources
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from ..analysis.summary import select_month_year
from ..utils.coerce import as_int

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_DATA_PACKAGE = "fars"
_DATA_DIRNAME = "extdata"
_FILENAME_TEMPLATE = "accident_{year:d}.csv.bz2"
_FILENAME_PATTERN = re.compile(r"^accident_(\d+)\.csv\.bz2$")

YearLike = Union[int, float, str]


class AccidentFileNotFoundError(FileNotFoundError):
    """Raised when a yearly accident file cannot be found."""


class AccidentFileReadError(Exception):
    """
    Raised when an accident file exists but cannot be decompressed or
    parsed (truncated archive, empty file, malformed CSV).
    """


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def filename_for(year: YearLike) -> str:
    """
    Build the expected file name for one year of accident data.

    Args:
        year: Year as an int, integral float or numeric string
            (``2015``, ``2015.0``, ``"2015"``).  No range check is made.

    Returns:
        File name such as ``'accident_2015.csv.bz2'``.

    Raises:
        ValueError: If *year* cannot be coerced to an integer.
    """
    return _FILENAME_TEMPLATE.format(year=coerce_year(year))


def coerce_year(year: YearLike) -> int:
    """
    Coerce an int, float or numeric string year to ``int``.

    Raises:
        ValueError: If *year* is not numeric, or is NaN or infinite.
    """
    return as_int(year, label="year")


def read(filename: str, data_dir: Optional[Path] = None) -> pd.DataFrame:
    """
    Parse one accident file into a DataFrame.

    All source columns are returned untouched.  Parser diagnostics
    (mixed-dtype warnings) are suppressed by reading in a single pass.

    Args:
        filename: Bare file name, e.g. ``'accident_2015.csv.bz2'``.
        data_dir: Optional directory to read from instead of the bundled
            ``extdata`` directory.

    Returns:
        DataFrame with one row per accident.

    Raises:
        AccidentFileNotFoundError: If the resolved file does not exist.
        AccidentFileReadError: If the file cannot be decompressed or parsed.
    """
    resource = _data_root(data_dir) / filename
    if not resource.is_file():
        raise AccidentFileNotFoundError(f"file '{filename}' does not exist")

    log.debug("Reading accident file %s", filename, extra={"file": filename})
    try:
        with resources.as_file(resource) as path:
            return pd.read_csv(path, low_memory=False)
    except (OSError, EOFError, ValueError) as exc:
        # EmptyDataError, ParserError and UnicodeDecodeError are ValueErrors
        raise AccidentFileReadError(
            f"file '{filename}' could not be read: {exc}"
        ) from exc


def load_years(
    years: Iterable[YearLike],
    data_dir: Optional[Path] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load the ``MONTH`` column of several yearly files.

    Each year is processed independently: a year whose file is missing
    (or otherwise fails to load) is logged as ``invalid year: <year>`` at
    WARNING level and yields ``None``; the remaining years still load.

    Args:
        years: Ordered years to load.
        data_dir: Optional override for the data directory.

    Returns:
        List with one entry per input year, in input order.  Each entry is
        a ``[MONTH, year]`` DataFrame or ``None`` for a failed year.
    """
    tables: List[Optional[pd.DataFrame]] = []
    for year in years:
        try:
            tables.append(_load_year(year, data_dir))
        except Exception as exc:
            log.warning(
                "invalid year: %s", year,
                extra={"year": str(year), "error": str(exc)},
            )
            tables.append(None)
    return tables


def available_years(data_dir: Optional[Path] = None) -> List[int]:
    """
    List the years for which an accident file is present.

    Args:
        data_dir: Optional override for the data directory.

    Returns:
        Sorted list of years.  Empty when the directory is missing.
    """
    root = _data_root(data_dir)
    if not root.is_dir():
        return []

    found = []
    for entry in root.iterdir():
        match = _FILENAME_PATTERN.match(entry.name)
        if match and entry.is_file():
            found.append(int(match.group(1)))
    return sorted(found)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _load_year(year: YearLike, data_dir: Optional[Path]) -> pd.DataFrame:
    year_int = coerce_year(year)
    df = read(filename_for(year_int), data_dir=data_dir)
    return select_month_year(df, year_int)


def _data_root(data_dir: Optional[Path]):
    """Return the directory (Path or package Traversable) holding the files."""
    if data_dir is not None:
        return Path(data_dir)
    return resources.files(_DATA_PACKAGE) / _DATA_DIRNAME
