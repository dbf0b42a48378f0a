"""Shared fixtures for the fars test suite."""

import logging

import pandas as pd
import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers the CLI attaches so captured streams don't leak."""
    yield
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def accident_frame() -> pd.DataFrame:
    """Small accident table covering two states and both sentinels."""
    return pd.DataFrame({
        "STATE":    [1, 1, 1, 6, 6],
        "MONTH":    [1, 1, 2, 3, 3],
        "LATITUDE": [32.1, 99.9999, 33.4, 36.0, 90.0],
        "LONGITUD": [-86.5, 999.9999, -87.2, -119.0, -120.5],
        "FATALS":   [1, 2, 1, 1, 3],
    })


@pytest.fixture
def data_dir(tmp_path, accident_frame):
    """Directory holding a single custom year file (2020)."""
    accident_frame.to_csv(tmp_path / "accident_2020.csv.bz2", index=False)
    return tmp_path
