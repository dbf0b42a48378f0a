import logging

import pandas as pd
import pytest

from fars.data import reader
from fars.data.reader import (
    AccidentFileNotFoundError,
    AccidentFileReadError,
    available_years,
    coerce_year,
    filename_for,
    load_years,
    read,
)


# ---------------------------------------------------------------------------
# filename_for / coerce_year
# ---------------------------------------------------------------------------

def test_filename_for_int():
    assert filename_for(2015) == "accident_2015.csv.bz2"


def test_filename_for_numeric_string():
    assert filename_for("2013") == "accident_2013.csv.bz2"


def test_filename_for_truncates_float():
    assert filename_for(2014.0) == "accident_2014.csv.bz2"
    assert coerce_year("2014.7") == 2014


def test_filename_for_rejects_non_numeric():
    with pytest.raises(ValueError):
        filename_for("next year")


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------

def test_read_bundled_year():
    df = read("accident_2013.csv.bz2")

    assert len(df) == 90
    for col in ("STATE", "MONTH", "LATITUDE", "LONGITUD", "ST_CASE", "FATALS"):
        assert col in df.columns
    assert set(df["YEAR"]) == {2013}


def test_read_missing_file_names_file():
    with pytest.raises(AccidentFileNotFoundError, match="accident_9999.csv.bz2"):
        read("accident_9999.csv.bz2")


def test_missing_file_error_is_file_not_found():
    assert issubclass(AccidentFileNotFoundError, FileNotFoundError)


def test_read_twice_is_identical():
    first = read("accident_2014.csv.bz2")
    second = read("accident_2014.csv.bz2")

    pd.testing.assert_frame_equal(first, second)


def test_read_from_custom_directory(data_dir, accident_frame):
    df = read("accident_2020.csv.bz2", data_dir=data_dir)

    pd.testing.assert_frame_equal(df, accident_frame)


def test_custom_directory_does_not_fall_back_to_bundled(data_dir):
    with pytest.raises(AccidentFileNotFoundError):
        read("accident_2013.csv.bz2", data_dir=data_dir)


# ---------------------------------------------------------------------------
# load_years
# ---------------------------------------------------------------------------

def test_load_years_skips_bad_year_with_one_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="fars"):
        tables = load_years([2013, 2014, 9999])

    assert len(tables) == 3
    for table, year in zip(tables[:2], (2013, 2014)):
        assert list(table.columns) == ["MONTH", "year"]
        assert set(table["year"]) == {year}
    assert tables[2] is None

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].getMessage() == "invalid year: 9999"


def test_load_years_keeps_input_order():
    tables = load_years([2015, 9999, 2013])

    assert tables[1] is None
    assert set(tables[0]["year"]) == {2015}
    assert set(tables[2]["year"]) == {2013}
    assert len(tables[0]) == 22
    assert len(tables[2]) == 90


def test_load_years_coerces_string_years():
    (table,) = load_years(["2014"])

    assert table["year"].tolist() == [2014] * 36


def test_load_years_non_numeric_year_is_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="fars"):
        tables = load_years(["abc", 2015])

    assert tables[0] is None
    assert tables[1] is not None
    assert "invalid year: abc" in caplog.text


def test_load_years_custom_directory(data_dir):
    tables = load_years([2020, 2013], data_dir=data_dir)

    assert tables[0]["MONTH"].tolist() == [1, 1, 2, 3, 3]
    assert tables[1] is None


def test_load_years_empty_input():
    assert load_years([]) == []


def test_load_years_reads_each_year_once(monkeypatch):
    calls = []
    original = reader.read

    def counting_read(filename, data_dir=None):
        calls.append(filename)
        return original(filename, data_dir=data_dir)

    monkeypatch.setattr(reader, "read", counting_read)
    load_years([2013, 2013])

    assert calls == ["accident_2013.csv.bz2", "accident_2013.csv.bz2"]


# ---------------------------------------------------------------------------
# available_years
# ---------------------------------------------------------------------------

def test_available_years_bundled():
    assert available_years() == [2013, 2014, 2015]


def test_available_years_ignores_other_files(data_dir):
    (data_dir / "notes.txt").write_text("not data")
    (data_dir / "accident_2021.csv").write_text("STATE\n1\n")

    assert available_years(data_dir) == [2020]


def test_available_years_missing_directory(tmp_path):
    assert available_years(tmp_path / "nope") == []


def test_coerce_year_rejects_infinite_with_value_error():
    with pytest.raises(ValueError, match="invalid year"):
        coerce_year("inf")


def test_coerce_year_long_digit_string_is_exact():
    assert coerce_year("12345678901234567891") == 12345678901234567891


def test_read_unreadable_file_raises_read_error(tmp_path):
    (tmp_path / "accident_2020.csv.bz2").write_bytes(b"")

    with pytest.raises(AccidentFileReadError, match="accident_2020.csv.bz2"):
        read("accident_2020.csv.bz2", data_dir=tmp_path)


def test_read_corrupt_archive_raises_read_error(tmp_path):
    (tmp_path / "accident_2020.csv.bz2").write_bytes(b"not a bzip2 stream")

    with pytest.raises(AccidentFileReadError):
        read("accident_2020.csv.bz2", data_dir=tmp_path)


def test_load_years_skips_unreadable_file(tmp_path, caplog):
    (tmp_path / "accident_2020.csv.bz2").write_bytes(b"")

    with caplog.at_level(logging.WARNING, logger="fars"):
        assert load_years([2020], data_dir=tmp_path) == [None]
    assert "invalid year: 2020" in caplog.text
