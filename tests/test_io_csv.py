from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from birthdays.errors import FileOpenError, RowParseError
from birthdays.io_csv import read_records
from birthdays.models import Record


COLS = ["name", "surname", "birthdate"]
TODAY = date(2024, 5, 28)


def _write_csv(tmp_path, rows, columns=COLS):
    df = pd.DataFrame(rows, columns=columns)
    path = tmp_path / "birthdays.csv"
    df.to_csv(path, sep=";", index=False)
    return path


def test_read_records_normalizes_year_and_keeps_empty_dates(tmp_path):
    path = _write_csv(tmp_path, [
        ["Ann", "Lee", "02-06-2000"],
        ["Bob", "Ray", ""],
        ["Cat", "Poe", "15-01-1975"],
    ])

    records = read_records(str(path), reference=TODAY)

    assert records == [
        Record("Ann", "Lee", date(2024, 6, 2)),
        Record("Bob", "Ray", None),
        Record("Cat", "Poe", date(2024, 1, 15)),
    ]


def test_read_records_tolerates_bom_case_and_extra_columns(tmp_path):
    path = tmp_path / "birthdays.csv"
    path.write_text("\ufeffNote; Name ;Surname;BIRTHDATE\nx;Ann;Lee;02-06-2000\n", encoding="utf-8")

    records = read_records(str(path), reference=TODAY)

    assert records == [Record("Ann", "Lee", date(2024, 6, 2))]


def test_read_records_header_only_returns_empty(tmp_path):
    path = tmp_path / "birthdays.csv"
    path.write_text("name;surname;birthdate\n", encoding="utf-8")
    assert read_records(str(path), reference=TODAY) == []


def test_read_records_bad_date_names_the_row(tmp_path):
    path = _write_csv(tmp_path, [
        ["Ann", "Lee", "02-06-2000"],
        ["Bob", "Ray", "2000-13-45"],
    ])

    with pytest.raises(RowParseError) as exc:
        read_records(str(path), reference=TODAY)

    assert exc.value.line == 3  # header = riga 1
    assert "riga 3" in str(exc.value)
    assert "2000-13-45" in str(exc.value)


def test_read_records_rejects_rows_with_too_many_fields(tmp_path):
    path = tmp_path / "birthdays.csv"
    path.write_text("name;surname;birthdate\nAnn;Lee;02-06-2000;extra\n", encoding="utf-8")

    with pytest.raises(RowParseError):
        read_records(str(path), reference=TODAY)


def test_read_records_rejects_rows_with_missing_fields(tmp_path):
    path = tmp_path / "birthdays.csv"
    path.write_text("name;surname;birthdate\nAnn;Lee;02-06-2000\nBob;Ray\n", encoding="utf-8")

    with pytest.raises(RowParseError) as exc:
        read_records(str(path), reference=TODAY)
    assert exc.value.line == 3


def test_read_records_requires_expected_columns(tmp_path):
    path = _write_csv(tmp_path, [["Ann", "02-06-2000"]], columns=["name", "birthdate"])

    with pytest.raises(RowParseError) as exc:
        read_records(str(path), reference=TODAY)
    assert "surname" in str(exc.value)


def test_read_records_missing_file(tmp_path):
    with pytest.raises(FileOpenError) as exc:
        read_records(str(tmp_path / "missing.csv"), reference=TODAY)
    assert "missing.csv" in str(exc.value)


def test_read_records_error_line_counts_blank_lines(tmp_path):
    path = tmp_path / "birthdays.csv"
    path.write_text("name;surname;birthdate\nAnn;Lee;02-06-2000\n\nBob;Ray;xx\n", encoding="utf-8")

    with pytest.raises(RowParseError) as exc:
        read_records(str(path), reference=TODAY)

    assert exc.value.line == 4
    assert str(exc.value).startswith("riga 4:")


def test_read_records_skips_blank_lines_and_keeps_date_of_birth(tmp_path):
    path = tmp_path / "birthdays.csv"
    path.write_text("name;surname;birthdate\n\nLeo;Pap;29-02-1996\n\n", encoding="utf-8")

    records = read_records(str(path), reference=date(2027, 1, 1))

    assert records == [Record("Leo", "Pap", date(2027, 2, 28))]
    assert records[0].born == date(1996, 2, 29)
