import io

import pytest

from statsapi.errors import EmptyDataError, InvalidInputError, TabularParseError
from statsapi.services.tabular import (
    Table,
    column_values,
    describe_columns,
    describe_file,
    read_table,
)

CSV = "name,age,score\nann,31,88.5\nbob,n/a,92\ncid,45,\n"

def test_read_table():
    table = read_table(io.StringIO(CSV))
    assert table.columns == ["name", "age", "score"]
    assert len(table.rows) == 3
    assert table.rows[0] == {"name": "ann", "age": "31", "score": "88.5"}

def test_read_table_short_row_fills_none():
    table = read_table(io.StringIO("a,b\n1\n"))
    assert table.rows == [{"a": "1", "b": None}]

def test_read_table_custom_delimiter():
    table = read_table(io.StringIO("x;y\n1;2\n"), delimiter=";")
    assert table.columns == ["x", "y"]

def test_read_table_header_only():
    with pytest.raises(EmptyDataError, match="Empty CSV file"):
        read_table(io.StringIO("a,b\n"))

def test_read_table_no_header():
    with pytest.raises(InvalidInputError):
        read_table(io.StringIO(""))

def test_read_table_bad_delimiter():
    with pytest.raises(InvalidInputError):
        read_table(io.StringIO(CSV), delimiter=";;")

def test_read_table_malformed():
    # a single cell beyond csv.field_size_limit()
    csv_text = "a\n" + "x" * 200_000 + "\n"
    with pytest.raises(TabularParseError):
        read_table(io.StringIO(csv_text))

def test_column_values_skips_non_numeric():
    table = read_table(io.StringIO(CSV))
    assert column_values(table, "age") == [31.0, 45.0]
    assert column_values(table, "name") == []

def test_describe_columns():
    table = read_table(io.StringIO(CSV))
    stats = describe_columns(table)
    assert list(stats) == ["age", "score"]
    assert stats["age"].count == 2
    assert stats["age"].mean == 38
    assert stats["score"].max == 92

def test_describe_columns_without_numbers():
    assert describe_columns(Table(columns=["a"], rows=[{"a": "x"}])) == {}

def test_describe_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("\ufeffv\n1\n2\n3\n", encoding="utf-8")
    table, stats = describe_file(path)
    assert table.columns == ["v"]
    assert stats["v"].median == 2
