import math

from statsapi.services.cleaning import filter_numeric, parse_numeric

def test_filter_numeric_drops_non_numbers():
    values = [1, "2", None, 3.5, True, float("nan"), {"a": 1}, [4], -2]
    assert filter_numeric(values) == [1.0, 3.5, -2.0]

def test_filter_numeric_drops_infinities():
    assert filter_numeric([float("inf"), 1, -math.inf]) == [1.0]

def test_filter_numeric_empty():
    assert filter_numeric([]) == []

def test_parse_numeric():
    assert parse_numeric("42") == 42.0
    assert parse_numeric(" -3.5 ") == -3.5
    assert parse_numeric("1e3") == 1000.0

def test_parse_numeric_rejects_non_numbers():
    assert parse_numeric("") is None
    assert parse_numeric("abc") is None
    assert parse_numeric("nan") is None
    assert parse_numeric("inf") is None
    assert parse_numeric(None) is None

def test_filter_numeric_drops_integers_beyond_float_range():
    assert filter_numeric([10**400, 1, -(10**400)]) == [1.0]
