from datetime import datetime

import pytest

from solartrack.solardata import SolarData, SolarHistory, parse_csv_line

STAMP = datetime(2024, 6, 1, 12, 0, 0)


def _sample(i: int) -> SolarData:
    return SolarData(float(i), float(i) / 2, 20.0 + i, STAMP)


def test_parse_three_fields():
    sample = parse_csv_line("10.5,20.25,30.0", STAMP)
    assert sample == SolarData(10.5, 20.25, 30.0, STAMP)


def test_parse_without_commas_returns_none():
    assert parse_csv_line("123", STAMP) is None


def test_parse_with_one_comma_returns_none():
    assert parse_csv_line("1,2", STAMP) is None


def test_parse_rejects_non_numeric_field():
    with pytest.raises(ValueError):
        parse_csv_line("abc,1,2", STAMP)


def test_parse_rejects_empty_field():
    with pytest.raises(ValueError):
        parse_csv_line("1,,2", STAMP)


def test_parse_last_field_takes_leading_number_only():
    sample = parse_csv_line("1,2,3,4", STAMP)
    assert sample.temperature == 3.0


def test_parse_ignores_trailing_text_and_leading_spaces():
    sample = parse_csv_line(" 12abc,  -3.5deg,4e1C", STAMP)
    assert (sample.horizontal_angle, sample.vertical_angle, sample.temperature) == (
        12.0,
        -3.5,
        40.0,
    )


def test_parse_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        parse_csv_line("1e40,1,1", STAMP)


def test_parse_default_timestamp_is_now():
    before = datetime.now()
    sample = parse_csv_line("1,2,3")
    after = datetime.now()
    assert before <= sample.timestamp <= after


def test_history_keeps_last_samples():
    history = SolarHistory(100)
    for i in range(150):
        history.append(_sample(i))
    assert len(history) == 100
    snap = history.snapshot()
    assert snap[0] == _sample(50)
    assert snap[-1] == _sample(149)


def test_history_snapshot_is_a_copy():
    history = SolarHistory(5)
    history.append(_sample(1))
    snap = history.snapshot()
    snap.append(_sample(2))
    assert history.snapshot() == [_sample(1)]


def test_history_default_size_matches_source_limit():
    assert SolarHistory().maxlen == 100


def test_history_rejects_zero_size():
    with pytest.raises(ValueError):
        SolarHistory(0)