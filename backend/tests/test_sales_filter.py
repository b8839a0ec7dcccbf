"""
Tests for services/sales_filter.py - state and inclusive date-range predicates.
"""

from datetime import date

from services.sales_filter import SalesFilter, apply_filter, filter_records


def _ids(records):
    return [r.row_id for r in records]


def test_no_filters_returns_everything(sample_records):
    assert _ids(filter_records(sample_records)) == [1, 2, 3]


def test_state_equality(sample_records):
    assert _ids(filter_records(sample_records, state='Texas')) == [1, 2]


def test_unknown_state_matches_nothing(sample_records):
    assert filter_records(sample_records, state='Nowhere') == []


def test_state_match_is_exact(sample_records):
    assert filter_records(sample_records, state='texas') == []


def test_date_range_is_inclusive(sample_records):
    result = filter_records(
        sample_records,
        date_from=date(2016, 1, 10),
        date_to=date(2016, 3, 15),
    )
    assert _ids(result) == [1, 2]


def test_single_day_range(sample_records):
    day = date(2017, 5, 1)
    assert _ids(filter_records(sample_records, date_from=day, date_to=day)) == [3]


def test_single_bound_does_not_filter(sample_records):
    assert _ids(filter_records(sample_records, date_from=date(2017, 1, 1))) == [1, 2, 3]
    assert _ids(filter_records(sample_records, date_to=date(2015, 1, 1))) == [1, 2, 3]


def test_inverted_range_matches_nothing(sample_records):
    result = filter_records(
        sample_records,
        date_from=date(2017, 12, 31),
        date_to=date(2016, 1, 1),
    )
    assert result == []


def test_state_and_dates_combined(sample_records):
    result = filter_records(
        sample_records,
        state='Texas',
        date_from=date(2016, 2, 1),
        date_to=date(2016, 12, 31),
    )
    assert _ids(result) == [2]


def test_preserves_input_order(sample_records):
    reversed_records = list(reversed(sample_records))
    assert _ids(apply_filter(reversed_records, SalesFilter())) == [3, 2, 1]


def test_describe_reports_date_filter_applied():
    partial = SalesFilter(state='Texas', date_from=date(2016, 1, 1))
    full = SalesFilter(date_from=date(2016, 1, 1), date_to=date(2016, 2, 1))

    assert partial.describe() == {
        'state': 'Texas',
        'date_from': '2016-01-01',
        'date_to': None,
        'date_filter_applied': False,
    }
    assert full.describe()['date_filter_applied'] is True
