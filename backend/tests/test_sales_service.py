"""
Tests for services/sales_service.py with an in-memory loader.
"""

from datetime import date

import pytest

from services.exceptions import AggregationError, DataUnavailableError, NotFoundError
from services.sales_service import DateBounds, SalesQueryService
from utils.normalize import ValidationError


@pytest.fixture
def service(sample_records):
    return SalesQueryService(loader=lambda: sample_records)


@pytest.fixture
def empty_service():
    return SalesQueryService(loader=lambda: [])


class TestDistinctValues:

    def test_states_in_encounter_order(self, service):
        assert service.list_distinct_values() == ['Texas', 'California']

    def test_other_field(self, service):
        assert service.list_distinct_values('city') == ['Houston', 'Dallas', 'Los Angeles']

    def test_unknown_field_rejected(self, service):
        with pytest.raises(ValidationError) as exc:
            service.list_distinct_values('profit')
        assert exc.value.field == 'field'
        assert exc.value.received_value == 'profit'

    def test_empty_dataset_gives_empty_list(self, empty_service):
        assert empty_service.list_distinct_values() == []


class TestDateBounds:

    def test_bounds_for_state(self, service):
        assert service.get_date_bounds('Texas') == DateBounds(date(2016, 1, 10), date(2016, 3, 15))

    def test_single_record_state(self, service):
        bounds = service.get_date_bounds('California')
        assert bounds.min_date == bounds.max_date == date(2017, 5, 1)

    def test_all_states(self, service):
        assert service.get_date_bounds(None) == DateBounds(date(2016, 1, 10), date(2017, 5, 1))

    def test_unknown_state(self, service):
        with pytest.raises(NotFoundError, match="State not found"):
            service.get_date_bounds('Atlantis')

    def test_empty_dataset(self, empty_service):
        with pytest.raises(NotFoundError, match="No sales data available"):
            empty_service.get_date_bounds(None)


class TestSummary:

    def test_unfiltered(self, service):
        summary = service.get_summary()
        assert summary.record_count == 3
        assert summary.total_sales == pytest.approx(550.0)

    def test_state_filter(self, service):
        summary = service.get_summary(state='Texas')
        assert summary.record_count == 2
        assert summary.sales_by_city == {'Houston': 200.0, 'Dallas': 50.0}

    def test_filter_excluding_everything_is_not_an_error(self, service):
        summary = service.get_summary(state='Atlantis')
        assert summary.record_count == 0
        assert summary.total_sales == 0

    def test_inverted_range_is_empty(self, service):
        summary = service.get_summary(date_from=date(2018, 1, 1), date_to=date(2015, 1, 1))
        assert summary.record_count == 0

    def test_empty_dataset_is_unavailable(self, empty_service):
        with pytest.raises(DataUnavailableError) as exc:
            empty_service.get_summary()
        assert exc.value.status_code == 503

    def test_aggregation_failure_is_wrapped(self, service, monkeypatch):
        def boom(records, top_n):
            raise ZeroDivisionError("bad data")

        monkeypatch.setattr('services.sales_service.summarize', boom)

        with pytest.raises(AggregationError) as exc:
            service.get_summary()
        assert isinstance(exc.value.__cause__, ZeroDivisionError)
        assert exc.value.status_code == 500

    def test_top_n_is_configurable(self, sample_records):
        service = SalesQueryService(loader=lambda: sample_records, top_n=2)
        assert len(service.get_summary().top_products) == 2

    def test_reloads_every_call(self, sample_records):
        calls = []

        def loader():
            calls.append(1)
            return sample_records

        service = SalesQueryService(loader=loader)
        service.get_summary()
        service.get_summary()
        assert len(calls) == 2
