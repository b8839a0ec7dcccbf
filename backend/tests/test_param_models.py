"""
Tests for the request param models (api/contracts/pydantic_models).

Focus: legacy names accepted, "All States" never reaches the service layer,
bad dates rejected at the boundary.
"""

from datetime import date

import pydantic
import pytest

from api.contracts.pydantic_models import (
    DateRangeParams,
    DistinctValuesParams,
    SummaryParams,
    normalize_region,
)


class TestNormalizeRegion:

    @pytest.mark.parametrize("value", [None, "", "   ", "All States", "all states", "ALL", "all"])
    def test_no_filter_values(self, value):
        assert normalize_region(value) is None

    def test_real_state_is_stripped(self):
        assert normalize_region("  Texas ") == "Texas"

    def test_custom_sentinel(self):
        assert normalize_region("Everywhere", sentinel="Everywhere") is None
        assert normalize_region("All States", sentinel="Everywhere") == "All States"


class TestSummaryParams:

    def test_current_names(self):
        params = SummaryParams.model_validate(
            {"region": "Texas", "from": "2016-01-01", "to": "2016-12-31"}
        )
        assert params.region == "Texas"
        assert params.date_from == date(2016, 1, 1)
        assert params.date_to == date(2016, 12, 31)

    def test_legacy_names(self):
        params = SummaryParams.model_validate(
            {"state": "Texas", "startDate": "2016-01-01", "endDate": "2016-12-31"}
        )
        assert (params.region, params.date_from, params.date_to) == (
            "Texas", date(2016, 1, 1), date(2016, 12, 31)
        )

    def test_defaults(self):
        params = SummaryParams.model_validate({})
        assert params.region is None
        assert params.date_from is None
        assert params.date_to is None

    def test_all_states_becomes_none(self):
        assert SummaryParams.model_validate({"state": "All States"}).region is None

    def test_context_sentinel(self):
        params = SummaryParams.model_validate({"region": "Everywhere"}, context={"all_states": "Everywhere"})
        assert params.region is None

    def test_empty_dates_are_none(self):
        params = SummaryParams.model_validate({"from": "", "to": ""})
        assert params.date_from is None and params.date_to is None

    def test_bad_date_rejected(self):
        with pytest.raises(pydantic.ValidationError) as exc:
            SummaryParams.model_validate({"from": "31/12/2016"})
        assert "Expected date" in exc.value.errors()[0]["msg"]

    def test_unknown_params_ignored(self):
        params = SummaryParams.model_validate({"region": "Texas", "page": "2"})
        assert params.region == "Texas"

    def test_frozen(self):
        params = SummaryParams.model_validate({"region": "Texas"})
        with pytest.raises(pydantic.ValidationError):
            params.region = "Ohio"


def test_date_range_params():
    assert DateRangeParams.model_validate({"region": "Texas"}).region == "Texas"
    assert DateRangeParams.model_validate({"region": "All States"}).region is None


def test_distinct_values_default_field():
    assert DistinctValuesParams.model_validate({}).field == "state"
    assert DistinctValuesParams.model_validate({"field": " city "}).field == "city"
