"""
Sales Dashboard Endpoints

Endpoints:
- /distinct-values  - unique values of a filter dimension (default: state)
- /date-range/<region> - min/max order date for a state
- /summary          - aggregated dashboard summary

Legacy aliases (original dashboard client, same handlers):
- /states             -> /distinct-values
- /dateRange/<region> -> /date-range/<region>
- /dashboard          -> /summary   (state / startDate / endDate params)
"""

from flask import request, jsonify

from api.contracts.pydantic_models import (
    DateRangeParams,
    DistinctValuesParams,
    SummaryParams,
)
from routes.analytics import analytics_bp, get_sales_service, params_context
from routes.analytics._route_utils import logged_route
from schemas.api_contract import (
    serialize_date_bounds,
    serialize_distinct_values,
    serialize_summary,
)


@analytics_bp.route("/distinct-values", methods=["GET"])
@analytics_bp.route("/states", methods=["GET"])
@logged_route("distinct_values")
def distinct_values():
    """
    List distinct values of a filter dimension.

    Query params:
      - field: state (default), region, city, country, segment, category,
               sub_category, ship_mode

    Returns:
      ["California", "Texas", ...]
    """
    params = DistinctValuesParams.model_validate(request.args.to_dict())
    values = get_sales_service().list_distinct_values(params.field)
    return jsonify(serialize_distinct_values(values))


@analytics_bp.route("/date-range/<region>", methods=["GET"])
@analytics_bp.route("/dateRange/<region>", methods=["GET"])
@logged_route("date_range")
def date_range(region):
    """
    Order-date bounds for a state.

    The "All States" sentinel returns bounds over the whole dataset.

    Returns:
      {"minDate": "2014-01-03", "maxDate": "2017-12-30"}
      404 {"error": "State not found", ...} when no record matches
    """
    params = DateRangeParams.model_validate({'region': region}, context=params_context())
    bounds = get_sales_service().get_date_bounds(params.region)
    return jsonify(serialize_date_bounds(bounds))


@analytics_bp.route("/summary", methods=["GET"])
@analytics_bp.route("/dashboard", methods=["GET"])
@logged_route("summary")
def summary():
    """
    Aggregated dashboard summary.

    Query params:
      - region | state: state filter ("All States" or empty = no filter)
      - from | startDate: YYYY-MM-DD, inclusive
      - to | endDate: YYYY-MM-DD, inclusive
        (date filter applies only when both bounds are given)

    Returns:
      {
        "totalSales": 150,
        "quantitySold": 3,
        "discountPercentage": 13.3,
        "totalProfit": 15,
        "salesByCity": {"A": 100.0, "B": 50.0},
        "salesByProducts": [{"name": ..., "sales": ...}, ...],   # top 10
        "salesByCategory": {...},
        "salesBySubCategory": [{"name": ..., "value": ...}, ...],
        "salesBySegment": {...}
      }
      503 when the dataset is unavailable, 500 on aggregation failure
    """
    params = SummaryParams.model_validate(request.args.to_dict(), context=params_context())
    result = get_sales_service().get_summary(
        state=params.region,
        date_from=params.date_from,
        date_to=params.date_to,
    )
    return jsonify(serialize_summary(result))
