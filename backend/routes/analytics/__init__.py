"""
Analytics API Routes - Split into domain-specific modules

This package organizes the analytics endpoints into logical domains:
- sales.py: distinct values, date range, summary (+ legacy aliases)
- admin.py: health and ping endpoints

All modules share the same blueprint (analytics_bp), registered by
create_app() under app.config['API_PREFIX'].
"""

from functools import partial

from flask import Blueprint, current_app

from schemas.api_contract import API_CONTRACT_HEADER, CURRENT_API_CONTRACT_VERSION
from services.data_loader import load_sales_records
from services.sales_service import SalesQueryService

# Create the shared blueprint
analytics_bp = Blueprint('analytics', __name__)


@analytics_bp.after_request
def add_contract_version_header(response):
    """Add X-API-Contract-Version header to all analytics responses."""
    response.headers[API_CONTRACT_HEADER] = CURRENT_API_CONTRACT_VERSION
    return response


def get_sales_service() -> SalesQueryService:
    """
    Build a query service bound to the app's configured data file.

    A new service per request: nothing is shared between requests, and
    each call re-reads the file.
    """
    path = current_app.config['SALES_DATA_PATH']
    return SalesQueryService(
        loader=partial(load_sales_records, path),
        top_n=current_app.config['TOP_PRODUCTS_LIMIT'],
    )


def params_context() -> dict:
    """Validation context for param models (configurable "All States" sentinel)."""
    return {'all_states': current_app.config['ALL_STATES_SENTINEL']}


# Import all route modules to register their routes with the blueprint
from routes.analytics import sales  # noqa: E402,F401
from routes.analytics import admin  # noqa: E402,F401
