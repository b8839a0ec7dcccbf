"""
Admin and Health Endpoints

Endpoints:
- /ping   - connectivity check, touches nothing
- /health - dataset file status and record count
"""

from flask import current_app, jsonify

from routes.analytics import analytics_bp, get_sales_service
from services.data_loader import describe_dataset


@analytics_bp.route("/ping", methods=["GET"])
def ping():
    """Dead-simple connectivity check."""
    return jsonify({"ok": True})


@analytics_bp.route("/health", methods=["GET"])
def health():
    """
    Health check endpoint.

    Always 200: a missing dataset is reported as status "degraded" so the
    process is not restarted for a data problem.
    """
    dataset = describe_dataset(current_app.config['SALES_DATA_PATH'])
    record_count = get_sales_service().count_records() if dataset['exists'] else 0

    return jsonify({
        "status": "ok" if record_count > 0 else "degraded",
        "datasetPath": dataset['path'],
        "datasetAvailable": record_count > 0,
        "datasetSizeBytes": dataset['sizeBytes'],
        "recordCount": record_count,
    })
