"""
Flask Application Factory - Sales Dashboard Analytics API

Read-only analytics over a flat sales file:
- No database, no cache: every request re-reads the data file
- Analytics API is public (no authentication)
- Responses are JSON; the dashboard client renders charts from them
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS

from config import Config

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s'


def configure_logging(level: str) -> None:
    """
    Install a root handler that tags lines with the request id.

    No-op if the root logger already has handlers (gunicorn, pytest).
    """
    from api.middleware import RequestIdLogFilter

    handler = logging.StreamHandler()
    handler.addFilter(RequestIdLogFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler])


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    # Ordered groupings (salesBySubCategory, salesByProducts) must keep their order
    app.json.sort_keys = False

    configure_logging(app.config['LOG_LEVEL'])

    api_prefix = app.config['API_PREFIX'].rstrip('/')

    # Initialize CORS - allow all origins (public read-only API)
    CORS(app,
         resources={rf"{api_prefix}/*": {"origins": "*"}},
         methods=["GET", "OPTIONS"],
         allow_headers=["Content-Type", "X-Request-ID"],
         expose_headers=["X-Request-ID", "X-API-Contract-Version"],
         supports_credentials=False,
         send_wildcard=True)

    # === API MIDDLEWARE ===
    # Request ID injection for request correlation and debugging
    from api.middleware import setup_request_id_middleware
    setup_request_id_middleware(app)

    # Request usage logging (sampling + watchlist)
    from api.middleware import setup_request_logging_middleware
    setup_request_logging_middleware(app)

    # Error envelope for service, validation, HTTP and unhandled errors
    from api.middleware import setup_error_handlers
    setup_error_handlers(app)

    from routes.analytics import analytics_bp
    app.register_blueprint(analytics_bp, url_prefix=api_prefix or None)

    @app.route("/")
    def root():
        return jsonify({
            "name": "Sales Dashboard Analytics API",
            "apiPrefix": api_prefix or "/",
            "endpoints": [
                f"{api_prefix}/distinct-values",
                f"{api_prefix}/date-range/<region>",
                f"{api_prefix}/summary",
                f"{api_prefix}/health",
            ],
        })

    logging.getLogger('sales.app').info(
        "app_created data_path=%s api_prefix=%s",
        app.config['SALES_DATA_PATH'], api_prefix or '/',
    )
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=Config.PORT, debug=Config.DEBUG)
