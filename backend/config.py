import os
from pathlib import Path
from dotenv import load_dotenv

from constants import ALL_STATES, TOP_PRODUCTS_LIMIT as DEFAULT_TOP_PRODUCTS_LIMIT

load_dotenv()

BACKEND_DIR = Path(__file__).resolve().parent


def _get_sales_data_path():
    """
    Resolve SALES_DATA_PATH.

    Relative paths are resolved against the backend directory so the app
    finds its data file regardless of the working directory it starts from.
    Missing files are NOT an error here: the loader fails open and logs.
    """
    raw = os.getenv('SALES_DATA_PATH', 'data/sales.json')
    path = Path(raw)
    if not path.is_absolute():
        path = BACKEND_DIR / path
    return str(path)


class Config:
    SALES_DATA_PATH = _get_sales_data_path()

    API_PREFIX = os.getenv('API_PREFIX', '/api')
    ALL_STATES_SENTINEL = os.getenv('ALL_STATES_SENTINEL', ALL_STATES)
    TOP_PRODUCTS_LIMIT = int(os.getenv('TOP_PRODUCTS_LIMIT', str(DEFAULT_TOP_PRODUCTS_LIMIT)))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Sampled access log (api/middleware/request_logging.py)
    REQUEST_LOG_ENABLED = os.getenv('REQUEST_LOG_ENABLED', 'true').lower() == 'true'
    REQUEST_LOG_SAMPLE_RATE = os.getenv('REQUEST_LOG_SAMPLE_RATE', '0.0')
    REQUEST_LOG_ENDPOINTS = os.getenv('REQUEST_LOG_ENDPOINTS', '')

    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'
    PORT = int(os.getenv('PORT', '3001'))
