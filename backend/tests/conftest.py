"""
Root pytest configuration for backend tests.

Provides:
- Record and dataset builders (make_record, write_dataset)
- Shared fixtures (app, client) bound to a temporary data file
"""

import json
import sys
from datetime import date
from pathlib import Path

# Add backend directory to Python path so imports like
# `from services.sales_aggregator import ...` and `from utils.normalize import ...` work
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

import pytest

from models.sales_record import SalesRecord


BUNDLED_DATA_PATH = backend_dir / "data" / "sales.json"


def make_record(**overrides) -> SalesRecord:
    """SalesRecord with plausible defaults; override any attribute by name."""
    values = {
        'row_id': 1,
        'order_id': 'CA-2016-000001',
        'order_date': date(2016, 6, 1),
        'ship_date': date(2016, 6, 4),
        'ship_mode': 'Standard Class',
        'customer_id': 'CG-12520',
        'customer_name': 'Claire Gute',
        'segment': 'Consumer',
        'country': 'United States',
        'city': 'Houston',
        'state': 'Texas',
        'postal_code': 77095,
        'region': 'Central',
        'product_id': 'OFF-PA-10000001',
        'category': 'Office Supplies',
        'sub_category': 'Paper',
        'product_name': 'Xerox 1967',
        'sales': 100.0,
        'quantity': 1,
        'discount': 0.0,
        'profit': 10.0,
    }
    values.update(overrides)
    return SalesRecord(**values)


def write_dataset(path: Path, records) -> Path:
    """Write records (SalesRecord or raw row dicts) as a JSON array file."""
    rows = [r.to_row() if isinstance(r, SalesRecord) else r for r in records]
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def sample_records():
    """
    Two states, three cities, mixed dates.

    Texas: 2016-01-10 .. 2016-03-15, California: 2017-05-01
    """
    return [
        make_record(row_id=1, state='Texas', city='Houston', order_date=date(2016, 1, 10),
                    product_name='Stapler', category='Office Supplies', sub_category='Fasteners',
                    segment='Consumer', sales=200.0, quantity=2, discount=0.2, profit=-20.0),
        make_record(row_id=2, state='Texas', city='Dallas', order_date=date(2016, 3, 15),
                    product_name='Desk Lamp', category='Furniture', sub_category='Furnishings',
                    segment='Corporate', sales=50.0, quantity=1, discount=0.0, profit=15.0),
        make_record(row_id=3, state='California', city='Los Angeles', order_date=date(2017, 5, 1),
                    product_name='Phone Case', category='Technology', sub_category='Phones',
                    segment='Home Office', sales=300.0, quantity=3, discount=0.1, profit=60.0),
    ]


@pytest.fixture
def data_file(tmp_path, sample_records):
    return write_dataset(tmp_path / "sales.json", sample_records)


@pytest.fixture
def app(data_file):
    """Create test Flask application reading the temporary data file."""
    from app import create_app

    app = create_app({'SALES_DATA_PATH': str(data_file)})
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()
