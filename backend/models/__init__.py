"""
Models package - in-memory dataset records
"""
from models.sales_record import SalesRecord

__all__ = [
    'SalesRecord',
]
