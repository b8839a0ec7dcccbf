"""
API package - request boundary layer.

This package provides:
- Pydantic param models (contracts/)
- Global middleware (request_id, error_envelope, request_logging)
"""
