"""
Common utilities for route handlers.

Provides shared functionality to reduce code duplication:
- Credential extraction
- Rate limiting utilities
- Request validation
- Response formatting
"""
