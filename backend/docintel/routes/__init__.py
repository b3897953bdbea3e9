"""
Routes package for API endpoints.

This package provides:
- Stage catalog lookups
- Stage validation, trust score, risk and aggregation endpoints
- Dependency providers for the scoring services
"""

__all__ = [
    "catalog", "documents", "dependencies"
]
