"""
Document Intelligence Engine - Backend Application

This package scores the documents a startup uploads to its data room and
reports how ready the startup is to be shown to investors.

Core Components:
- schemas: Pydantic records for catalog entries, analyses and reports
- services: Stage catalog, trust score, risk detection, aggregation, cache
- routes: REST API endpoints exposing the services
- main: FastAPI application setup, middleware and error handlers
- utils: Configuration and logging
- data: The stage requirement catalog
"""

# Version
__version__ = "1.0.0"

__all__ = [
    "main",
    "routes",
    "schemas",
    "services",
    "utils",
]
