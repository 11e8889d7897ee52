"""
tpsp: Sao Paulo public transportation line status.

- core/: Configuration, logging, exceptions
- schemas/: Pydantic models for the status API and program output
- services/: Filtering and normalization of line statuses
- cli/: Command-line interface (Click), HTTP client (httpx), renderers
"""
