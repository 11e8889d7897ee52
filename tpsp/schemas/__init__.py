"""
Schemas.

Pydantic models for the upstream status API and for the JSON output.
"""

from tpsp.schemas.line_status import (
    LineItem,
    OutputLine,
    OutputResponse,
    ServiceData,
    StatusResponse,
)

__all__ = [
    "LineItem",
    "OutputLine",
    "OutputResponse",
    "ServiceData",
    "StatusResponse",
]
