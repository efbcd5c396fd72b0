"""Pydantic schemas for the REST API."""

from shelves.web.schemas.requests import CreateSessionRequest, EventBatchRequest
from shelves.web.schemas.responses import (
    DistanceSchema,
    DistancesSchema,
    DividerOutSchema,
    ErrorResponseSchema,
    GhostOutSchema,
    SessionSchema,
    SnapshotSchema,
)

__all__ = [
    # Requests
    "CreateSessionRequest",
    "EventBatchRequest",
    # Responses
    "DistanceSchema",
    "DistancesSchema",
    "DividerOutSchema",
    "ErrorResponseSchema",
    "GhostOutSchema",
    "SessionSchema",
    "SnapshotSchema",
]
