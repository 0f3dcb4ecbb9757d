"""
KB Notes Backend — Response Envelopes
======================================

What:  The two uniform response shapes every endpoint uses.
Why:   Clients branch on a single top-level key: `data` on success,
       `error` on failure.

Examples:
    {"data": [{"id": 1, "name": "Raspberry_Pi", "dbase": "pi_kb"}]}
    {"error": {"code": 404, "message": "Folder ID 999 not found"}}
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    """Success wrapper: the payload lives under `data`."""
    data: T


class ErrorBody(BaseModel):
    code: int = Field(description="HTTP status code, repeated in the body")
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    What:  Error wrapper returned by every exception handler.
    Why:   One structure for 404s, unknown routes and unexpected failures.
    """
    error: ErrorBody

    @classmethod
    def build(cls, code: int, message: str) -> "ErrorResponse":
        return cls(error=ErrorBody(code=code, message=message))


class HealthStatus(BaseModel):
    """
    What:  Liveness report returned (inside a data envelope) by GET /health.

    The API serves from memory, so an unreachable database only degrades
    the status instead of failing the check.
    """
    status: str = Field(description="healthy or degraded")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    folders: int = Field(description="Number of folders in the served catalog")
    uptime_seconds: float = Field(description="Seconds since service started")
