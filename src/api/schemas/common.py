"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned for every failure status."""

    error: str


class StatusResponse(BaseModel):
    """Bare success acknowledgement."""

    status: str = "ok"
