"""Pydantic models shared across endpoints."""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    model_config = ConfigDict(extra="forbid")

    message: str
