"""Pydantic schemas for handler responses."""
from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

JSON_HEADERS = {"Content-Type": "application/json"}

SUCCESS_DATA = "Client Build success!"
FAILURE_PREFIX = "Build failed! "


class ProxyResponse(BaseModel):
    """API gateway proxy integration response."""

    statusCode: int
    headers: dict[str, str] = Field(default_factory=lambda: dict(JSON_HEADERS))
    body: str


class ResponseEnvelope(BaseModel):
    """Uniform status/message/data wrapper returned by the search handler."""

    model_config = ConfigDict(frozen=True)

    status: int = Field(ge=100, le=599)
    message: Literal["success", "error"]
    data: str

    def proxy_response(self) -> ProxyResponse:
        """Wrap the envelope as the JSON body of a proxy response."""
        return ProxyResponse(statusCode=self.status, body=self.model_dump_json())


class ProbeSuccess(BaseModel):
    """Info call succeeded; version metadata as reported by the service."""

    model_config = ConfigDict(frozen=True)

    distribution: str | None = None
    number: str | None = None

    def to_envelope(self) -> ResponseEnvelope:
        return ResponseEnvelope(status=200, message="success", data=SUCCESS_DATA)


class ProbeFailure(BaseModel):
    """Client construction or the info call raised."""

    model_config = ConfigDict(frozen=True)

    error: str

    def to_envelope(self) -> ResponseEnvelope:
        # Always 200: callers tell failures apart by `message`, not status.
        return ResponseEnvelope(status=200, message="error", data=f"{FAILURE_PREFIX}{self.error}")


ProbeResult = Union[ProbeSuccess, ProbeFailure]
