"""Pydantic request schemas for frontend-exposed API endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import AgentStatus


class AnnotateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Length and emptiness are enforced by the pipeline so errors carry codes.
    text: Optional[str] = None


class AgentUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[AgentStatus] = None
    config: Optional[dict[str, Any]] = None
    emoji: Optional[str] = None
    provider: Optional[str] = None

    # Defaults are not validated, so this only rejects an explicit null.
    @field_validator("name", "type", "description", "status", "config", "emoji", "provider")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value


class AgentEventCreate(BaseModel):
    agent: str = Field(min_length=1)
    status: str = Field(min_length=1)
    version: Optional[str] = None


class PaymentSessionCreate(BaseModel):
    # Presence is checked by the route to answer 400 like the other handlers.
    amount: Optional[int] = Field(default=None, gt=0)
    currency: Optional[str] = None


class LiveKitTokenRequest(BaseModel):
    identity: Optional[str] = None
    room_name: Optional[str] = Field(default=None, alias="roomName")
