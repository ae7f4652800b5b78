from enum import Enum
from typing import Any, Optional

from sqlmodel import Field, JSON, SQLModel

from .utils import utc_iso_now


class AgentStatus(str, Enum):
    pending = "pending"
    configuring = "configuring"
    active = "active"
    error = "error"


class PhaseStatus(str, Enum):
    pending = "pending"
    in_progress = "in-progress"
    complete = "complete"


class RepositoryStatus(str, Enum):
    pending = "pending"
    active = "active"
    warning = "warning"
    error = "error"


class ServiceStatus(str, Enum):
    healthy = "healthy"
    warning = "warning"
    error = "error"


class ActivityType(str, Enum):
    info = "info"
    success = "success"
    warning = "warning"
    error = "error"


class WorkflowStatus(str, Enum):
    pending = "pending"
    active = "active"
    complete = "complete"


class Agent(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    type: str = Field(index=True)
    description: str
    status: AgentStatus = Field(default=AgentStatus.pending)
    config: dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    emoji: str
    provider: str
    last_updated: str = Field(default_factory=utc_iso_now)


class Phase(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str
    status: PhaseStatus = Field(default=PhaseStatus.pending)
    progress: int = Field(default=0)
    order: int


class Repository(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    status: RepositoryStatus = Field(default=RepositoryStatus.pending)
    is_private: bool = Field(default=True)


class Service(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    status: ServiceStatus = Field(default=ServiceStatus.healthy)
    last_check: str = Field(default_factory=utc_iso_now)


class Activity(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    timestamp: str = Field(default_factory=utc_iso_now)
    type: ActivityType = Field(default=ActivityType.info)


class Workflow(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    from_agent: str
    to_agent: str
    description: str
    artifact: str
    status: WorkflowStatus = Field(default=WorkflowStatus.pending)


class Annotation(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    input_text: str
    result_json: dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    created_at: str = Field(default_factory=utc_iso_now)
