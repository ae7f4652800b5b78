"""Dashboard queries and aggregates over the seeded platform tables."""

from typing import Any, Optional

from sqlmodel import Session, select

from .models import Activity, ActivityType, Agent, AgentStatus, Phase
from .utils import utc_iso_now


def compute_stats(session: Session) -> dict[str, int]:
    """Return active-agent count, completed task estimate, and mean phase progress."""

    agents = session.exec(select(Agent)).all()
    phases = session.exec(select(Phase)).all()
    active_agents = sum(1 for agent in agents if agent.status == AgentStatus.active)
    completed_tasks = sum(phase.progress // 10 for phase in phases)
    progress = 0
    if phases:
        total = sum(phase.progress for phase in phases)
        progress = int(total / len(phases) + 0.5)
    return {"activeAgents": active_agents, "completedTasks": completed_tasks, "progress": progress}


def list_recent_activities(session: Session, limit: int = 10) -> list[Activity]:
    stmt = select(Activity).order_by(Activity.timestamp.desc(), Activity.id.desc()).limit(max(0, limit))
    return list(session.exec(stmt).all())


def record_activity(session: Session, title: str, activity_type: ActivityType = ActivityType.info) -> Activity:
    activity = Activity(title=title, type=activity_type)
    session.add(activity)
    session.commit()
    session.refresh(activity)
    return activity


def update_agent(session: Session, agent_id: int, updates: dict[str, Any]) -> Optional[Agent]:
    agent = session.get(Agent, agent_id)
    if not agent:
        return None
    for key, value in updates.items():
        setattr(agent, key, value)
    agent.last_updated = utc_iso_now()
    session.add(agent)
    session.commit()
    session.refresh(agent)
    return agent
