"""Built-in dashboard records inserted on first startup.

Agent, service and workflow statuses reflect which vendor credentials are
present in the environment when the seed runs.
"""

from typing import Any

from sqlmodel import Session, select

from .config import settings
from .models import (
    Activity,
    ActivityType,
    Agent,
    AgentStatus,
    Phase,
    PhaseStatus,
    Repository,
    RepositoryStatus,
    Service,
    ServiceStatus,
    Workflow,
    WorkflowStatus,
)
from .utils import is_configured


def _flag(value: str) -> str:
    return "configured" if is_configured(value) else ""


def agent_seed() -> list[dict[str, Any]]:
    livekit_ready = is_configured(settings.livekit_api_key) and is_configured(settings.livekit_api_secret)
    stripe_ready = is_configured(settings.stripe_secret_key) and is_configured(settings.stripe_publishable_key)
    return [
        {
            "type": "ui-ux",
            "name": "UI/UX Designer",
            "description": "FigmaAI + Uizard for design system automation",
            "emoji": "🎨",
            "provider": "FigmaAI + Uizard",
            "status": AgentStatus.active,
            "config": {
                "tool": "FigmaAI+Uizard",
                "output": "npm:@org/design-system",
                "figmaToken": _flag(settings.figma_token),
                "npmRegistry": "https://npm.pkg.github.com",
            },
        },
        {
            "type": "webrtc",
            "name": "WebRTC Engineer",
            "description": "LiveKitCLI + AgoraAI for real-time communication",
            "emoji": "📡",
            "provider": "LiveKitCLI + AgoraAI",
            "status": AgentStatus.active if livekit_ready else AgentStatus.configuring,
            "config": {
                "tool": "LiveKitCLI+AgoraAI",
                "output": "docker:webrtc-service",
                "liveKitUrl": settings.livekit_url,
                "liveKitApiKey": _flag(settings.livekit_api_key),
                "liveKitApiSecret": _flag(settings.livekit_api_secret),
            },
        },
        {
            "type": "backend",
            "name": "Backend Developer",
            "description": "Copilot + OpenAI Functions for backend development",
            "emoji": "⚙️",
            "provider": "Copilot + OpenAI Functions",
            "status": AgentStatus.active,
            "config": {
                "tool": "Copilot+OpenAIFunctions",
                "output": "docker:backend-api",
                "openaiKey": _flag(settings.openai_api_key),
                "databaseUrl": _flag(settings.database_url),
            },
        },
        {
            "type": "frontend",
            "name": "Frontend Developer",
            "description": "Locofy + MutableAI for frontend development",
            "emoji": "💻",
            "provider": "Locofy + MutableAI",
            "status": AgentStatus.active,
            "config": {
                "tool": "Locofy+MutableAI",
                "output": "src/pages/**/*.tsx",
                "frontendUrl": settings.frontend_url,
                "features": {"chat": True, "gifts": True, "livePreview": True, "realTimeNotifications": True},
            },
        },
        {
            "type": "payment",
            "name": "Payment Specialist",
            "description": "StripeIQ + PlaidAI for payment processing",
            "emoji": "💳",
            "provider": "StripeIQ + PlaidAI",
            "status": AgentStatus.active if stripe_ready else AgentStatus.configuring,
            "config": {
                "tool": "StripeIQ+PlaidAI",
                "output": "npm:@org/payments-workspace",
                "stripePublishableKey": _flag(settings.stripe_publishable_key),
                "stripeSecretKey": _flag(settings.stripe_secret_key),
                "webhookSecret": _flag(settings.stripe_webhook_secret),
                "currency": "USD",
                "successUrl": f"{settings.frontend_url}/success",
                "cancelUrl": f"{settings.frontend_url}/cancel",
            },
        },
        {
            "type": "moderation",
            "name": "Moderation Agent",
            "description": "OpenAI + PerspectiveAPI for content moderation",
            "emoji": "🛡️",
            "provider": "OpenAI + PerspectiveAPI",
            "status": AgentStatus.active if is_configured(settings.openai_api_key) else AgentStatus.configuring,
            "config": {
                "tool": "OpenAI+PerspectiveAPI",
                "output": "npm:@org/moderation-service",
                "openaiKey": _flag(settings.openai_api_key),
                "perspectiveKey": _flag(settings.perspective_api_key),
                "toxicityThreshold": 0.8,
                "adultContentThreshold": 0.7,
                "enableAutoModeration": True,
            },
        },
        {
            "type": "devops",
            "name": "DevOps Engineer",
            "description": "HarnessAI + Humanitec for DevOps automation",
            "emoji": "🚀",
            "provider": "HarnessAI + Humanitec",
            "status": AgentStatus.active if is_configured(settings.gh_actions_token) else AgentStatus.pending,
            "config": {
                "tool": "HarnessAI+Humanitec",
                "output": "k8s:deployment-manifests",
                "githubToken": _flag(settings.gh_actions_token),
                "deploymentEnvironment": settings.env,
            },
        },
    ]


PHASE_SEED: list[dict[str, Any]] = [
    {
        "name": "Phase 0: Organizational Setup",
        "description": "GitHub organization, registries, and namespace configuration",
        "status": PhaseStatus.complete,
        "progress": 100,
        "order": 0,
    },
    {
        "name": "Phase 1: Define & Configure AI Agents",
        "description": "Configure 7 specialized AI agents for platform automation",
        "status": PhaseStatus.in_progress,
        "progress": 85,
        "order": 1,
    },
    {
        "name": "Phase 2: Agent Hand-Off Blueprints",
        "description": "Establish communication patterns between agents",
        "status": PhaseStatus.in_progress,
        "progress": 35,
        "order": 2,
    },
    {
        "name": "Phase 3: Integration & Verification",
        "description": "Testing, monitoring, and security automation",
        "status": PhaseStatus.pending,
        "progress": 15,
        "order": 3,
    },
]


def repository_seed() -> list[dict[str, Any]]:
    payments = RepositoryStatus.active if is_configured(settings.stripe_secret_key) else RepositoryStatus.warning
    return [
        {"name": "design-system", "status": RepositoryStatus.active},
        {"name": "webrtc-client", "status": RepositoryStatus.active},
        {"name": "backend", "status": RepositoryStatus.active},
        {"name": "frontend", "status": RepositoryStatus.active},
        {"name": "payments", "status": payments},
        {"name": "moderation", "status": RepositoryStatus.active},
    ]


def service_seed() -> list[dict[str, Any]]:
    def health(value: str) -> ServiceStatus:
        return ServiceStatus.healthy if is_configured(value) else ServiceStatus.warning

    return [
        {"name": "API Gateway", "status": ServiceStatus.healthy},
        {"name": "Database", "status": health(settings.database_url)},
        {"name": "WebRTC SFU", "status": health(settings.livekit_url)},
        {"name": "Payment Service", "status": health(settings.stripe_secret_key)},
        {"name": "Moderation AI", "status": health(settings.openai_api_key)},
    ]


def activity_seed() -> list[dict[str, Any]]:
    stripe = is_configured(settings.stripe_secret_key)
    livekit = is_configured(settings.livekit_url)
    return [
        {"title": "Agent roster loaded successfully", "type": ActivityType.success},
        {"title": "Backend API endpoints updated", "type": ActivityType.success},
        {
            "title": f"Payment agent {'configured' if stripe else 'pending configuration'}",
            "type": ActivityType.success if stripe else ActivityType.warning,
        },
        {"title": "Database connected", "type": ActivityType.success},
        {
            "title": f"WebRTC {'service ready' if livekit else 'configuration needed'}",
            "type": ActivityType.success if livekit else ActivityType.warning,
        },
        {"title": "Frontend integration verified", "type": ActivityType.success},
    ]


def workflow_seed() -> list[dict[str, Any]]:
    def ready(value: str) -> WorkflowStatus:
        return WorkflowStatus.active if is_configured(value) else WorkflowStatus.pending

    return [
        {
            "from_agent": "UI/UX Designer",
            "to_agent": "Frontend Developer",
            "description": "Design tokens and component library",
            "artifact": "@org/design-system",
            "status": WorkflowStatus.active,
        },
        {
            "from_agent": "Backend Developer",
            "to_agent": "Frontend Developer",
            "description": "API specification and SDKs",
            "artifact": "openapi.json",
            "status": WorkflowStatus.active,
        },
        {
            "from_agent": "Payment Specialist",
            "to_agent": "Backend Developer",
            "description": "Payment processing integration",
            "artifact": "stripe-webhook-handlers",
            "status": ready(settings.stripe_secret_key),
        },
        {
            "from_agent": "WebRTC Engineer",
            "to_agent": "Frontend Developer",
            "description": "Real-time communication client",
            "artifact": "@org/webrtc-client",
            "status": ready(settings.livekit_url),
        },
        {
            "from_agent": "DevOps Engineer",
            "to_agent": "All Agents",
            "description": "Deployment and monitoring automation",
            "artifact": "k8s:deployment-manifests",
            "status": ready(settings.gh_actions_token),
        },
    ]


def seed_dashboard(session: Session) -> bool:
    """Insert the demo roster when the agent table is empty.

    Returns True when rows were inserted.
    """

    if session.exec(select(Agent)).first() is not None:
        return False
    session.add_all([Agent(**item) for item in agent_seed()])
    session.add_all([Phase(**item) for item in PHASE_SEED])
    session.add_all([Repository(**item) for item in repository_seed()])
    session.add_all([Service(**item) for item in service_seed()])
    session.add_all([Activity(**item) for item in activity_seed()])
    session.add_all([Workflow(**item) for item in workflow_seed()])
    session.commit()
    return True
