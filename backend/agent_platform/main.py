"""FastAPI application entrypoint and REST surface.

Exposes the dashboard read/update endpoints, the annotation pipeline, the
Stripe and LiveKit pass-throughs, and the agent-event hook that triggers
CI dispatch.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any

import stripe
from fastapi import Depends, FastAPI, Header, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from sqlmodel import Session, select

from .annotators.base import AnalysisRecord
from .annotators.openai_annotator import OpenAIAnnotator
from .config import settings
from .dashboard import compute_stats, list_recent_activities, record_activity, update_agent
from .db import engine, init_db
from .dispatch import DISPATCH_TRIGGER_AGENT, WorkflowDispatcher
from .errors import IntegrationNotConfigured, ValidationError
from .livekit_tokens import issue_token
from .models import ActivityType, Agent, Phase, Repository, Service, Workflow
from .payments import construct_webhook_event, create_checkout_session, handle_webhook_event
from .pipeline import AnnotationPipeline
from .schemas import AgentEventCreate, AgentUpdate, AnnotateRequest, LiveKitTokenRequest, PaymentSessionCreate
from .seed import seed_dashboard
from .store import DEFAULT_RECENT_LIMIT, AnnotationStore, build_annotation_store
from .utils import utc_iso_now

logger = logging.getLogger(__name__)

SERVICE_NAME = "agent-platform-api"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    with Session(engine) as session:
        seed_dashboard(session)
    yield


app = FastAPI(title="Agent Platform API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

annotation_store = build_annotation_store(lambda: Session(engine))
# One client and connection pool shared by every annotate request.
ai_annotator = OpenAIAnnotator()


def get_session():
    with Session(engine) as session:
        yield session


def get_annotation_store() -> AnnotationStore:
    return annotation_store


def get_ai_annotator() -> OpenAIAnnotator:
    return ai_annotator


def get_pipeline(
    store: AnnotationStore = Depends(get_annotation_store),
    annotator: OpenAIAnnotator = Depends(get_ai_annotator),
) -> AnnotationPipeline:
    return AnnotationPipeline(ai_annotator=annotator, store=store)


def get_dispatcher() -> WorkflowDispatcher:
    return WorkflowDispatcher()


@app.get("/", response_class=HTMLResponse)
def index():
    endpoints = [
        ("GET", "/health", "Health check"),
        ("POST", "/api/annotate", 'Annotate text with AI analysis. Body: {"text": "your text here"}'),
        ("GET", "/api/annotations", "Get recent annotations"),
        ("GET", "/api/stats", "Get platform statistics"),
        ("GET", "/api/agents", "Get all agents"),
        ("GET", "/api/workflows", "Get all workflows"),
        ("GET", "/api/activities", "Get recent activities"),
        ("POST", "/payments/create-session", "Create a Stripe Checkout session"),
        ("POST", "/api/livekit/token", "Issue a LiveKit room-join token"),
    ]
    items = "\n".join(
        f'<div class="endpoint"><span class="method">{method}</span> <code>{path}</code> - {label}</div>'
        for method, path, label in endpoints
    )
    return (
        "<!DOCTYPE html><html><head><title>Agent Platform API</title></head><body>"
        "<h1>Agent Platform API</h1>"
        "<p>This service provides AI-powered text annotation and agent dashboard data.</p>"
        f"<h2>Available Endpoints</h2>{items}"
        "<p><strong>Status:</strong> Service is running and ready to accept requests.</p>"
        "</body></html>"
    )


@app.get("/health")
@app.get("/api/health")
def health():
    return {"status": "healthy", "timestamp": utc_iso_now(), "service": SERVICE_NAME}


@app.get("/api/stats")
def get_stats(session: Session = Depends(get_session)):
    return compute_stats(session)


@app.get("/api/agents")
def list_agents(session: Session = Depends(get_session)):
    return [agent.model_dump() for agent in session.exec(select(Agent).order_by(Agent.id)).all()]


@app.get("/api/agents/{agent_id}")
def get_agent(agent_id: int, session: Session = Depends(get_session)):
    agent = session.get(Agent, agent_id)
    if not agent:
        raise HTTPException(status_code=404, detail="Agent not found")
    return agent.model_dump()


@app.patch("/api/agents/{agent_id}")
def patch_agent(agent_id: int, payload: AgentUpdate, session: Session = Depends(get_session)):
    agent = update_agent(session, agent_id, payload.model_dump(exclude_unset=True))
    if not agent:
        raise HTTPException(status_code=404, detail="Agent not found")
    return agent.model_dump()


@app.get("/api/phases")
def list_phases(session: Session = Depends(get_session)):
    return [phase.model_dump() for phase in session.exec(select(Phase).order_by(Phase.order)).all()]


@app.get("/api/repositories")
def list_repositories(session: Session = Depends(get_session)):
    return [repo.model_dump() for repo in session.exec(select(Repository).order_by(Repository.id)).all()]


@app.get("/api/services")
def list_services(session: Session = Depends(get_session)):
    return [service.model_dump() for service in session.exec(select(Service).order_by(Service.id)).all()]


@app.get("/api/activities")
def list_activities(limit: int = 10, session: Session = Depends(get_session)):
    return [activity.model_dump() for activity in list_recent_activities(session, limit)]


@app.get("/api/workflows")
def list_workflows(session: Session = Depends(get_session)):
    return [workflow.model_dump() for workflow in session.exec(select(Workflow).order_by(Workflow.id)).all()]


@app.post("/api/annotate")
async def annotate_text(payload: AnnotateRequest, pipeline: AnnotationPipeline = Depends(get_pipeline)):
    try:
        return await pipeline.annotate(payload.text or "")
    except ValidationError as exc:
        return JSONResponse(
            status_code=400,
            content={"message": exc.reason, "code": exc.code, "details": exc.details},
        )
    except Exception as exc:
        logger.exception("Annotation request failed")
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to annotate text", "code": "ANNOTATION_ERROR", "details": {"error": str(exc)}},
        )


@app.get("/api/annotations")
def list_annotations(limit: int = DEFAULT_RECENT_LIMIT, store: AnnotationStore = Depends(get_annotation_store)):
    return [_serialize_record(record) for record in store.list_recent(limit)]


@app.post("/payments/create-session")
async def create_payment_session(payload: PaymentSessionCreate):
    if not payload.amount or not payload.currency:
        return JSONResponse(status_code=400, content={"message": "Amount and currency are required"})
    try:
        return await asyncio.to_thread(create_checkout_session, payload.amount, payload.currency)
    except IntegrationNotConfigured as exc:
        return JSONResponse(status_code=500, content={"message": "Stripe configuration missing", "error": str(exc)})
    except stripe.StripeError as exc:
        logger.error("Payment session creation failed: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to create payment session", "error": str(exc)},
        )


@app.post("/payments/webhook")
async def stripe_webhook(request: Request, stripe_signature: str | None = Header(default=None)):
    payload = await request.body()
    try:
        event = construct_webhook_event(payload, stripe_signature)
    except IntegrationNotConfigured as exc:
        logger.error("Stripe webhook secret not configured")
        return PlainTextResponse(str(exc), status_code=500)
    except (ValueError, stripe.SignatureVerificationError) as exc:
        logger.error("Webhook signature verification failed: %s", exc)
        return PlainTextResponse(f"Webhook Error: {exc}", status_code=400)
    handle_webhook_event(event)
    return {"received": True}


@app.post("/api/token")
def livekit_token(payload: LiveKitTokenRequest):
    try:
        issued = issue_token(payload.identity)
    except IntegrationNotConfigured as exc:
        return JSONResponse(status_code=500, content={"error": str(exc)})
    return {"token": issued["token"]}


@app.post("/api/livekit/token")
def livekit_room_token(payload: LiveKitTokenRequest):
    try:
        return issue_token(payload.identity, payload.room_name)
    except IntegrationNotConfigured as exc:
        return JSONResponse(status_code=500, content={"error": str(exc)})


@app.post("/agent-events")
async def agent_event(
    payload: AgentEventCreate,
    session: Session = Depends(get_session),
    dispatcher: WorkflowDispatcher = Depends(get_dispatcher),
):
    if payload.status != "completed":
        return Response(status_code=204)

    record_activity(session, f"Agent {payload.agent} completed", ActivityType.success)
    dispatched = False
    if payload.agent == DISPATCH_TRIGGER_AGENT:
        dispatched = await dispatcher.dispatch(payload.version)
    return {"ok": True, "dispatched": dispatched}


def _serialize_record(record: AnalysisRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "inputText": record.input_text,
        "resultJson": record.result_json(),
        "createdAt": record.created_at,
    }
