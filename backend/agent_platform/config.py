"""Runtime configuration loaded from environment variables.

This module centralizes backend settings such as database URL, OpenAI
model options, annotation limits, and the vendor credentials whose presence
drives the seeded dashboard status.
"""

import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Typed settings object used across the backend."""

    env: str = os.getenv("ENV", "dev")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./data/dev.db")
    annotation_store: str = os.getenv("ANNOTATION_STORE", "sql").lower()
    annotation_max_text_length: int = int(os.getenv("ANNOTATION_MAX_TEXT_LENGTH", "10000"))
    openai_api_key: str = os.getenv("OPENAI_API_KEY", "")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o")
    openai_max_output_tokens: int = int(os.getenv("OPENAI_MAX_OUTPUT_TOKENS", "800"))
    openai_timeout_ms: int = int(os.getenv("OPENAI_TIMEOUT_MS", "30000"))
    openai_temperature: float = float(os.getenv("OPENAI_TEMPERATURE", "0.3"))
    frontend_url: str = os.getenv("FRONTEND_URL", "http://localhost:3000")
    gh_actions_token: str = os.getenv("GH_ACTIONS_TOKEN", "")
    gh_dispatch_url: str = os.getenv(
        "GH_DISPATCH_URL",
        "https://api.github.com/repos/YOUR-ORG/frontend/actions/workflows/run-frontend-agent.yml/dispatches",
    )
    gh_dispatch_timeout_ms: int = int(os.getenv("GH_DISPATCH_TIMEOUT_MS", "10000"))
    agent_step_delay_ms: int = int(os.getenv("AGENT_STEP_DELAY_MS", "2000"))
    livekit_url: str = os.getenv("LIVEKIT_URL", "")
    livekit_api_key: str = os.getenv("LIVEKIT_API_KEY", "")
    livekit_api_secret: str = os.getenv("LIVEKIT_API_SECRET", "")
    stripe_secret_key: str = os.getenv("STRIPE_SECRET_KEY", "")
    stripe_publishable_key: str = os.getenv("STRIPE_PUBLISHABLE_KEY", "")
    stripe_webhook_secret: str = os.getenv("STRIPE_WEBHOOK_SECRET", "")
    perspective_api_key: str = os.getenv("PERSPECTIVE_API_KEY", "")
    figma_token: str = os.getenv("FIGMA_TOKEN", "")
    cors_origins: list[str] = [x.strip() for x in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if x.strip()]


settings = Settings()
