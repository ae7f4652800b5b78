"""LiveKit room-join access tokens."""

import uuid
from datetime import timedelta
from typing import Optional

from livekit import api

from .config import settings
from .errors import IntegrationNotConfigured

TOKEN_TTL = timedelta(hours=1)
DEFAULT_LIVEKIT_URL = "wss://your-livekit-url.com"


def issue_token(identity: Optional[str] = None, room_name: Optional[str] = None) -> dict[str, Optional[str]]:
    """Sign a room-join JWT; a random identity is used when none is given."""

    if not settings.livekit_api_key or not settings.livekit_api_secret:
        raise IntegrationNotConfigured("LIVEKIT_API_KEY and LIVEKIT_API_SECRET must be set.")
    user_identity = identity or f"guest_{uuid.uuid4().hex[:12]}"
    token = (
        api.AccessToken(settings.livekit_api_key, settings.livekit_api_secret)
        .with_identity(user_identity)
        .with_ttl(TOKEN_TTL)
        .with_grants(api.VideoGrants(room_join=True, room=room_name or ""))
        .to_jwt()
    )
    return {
        "identity": user_identity,
        "token": token,
        "url": settings.livekit_url or DEFAULT_LIVEKIT_URL,
        "roomName": room_name,
    }
