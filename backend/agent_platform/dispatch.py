"""GitHub Actions workflow dispatch triggered by agent completion events."""

import logging
from typing import Optional

import httpx

from .config import settings

logger = logging.getLogger(__name__)

DISPATCH_TRIGGER_AGENT = "payment-specialist"


class WorkflowDispatcher:
    """Posts ``workflow_dispatch`` events for the frontend agent pipeline."""

    def __init__(
        self,
        token: Optional[str] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = settings.gh_actions_token if token is None else token
        self.url = url or settings.gh_dispatch_url
        self.timeout = settings.gh_dispatch_timeout_ms / 1000 if timeout is None else timeout
        self._transport = transport

    async def dispatch(self, version: Optional[str]) -> bool:
        """Trigger the workflow; returns False when skipped or failed."""

        if not self.token:
            logger.warning("GH_ACTIONS_TOKEN not found, skipping GitHub workflow dispatch")
            return False

        payload = {"ref": "main", "inputs": {"sdk_version": version or "latest"}}
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Failed to dispatch GitHub workflow: %s", exc)
            return False
        logger.info("GitHub workflow dispatched for %s completion", DISPATCH_TRIGGER_AGENT)
        return True
