"""Error taxonomy for the annotation pipeline.

``ValidationError`` is the only error surfaced to callers. Every
``AIProviderFailure`` is recovered by the pipeline through the rule-based
fallback, so the provider adapter's job is to translate vendor exceptions
into this closed set.
"""

from typing import Any, Optional


class ValidationError(ValueError):
    """Caller-fixable input problem; maps to an HTTP 400 response."""

    def __init__(self, code: str, reason: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(reason)
        self.code = code
        self.reason = reason
        self.details = details or {}


class AIProviderFailure(RuntimeError):
    """Base class for every language-model provider failure."""


class NotConfigured(AIProviderFailure):
    """No API credential configured; raised before any network call."""


class Unauthorized(AIProviderFailure):
    pass


class RateLimited(AIProviderFailure):
    pass


class Forbidden(AIProviderFailure):
    pass


class ProviderError(AIProviderFailure):
    pass


class MalformedResponse(AIProviderFailure):
    pass


class EmptyResponse(AIProviderFailure):
    pass


class IntegrationNotConfigured(RuntimeError):
    """A vendor credential required by a pass-through endpoint is missing."""
