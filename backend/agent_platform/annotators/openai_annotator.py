"""OpenAI-backed annotator with a strict JSON-object output contract.

The adapter issues a single chat completion per call and translates every
``openai`` SDK failure into the closed ``AIProviderFailure`` taxonomy so
the pipeline can fall back without inspecting vendor exceptions.
"""

import asyncio
import json
import re
from typing import Any, Optional

from openai import (
    APIError,
    AuthenticationError,
    OpenAI,
    PermissionDeniedError,
    RateLimitError,
)

from ..config import settings
from ..errors import (
    EmptyResponse,
    Forbidden,
    MalformedResponse,
    NotConfigured,
    ProviderError,
    RateLimited,
    Unauthorized,
)
from .base import TextAnnotator

SYSTEM_PROMPT = """You are an expert text analyzer for an AI agent platform. Analyze the provided text and return annotations as a JSON array of strings. Focus on:

1. Technical complexity and readability
2. Platform-specific terminology (AI, agents, workflows, automation, orchestration)
3. Sentiment and tone analysis
4. Action items and requirements identification
5. Technical concepts and frameworks mentioned
6. Code quality indicators if code is present
7. Security or compliance considerations if relevant

Return your analysis as a JSON object with this exact format:
{
  "annotations": [
    "annotation1",
    "annotation2",
    "annotation3"
  ]
}

Order annotations from most to least important. Keep annotations concise but informative. Focus on actionable insights."""


class OpenAIAnnotator(TextAnnotator):
    """Annotator that calls OpenAI chat completions in JSON mode."""

    provider_name = "OpenAI"

    def __init__(self, api_key: Optional[str] = None, client: Any = None) -> None:
        # None defers to settings.openai_api_key at call time.
        self._api_key = api_key
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            api_key = settings.openai_api_key if self._api_key is None else self._api_key
            if not api_key:
                raise NotConfigured("OpenAI API key not configured")
            self._client = OpenAI(
                api_key=api_key,
                timeout=settings.openai_timeout_ms / 1000,
                max_retries=0,
            )
        return self._client

    async def produce(self, text: str) -> list[str]:
        client = self._get_client()
        try:
            response = await asyncio.to_thread(self._create_completion, client, text)
        except AuthenticationError as exc:
            raise Unauthorized("Invalid OpenAI API key") from exc
        except PermissionDeniedError as exc:
            raise Forbidden("OpenAI API access forbidden - check your API key permissions") from exc
        except RateLimitError as exc:
            raise RateLimited("OpenAI API rate limit exceeded") from exc
        except APIError as exc:
            raise ProviderError(f"OpenAI API error: {exc.message}") from exc
        return self._parse_annotations(self._extract_text(response))

    def _create_completion(self, client: Any, text: str) -> Any:
        return client.chat.completions.create(
            model=settings.openai_model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            response_format={"type": "json_object"},
            temperature=settings.openai_temperature,
            max_tokens=settings.openai_max_output_tokens,
        )

    def _extract_text(self, response: Any) -> str:
        choices = getattr(response, "choices", None) or []
        if not choices:
            raise EmptyResponse("Empty response from OpenAI")
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not content or not content.strip():
            raise EmptyResponse("Empty response from OpenAI")
        return content

    def _parse_annotations(self, text: str) -> list[str]:
        try:
            payload = json.loads(self._strip_code_fence(text))
        except json.JSONDecodeError as exc:
            raise MalformedResponse("Failed to parse OpenAI response") from exc
        if not isinstance(payload, dict):
            raise MalformedResponse("Invalid response format from OpenAI: expected a JSON object")
        annotations = payload.get("annotations")
        if not isinstance(annotations, list):
            raise MalformedResponse("Invalid response format from OpenAI: missing annotations list")
        if not all(isinstance(item, str) for item in annotations):
            raise MalformedResponse("Invalid response format from OpenAI: annotations must be strings")
        return list(annotations)

    def _strip_code_fence(self, text: str) -> str:
        fenced = re.match(r"^```(?:json)?\s*(.*?)\s*```$", text.strip(), re.DOTALL | re.IGNORECASE)
        if fenced:
            return fenced.group(1).strip()
        return text.strip()
