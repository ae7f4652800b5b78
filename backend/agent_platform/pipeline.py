"""Text-annotation pipeline with tiered fallback.

The AI annotator is tried first. Any failure there is logged and replaced
by the rule-based result prefixed with a degradation notice. Every outcome
is appended to the annotation store on a best-effort basis.
"""

import logging
from typing import Optional

from .annotators.base import ANALYSIS_METHOD_AI, ANALYSIS_METHOD_BASIC, AnalysisRecord, TextAnnotator
from .annotators.rule_based import BasicAnnotator
from .config import settings
from .errors import ValidationError
from .store import AnnotationStore
from .utils import utc_iso_now

logger = logging.getLogger(__name__)


def fallback_notice(provider_name: str) -> str:
    return f"Note: Using basic analysis ({provider_name} unavailable)"


class AnnotationPipeline:
    """Owns the AI-then-basic annotation policy and outcome logging."""

    def __init__(
        self,
        ai_annotator: TextAnnotator,
        store: AnnotationStore,
        basic_annotator: Optional[BasicAnnotator] = None,
        max_text_length: Optional[int] = None,
    ) -> None:
        self.ai_annotator = ai_annotator
        self.store = store
        self.basic_annotator = basic_annotator or BasicAnnotator()
        self.max_text_length = settings.annotation_max_text_length if max_text_length is None else max_text_length

    def validate(self, text: str) -> None:
        if not isinstance(text, str) or not text:
            raise ValidationError(
                code="INVALID_TEXT",
                reason="Text field is required and must be a non-empty string",
            )
        if len(text) > self.max_text_length:
            raise ValidationError(
                code="TEXT_TOO_LONG",
                reason=f"Text exceeds maximum length of {self.max_text_length} characters",
                details={"maxLength": self.max_text_length, "actualLength": len(text)},
            )

    async def annotate(self, text: str) -> dict[str, list[str]]:
        self.validate(text)

        try:
            annotations = list(await self.ai_annotator.produce(text))
            method = ANALYSIS_METHOD_AI
        except Exception as exc:
            logger.warning(
                "AI annotation failed, falling back to basic analysis provider=%s reason=%s: %s",
                self.ai_annotator.provider_name,
                type(exc).__name__,
                str(exc)[:160],
            )
            annotations = [fallback_notice(self.ai_annotator.provider_name), *self.basic_annotator.produce(text)]
            method = ANALYSIS_METHOD_BASIC

        record = AnalysisRecord.build(
            input_text=text,
            annotations=annotations,
            analysis_method=method,
            created_at=utc_iso_now(),
        )
        try:
            self.store.append(record)
        except Exception:
            logger.exception("Failed to log annotation to store method=%s", method)

        return {"annotations": annotations}
