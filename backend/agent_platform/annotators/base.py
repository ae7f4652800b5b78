"""Shared data contracts for pluggable text annotators."""

from dataclasses import dataclass, field
from typing import Any, Optional


ANALYSIS_METHOD_AI = "ai"
ANALYSIS_METHOD_BASIC = "basic"


@dataclass(frozen=True)
class AnalysisRecord:
    """One logged annotation outcome owned by an annotation store."""

    input_text: str
    annotations: tuple[str, ...]
    analysis_method: str
    created_at: str
    input_length: int = 0
    annotation_count: int = 0
    id: Optional[int] = field(default=None, compare=False)

    @classmethod
    def build(cls, input_text: str, annotations: list[str], analysis_method: str, created_at: str) -> "AnalysisRecord":
        frozen = tuple(annotations)
        return cls(
            input_text=input_text,
            annotations=frozen,
            analysis_method=analysis_method,
            created_at=created_at,
            input_length=len(input_text),
            annotation_count=len(frozen),
        )

    def result_json(self) -> dict[str, Any]:
        return {
            "annotations": list(self.annotations),
            "analysisMethod": self.analysis_method,
            "timestamp": self.created_at,
            "inputLength": self.input_length,
            "annotationCount": self.annotation_count,
        }


class TextAnnotator:
    """Minimal interface implemented by remote annotation backends."""

    provider_name: str = "AI"

    async def produce(self, text: str) -> list[str]:
        raise NotImplementedError
