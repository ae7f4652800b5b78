"""Rule-based fallback annotator used when model calls fail.

Pure function of the input text and the fixed vocabularies below, so it is
safe to call from any context and always returns at least the word-count
and tone entries.
"""

import math
import re

TECHNICAL_TERMS: tuple[str, ...] = (
    "API",
    "SDK",
    "OpenAPI",
    "microservice",
    "database",
    "authentication",
    "authorization",
    "JWT",
    "OAuth",
    "REST",
    "GraphQL",
    "docker",
    "kubernetes",
    "cloud",
    "deployment",
    "typescript",
    "javascript",
    "react",
    "node",
    "express",
    "webhook",
    "endpoint",
)

PLATFORM_TERMS: tuple[str, ...] = ("agent", "workflow", "automation", "AI", "platform", "orchestration", "integration")

POSITIVE_WORDS: tuple[str, ...] = ("good", "great", "excellent", "amazing", "perfect", "successful", "efficient")
NEGATIVE_WORDS: tuple[str, ...] = ("bad", "terrible", "awful", "failed", "error", "broken", "issue")

ACTION_WORDS: tuple[str, ...] = ("should", "must", "need to", "required", "implement", "create", "build", "deploy")

COMPLEX_SENTENCE_WORDS = 20
SIMPLE_SENTENCE_WORDS = 10

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def _matches(lowered: str, vocabulary: tuple[str, ...]) -> list[str]:
    return [term for term in vocabulary if term.lower() in lowered]


class BasicAnnotator:
    """Deterministic keyword and sentence-shape heuristics."""

    def produce(self, text: str) -> list[str]:
        lowered = text.lower()
        annotations: list[str] = []

        word_count = len(text.split())
        sentence_count = len([s for s in _SENTENCE_SPLIT.split(text) if s.strip()])
        # Half-up rounding; zero sentences divides by one.
        avg_words = math.floor(word_count / max(1, sentence_count) + 0.5)
        annotations.append(f"Text contains {word_count} words across {sentence_count} sentences")

        if avg_words > COMPLEX_SENTENCE_WORDS:
            annotations.append("Complex sentence structure detected - consider breaking into shorter sentences")
        elif avg_words < SIMPLE_SENTENCE_WORDS:
            annotations.append("Simple sentence structure - good for readability")

        technical = _matches(lowered, TECHNICAL_TERMS)
        if technical:
            annotations.append(f"Technical concepts identified: {', '.join(technical)}")

        platform = _matches(lowered, PLATFORM_TERMS)
        if platform:
            annotations.append(f"Platform-related content detected: {', '.join(platform)}")

        positive = len(_matches(lowered, POSITIVE_WORDS))
        negative = len(_matches(lowered, NEGATIVE_WORDS))
        if positive > negative:
            annotations.append("Positive tone detected")
        elif negative > positive:
            annotations.append("Negative tone detected - may require attention")
        else:
            annotations.append("Neutral tone")

        if _matches(lowered, ACTION_WORDS):
            annotations.append("Action items or requirements identified")

        return annotations
