"""Annotation pipeline fallback, validation, and logging policy tests."""

import asyncio
import logging
from types import SimpleNamespace

import pytest

from agent_platform.annotators.base import TextAnnotator
from agent_platform.annotators.openai_annotator import OpenAIAnnotator
from agent_platform.annotators.rule_based import BasicAnnotator
from agent_platform.errors import MalformedResponse, RateLimited, ValidationError
from agent_platform.pipeline import AnnotationPipeline, fallback_notice
from agent_platform.store import InMemoryAnnotationStore

SAMPLE = "We should build a REST API for the agent platform. It is a great idea."


class _StaticAnnotator(TextAnnotator):
    provider_name = "FakeAI"

    def __init__(self, result=None, error=None):
        self.result = result or []
        self.error = error
        self.calls = 0

    async def produce(self, text):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.result)


class _BrokenStore(InMemoryAnnotationStore):
    def append(self, record):
        raise RuntimeError("disk full")


def _pipeline(annotator, store=None, max_text_length=100):
    return AnnotationPipeline(
        ai_annotator=annotator,
        store=store if store is not None else InMemoryAnnotationStore(),
        max_text_length=max_text_length,
    )


def test_ai_success_used_verbatim_and_logged_as_ai():
    store = InMemoryAnnotationStore()
    pipeline = _pipeline(_StaticAnnotator(result=["Insight A", "Insight B"]), store)

    out = asyncio.run(pipeline.annotate(SAMPLE))

    assert out == {"annotations": ["Insight A", "Insight B"]}
    [record] = store.list_recent(5)
    assert record.analysis_method == "ai"
    assert record.input_text == SAMPLE
    assert record.input_length == len(SAMPLE)
    assert record.annotation_count == 2


@pytest.mark.parametrize(
    "error",
    [RateLimited("slow down"), MalformedResponse("bad json"), RuntimeError("unexpected")],
)
def test_ai_failure_falls_back_with_notice(error, caplog):
    store = InMemoryAnnotationStore()
    pipeline = _pipeline(_StaticAnnotator(error=error), store)

    with caplog.at_level(logging.WARNING, logger="agent_platform.pipeline"):
        out = asyncio.run(pipeline.annotate(SAMPLE))

    annotations = out["annotations"]
    assert annotations[0] == fallback_notice("FakeAI") == "Note: Using basic analysis (FakeAI unavailable)"
    assert annotations[1:] == BasicAnnotator().produce(SAMPLE)
    assert store.list_recent(1)[0].analysis_method == "basic"
    assert str(error) in caplog.text


@pytest.mark.parametrize("text", ["", None])
def test_empty_text_rejected_without_store_append(text):
    store = InMemoryAnnotationStore()
    annotator = _StaticAnnotator(result=["x"])
    pipeline = _pipeline(annotator, store)

    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(pipeline.annotate(text))

    assert excinfo.value.code == "INVALID_TEXT"
    assert annotator.calls == 0
    assert store.list_recent(10) == []


def test_over_length_text_rejected_with_length_details():
    store = InMemoryAnnotationStore()
    pipeline = _pipeline(_StaticAnnotator(result=["x"]), store, max_text_length=10_000)

    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(pipeline.annotate("a" * 10_001))

    assert excinfo.value.code == "TEXT_TOO_LONG"
    assert excinfo.value.details == {"maxLength": 10_000, "actualLength": 10_001}
    assert store.list_recent(10) == []


def test_text_at_max_length_is_accepted():
    pipeline = _pipeline(_StaticAnnotator(result=["ok"]), max_text_length=5)
    assert asyncio.run(pipeline.annotate("abcde")) == {"annotations": ["ok"]}


def test_store_failure_does_not_change_result(caplog):
    pipeline = _pipeline(_StaticAnnotator(result=["kept"]), _BrokenStore())

    with caplog.at_level(logging.ERROR, logger="agent_platform.pipeline"):
        out = asyncio.run(pipeline.annotate(SAMPLE))

    assert out == {"annotations": ["kept"]}
    assert "Failed to log annotation" in caplog.text


def test_store_lists_each_call_newest_first():
    store = InMemoryAnnotationStore()
    pipeline = _pipeline(_StaticAnnotator(error=RateLimited("429")), store)
    texts = [f"Message number {i}." for i in range(5)]

    for text in texts:
        asyncio.run(pipeline.annotate(text))

    records = store.list_recent(5)
    assert [r.input_text for r in records] == list(reversed(texts))
    assert all(r.annotation_count == len(r.annotations) for r in records)


def test_concurrent_calls_each_get_a_record():
    store = InMemoryAnnotationStore()
    pipeline = _pipeline(_StaticAnnotator(result=["a"]), store)

    async def run() -> None:
        await asyncio.gather(*(pipeline.annotate(f"text {i}") for i in range(20)))

    asyncio.run(run())

    records = store.list_recent(50)
    assert len(records) == 20
    assert len({r.id for r in records}) == 20


def test_non_json_provider_body_falls_back_to_basic():
    response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content="Sure! Here are notes"))])
    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=lambda **_: response)))
    store = InMemoryAnnotationStore()
    pipeline = _pipeline(OpenAIAnnotator(api_key="sk-test", client=client), store, max_text_length=10_000)

    out = asyncio.run(pipeline.annotate(SAMPLE))

    assert out["annotations"][0] == "Note: Using basic analysis (OpenAI unavailable)"
    [record] = store.list_recent(10)
    assert record.analysis_method == "basic"


def test_missing_credential_bypasses_to_basic():
    pipeline = _pipeline(OpenAIAnnotator(api_key=""), max_text_length=10_000)
    out = asyncio.run(pipeline.annotate(SAMPLE))
    assert out["annotations"][0] == "Note: Using basic analysis (OpenAI unavailable)"
    assert len(out["annotations"]) >= 3
