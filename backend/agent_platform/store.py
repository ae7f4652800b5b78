"""Append-only annotation stores.

Both stores hand out unique, increasing record ids and list records newest
first. The in-memory store guards its counter and map with a lock; the SQL
store relies on the table's autoincrement primary key.
"""

import threading
from collections.abc import Callable
from dataclasses import replace

from sqlmodel import Session, select

from .annotators.base import AnalysisRecord
from .config import settings
from .models import Annotation

DEFAULT_RECENT_LIMIT = 10


class AnnotationStore:
    """Interface for append-only analysis logs."""

    def append(self, record: AnalysisRecord) -> int:
        raise NotImplementedError

    def list_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[AnalysisRecord]:
        raise NotImplementedError


class InMemoryAnnotationStore(AnnotationStore):
    def __init__(self) -> None:
        self._records: dict[int, AnalysisRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def append(self, record: AnalysisRecord) -> int:
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            self._records[record_id] = replace(record, id=record_id)
        return record_id

    def list_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[AnalysisRecord]:
        with self._lock:
            snapshot = list(self._records.values())
        snapshot.sort(key=lambda r: r.id or 0, reverse=True)
        return snapshot[: max(0, limit)]


class SqlAnnotationStore(AnnotationStore):
    """Stores records in the ``annotation`` table as ``result_json`` blobs."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def append(self, record: AnalysisRecord) -> int:
        row = Annotation(
            input_text=record.input_text,
            result_json=record.result_json(),
            created_at=record.created_at,
        )
        with self._session_factory() as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return int(row.id or 0)

    def list_recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[AnalysisRecord]:
        stmt = select(Annotation).order_by(Annotation.id.desc()).limit(max(0, limit))
        with self._session_factory() as session:
            return [_row_to_record(row) for row in session.exec(stmt).all()]


def _row_to_record(row: Annotation) -> AnalysisRecord:
    result = row.result_json if isinstance(row.result_json, dict) else {}
    annotations = tuple(str(item) for item in result.get("annotations", []))
    return AnalysisRecord(
        input_text=row.input_text,
        annotations=annotations,
        analysis_method=str(result.get("analysisMethod", "")),
        created_at=row.created_at,
        input_length=int(result.get("inputLength", len(row.input_text))),
        annotation_count=int(result.get("annotationCount", len(annotations))),
        id=row.id,
    )


def build_annotation_store(session_factory: Callable[[], Session]) -> AnnotationStore:
    if settings.annotation_store == "memory":
        return InMemoryAnnotationStore()
    return SqlAnnotationStore(session_factory)
