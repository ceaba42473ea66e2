"""
Chunked processing of large translation merges.

A runner takes a sequence of JSON-serialisable chunks and an operation that
processes one chunk, and blocks until every chunk is done.
"""

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice

from celery import group
from django.conf import settings

from ol_openedx_language_sync.constants import (
    BATCH_BACKEND_CELERY,
    BATCH_BACKEND_INLINE,
)

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Summed counters of the processed chunks and the errors of failed ones."""

    counts: Counter = field(default_factory=Counter)
    errors: list[str] = field(default_factory=list)
    chunks: int = 0

    @property
    def succeeded(self) -> bool:
        return not self.errors

    def merge(self, counts: dict | None) -> None:
        self.chunks += 1
        self.counts.update(counts or {})


def chunked(items: Iterable, size: int) -> Iterator[list]:
    """Split ``items`` into lists of at most ``size`` elements."""
    if size < 1:
        msg = f"Chunk size must be positive, got {size}"
        raise ValueError(msg)
    iterator = iter(items)
    while chunk := list(islice(iterator, size)):
        yield chunk


class BatchRunner:
    """Base class for batch runners."""

    def run(self, chunks: Iterable[dict], operation: Callable) -> BatchResult:
        raise NotImplementedError


class InlineBatchRunner(BatchRunner):
    """Run every chunk in the current process, one after the other."""

    def run(self, chunks, operation):
        result = BatchResult()
        for index, chunk in enumerate(chunks):
            try:
                result.merge(operation(chunk))
            except Exception as exc:
                logger.exception("Batch chunk %d failed", index)
                result.errors.append(f"Chunk {index}: {exc}")
        return result


class CeleryBatchRunner(BatchRunner):
    """
    Dispatch every chunk as a Celery task and wait for the whole group.

    ``task`` is the Celery task processing one chunk; ``operation`` passed to
    ``run`` is ignored since the worker runs the task body instead.
    """

    def __init__(self, task=None, timeout=None):
        if task is None:
            from ol_openedx_language_sync.tasks import (  # noqa: PLC0415
                store_translations_chunk,
            )

            task = store_translations_chunk
        self.task = task
        self.timeout = timeout

    def run(self, chunks, operation=None):  # noqa: ARG002
        result = BatchResult()
        signatures = [self.task.s(chunk) for chunk in chunks]
        if not signatures:
            return result
        group_result = group(signatures).apply_async()
        outcomes = group_result.get(timeout=self.timeout, propagate=False)
        for index, outcome in enumerate(outcomes):
            if isinstance(outcome, Exception):
                logger.error("Batch task %d failed: %s", index, outcome)
                result.errors.append(f"Chunk {index}: {outcome}")
            else:
                result.merge(outcome)
        return result


def get_batch_runner(backend: str | None = None) -> BatchRunner:
    """Return the runner configured by ``LANGUAGE_SYNC_BATCH_BACKEND``."""
    backend = backend or getattr(
        settings, "LANGUAGE_SYNC_BATCH_BACKEND", BATCH_BACKEND_INLINE
    )
    if backend == BATCH_BACKEND_CELERY:
        return CeleryBatchRunner()
    if backend == BATCH_BACKEND_INLINE:
        return InlineBatchRunner()
    msg = f"Unknown batch backend: {backend}"
    raise ValueError(msg)

