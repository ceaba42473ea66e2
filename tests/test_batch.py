"""
Tests for the batch runners
"""

from unittest import mock

import pytest
from django.test import override_settings

from ol_openedx_language_sync.batch import (
    BatchResult,
    CeleryBatchRunner,
    InlineBatchRunner,
    chunked,
    get_batch_runner,
)


@pytest.mark.parametrize(
    ("items", "size", "expected"),
    [
        (range(5), 2, [[0, 1], [2, 3], [4]]),
        (range(4), 4, [[0, 1, 2, 3]]),
        ([], 3, []),
    ],
)
def test_chunked(items, size, expected):
    assert list(chunked(items, size)) == expected


def test_chunked_rejects_bad_size():
    with pytest.raises(ValueError):  # noqa: PT011
        list(chunked([1], 0))


def test_inline_runner_sums_counts_and_continues_after_failure():
    def operation(chunk):
        if chunk["fail"]:
            raise RuntimeError("broken chunk")  # noqa: EM101
        return {"additions": chunk["n"]}

    result = InlineBatchRunner().run(
        [{"fail": False, "n": 2}, {"fail": True, "n": 0}, {"fail": False, "n": 3}],
        operation,
    )

    assert result.counts["additions"] == 5  # noqa: PLR2004
    assert result.chunks == 2  # noqa: PLR2004
    assert result.errors == ["Chunk 1: broken chunk"]
    assert not result.succeeded


def test_celery_runner_collects_task_failures():
    task = mock.Mock()
    task.s.side_effect = lambda chunk: ("signature", chunk)
    group_result = mock.Mock()
    group_result.get.return_value = [{"updates": 1}, RuntimeError("worker died")]

    with mock.patch("ol_openedx_language_sync.batch.group") as mock_group:
        mock_group.return_value.apply_async.return_value = group_result
        result = CeleryBatchRunner(task=task).run([{"id": 1}, {"id": 2}])

    mock_group.assert_called_once_with(
        [("signature", {"id": 1}), ("signature", {"id": 2})]
    )
    group_result.get.assert_called_once_with(timeout=None, propagate=False)
    assert result.counts == {"updates": 1}
    assert result.errors == ["Chunk 1: worker died"]


def test_celery_runner_without_chunks_dispatches_nothing():
    with mock.patch("ol_openedx_language_sync.batch.group") as mock_group:
        result = CeleryBatchRunner(task=mock.Mock()).run([])
    mock_group.assert_not_called()
    assert result == BatchResult()


@pytest.mark.parametrize(
    ("backend", "runner_class"),
    [("inline", InlineBatchRunner), ("celery", CeleryBatchRunner)],
)
def test_get_batch_runner(backend, runner_class):
    with override_settings(LANGUAGE_SYNC_BATCH_BACKEND=backend):
        assert isinstance(get_batch_runner(), runner_class)


def test_get_batch_runner_unknown_backend():
    with pytest.raises(ValueError, match="Unknown batch backend"):
        get_batch_runner("threads")
