"""Pytest config"""

import pytest

from ol_openedx_language_sync.batch import InlineBatchRunner
from ol_openedx_language_sync.catalog import LanguageCatalog
from ol_openedx_language_sync.sync import SyncEngine

PO_TEMPLATE = """# French translation of Test Site
msgid ""
msgstr ""
"Project-Id-Version: Test Site\\n"
"MIME-Version: 1.0\\n"
"Content-Type: text/plain; charset=UTF-8\\n"
"Content-Transfer-Encoding: 8bit\\n"
"Plural-Forms: nplurals=2; plural=(n > 1);\\n"

{body}"""


def make_po(entries):
    """Render ``(source, translation)`` pairs as PO text."""
    body = "\n".join(
        f'msgid "{source}"\nmsgstr "{translation}"\n' for source, translation in entries
    )
    return PO_TEMPLATE.format(body=body)


@pytest.fixture
def write_po(tmp_path):
    """Write PO text built from ``(source, translation)`` pairs to a file."""

    def _write(name, entries):
        path = tmp_path / name
        path.write_text(make_po(entries), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cache(mocker):
    return mocker.Mock()


@pytest.fixture
def catalog(cache):
    return LanguageCatalog(cache=cache)


@pytest.fixture
def engine(cache, tmp_path):
    return SyncEngine(
        cache=cache,
        batch_runner=InlineBatchRunner(),
        root_dir=tmp_path,
        site_name="Test Site",
        batch_size=4,
    )
