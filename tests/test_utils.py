"""
Tests for the utility helpers
"""

from io import StringIO

import pytest
from django.core.management.base import BaseCommand, CommandError
from django.test import override_settings

from ol_openedx_language_sync.constants import DEFAULT_EXPORT_FILE_PATTERN
from ol_openedx_language_sync.exceptions import (
    PoFileNotFoundError,
    TargetNotWritableError,
)
from ol_openedx_language_sync.sync import JobReport
from ol_openedx_language_sync.utils.command_utils import csv_to_list, finish_report
from ol_openedx_language_sync.utils.config import (
    get_batch_size,
    get_config_value,
    get_export_file_pattern,
)
from ol_openedx_language_sync.utils.file_utils import (
    find_translation_files,
    parse_po_filename,
    prepare_directory,
    resolve_source_path,
    resolve_target_path,
)


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (["fr,de"], ["fr", "de"]),
        (["fr", "de"], ["fr", "de"]),
        ("fr, de  es", ["fr", "de", "es"]),
        ([" , "], []),
        (None, []),
    ],
)
def test_csv_to_list(values, expected):
    assert csv_to_list(values) == expected


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("site-1.0.fr.po", ("site", "1.0", "fr")),
        ("drupal-7.x.pt-br.po", ("drupal", "7.x", "pt-br")),
        ("custom.fr.po", ("custom", None, "fr")),
        ("my-module.de.po", ("my-module", None, "de")),
        ("fr.po", (None, None, "fr")),
        ("/some/dir/pt_BR.po", (None, None, "pt-br")),
        ("notes.txt", (None, None, None)),
        ("site.1.po", (None, None, None)),
    ],
)
def test_parse_po_filename(filename, expected):
    parts = parse_po_filename(filename)
    assert (parts["project"], parts["version"], parts["langcode"]) == expected


def test_resolve_source_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "root").mkdir()
    in_root = tmp_path / "root" / "fr.po"
    in_root.write_text("", encoding="utf-8")
    in_cwd = tmp_path / "de.po"
    in_cwd.write_text("", encoding="utf-8")

    assert resolve_source_path(str(in_root), tmp_path / "root") == in_root
    assert resolve_source_path("fr.po", tmp_path / "root") == in_root
    found = resolve_source_path("de.po", tmp_path / "root")
    assert found.resolve() == in_cwd.resolve()
    with pytest.raises(PoFileNotFoundError, match="es.po not found"):
        resolve_source_path("es.po", tmp_path / "root")


@pytest.mark.parametrize("target", [None, "", "-"])
def test_resolve_target_path_stdout(target, tmp_path):
    assert resolve_target_path(target, tmp_path) is None


def test_resolve_target_path(tmp_path):
    assert resolve_target_path("out/fr.po", tmp_path) == tmp_path / "out" / "fr.po"
    absolute = tmp_path / "abs.po"
    assert resolve_target_path(str(absolute), "/elsewhere") == absolute


def test_prepare_directory(tmp_path):
    target = tmp_path / "a" / "b" / "fr.po"
    prepare_directory(target)
    assert target.parent.is_dir()

    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(TargetNotWritableError):
        prepare_directory(blocker / "sub" / "fr.po")


def test_find_translation_files(tmp_path):
    for name in ("de.po", "site-1.0.de.po", "site.fr.po", "notde.po", "de.pot"):
        (tmp_path / name).write_text("", encoding="utf-8")

    found = find_translation_files(tmp_path, "de")

    assert [path.name for path in found] == ["de.po", "site-1.0.de.po"]
    assert find_translation_files(tmp_path / "missing", "de") == []


def test_get_config_value_precedence(monkeypatch):
    monkeypatch.setenv("LANGUAGE_SYNC_SOMETHING", "from-env")
    assert get_config_value("language_sync_something") == "from-env"
    with override_settings(LANGUAGE_SYNC_SOMETHING="from-settings"):
        assert get_config_value("language_sync_something") == "from-settings"
        assert (
            get_config_value(
                "language_sync_something", {"language_sync_something": "from-option"}
            )
            == "from-option"
        )
    assert get_config_value("language_sync_missing", default=1) == 1


def test_config_defaults(settings):
    settings.LANGUAGE_SYNC_EXPORT_FILE_PATTERN = ""
    settings.LANGUAGE_SYNC_BATCH_SIZE = "25"
    assert get_export_file_pattern() == DEFAULT_EXPORT_FILE_PATTERN
    assert get_batch_size() == 25  # noqa: PLR2004


def test_finish_report():
    command = BaseCommand(stdout=StringIO(), stderr=StringIO(), no_color=True)
    report = JobReport()
    report.succeed("done")
    report.warn("skipped")

    finish_report(command, report)
    assert command.stdout._out.getvalue() == "done\nskipped\n"  # noqa: SLF001

    report.fail("broken")
    finish_report(command, report)
    stderr = command.stderr._out.getvalue()  # noqa: SLF001
    assert "Completed with 1 failed item(s)." in stderr

    failed = JobReport()
    failed.fail("broken")
    with pytest.raises(CommandError, match="1 item"):
        finish_report(command, failed)
