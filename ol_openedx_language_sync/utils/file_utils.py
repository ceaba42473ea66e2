"""Locating translation files on disk."""

import logging
import re
from pathlib import Path

from ol_openedx_language_sync.constants import (
    MSG_FILE_NOT_FOUND,
    PO_FILE_EXTENSION,
    STDOUT_TARGET,
)
from ol_openedx_language_sync.exceptions import (
    PoFileNotFoundError,
    TargetNotWritableError,
)

logger = logging.getLogger(__name__)

_LANGCODE_RE = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]+)*$")
_VERSION_RE = re.compile(r"^\d")


def resolve_source_path(path, root_dir: Path) -> Path:
    """
    Locate a file to import.

    The path is used as given when it exists, otherwise it is looked up
    relative to ``root_dir``.
    """
    candidate = Path(path)
    if candidate.is_file():
        return candidate
    if not candidate.is_absolute():
        rooted = Path(root_dir) / candidate
        if rooted.is_file():
            return rooted
    raise PoFileNotFoundError(MSG_FILE_NOT_FOUND.format(filepath=path), path=path)


def resolve_target_path(target, root_dir: Path) -> Path | None:
    """
    Resolve an export target; ``None`` means standard output.

    Absolute paths are used verbatim, relative ones land under ``root_dir``.
    """
    if target in (None, "", STDOUT_TARGET):
        return None
    target = Path(target)
    if target.is_absolute():
        return target
    return Path(root_dir) / target


def prepare_directory(path: Path) -> None:
    """Create the parent directories of ``path``."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Could not create directory {path.parent}: {exc}"
        raise TargetNotWritableError(msg, path=path) from exc


def parse_po_filename(filename) -> dict:
    """
    Split a PO file name into project, version and langcode.

    Recognises ``{project}-{version}.{langcode}.po``, ``{prefix}.{langcode}.po``
    and ``{langcode}.po``. Missing parts are ``None``.
    """
    parts = {"project": None, "version": None, "langcode": None}
    name = Path(filename).name
    if not name.endswith(PO_FILE_EXTENSION):
        return parts
    stem = name[: -len(PO_FILE_EXTENSION)]
    prefix, _, langcode = stem.rpartition(".")
    if not _LANGCODE_RE.match(langcode):
        return parts
    parts["langcode"] = langcode.replace("_", "-").lower()
    if prefix:
        project, _, version = prefix.rpartition("-")
        if project and _VERSION_RE.match(version):
            parts["project"], parts["version"] = project, version
        else:
            parts["project"] = prefix
    return parts


def find_translation_files(directory: Path, langcode: str) -> list[Path]:
    """Return the ``*.<langcode>.po`` and ``<langcode>.po`` files of a directory."""
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Translations directory %s does not exist", directory)
        return []
    exact = f"{langcode}{PO_FILE_EXTENSION}"
    suffix = f".{langcode}{PO_FILE_EXTENSION}"
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and (path.name == exact or path.name.endswith(suffix))
    )
