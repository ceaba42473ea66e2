"""
Reading and writing gettext PO (portable object) files.

The heavy lifting (escaping, line wrapping, header handling) is done by
``babel.messages.pofile``; this module maps Babel catalogs onto the
``TranslationSet`` / ``TranslationEntry`` model used by the sync engine and
rejects structurally broken input that Babel would otherwise accept with a
printed warning.
"""

import io
import logging
import re
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from babel.core import Locale, UnknownLocaleError
from babel.messages.catalog import Catalog
from babel.messages.pofile import PoFileError, generate_po, read_po, write_po

from ol_openedx_language_sync.exceptions import (
    MalformedPoFileError,
    PoFileNotFoundError,
    TargetNotWritableError,
    TranslationFileError,
)

logger = logging.getLogger(__name__)

PO_LINE_WIDTH = 76

# Babel fills an unset project name with this placeholder
PLACEHOLDER_PROJECT = "PROJECT"

_KEYWORD_RE = re.compile(
    r"^(?P<keyword>msgctxt|msgid_plural|msgid|msgstr(?:\[\d+\])?)(?:\s+(?P<value>.*))?$"
)
_STRING_RE = re.compile(r'^"(?:[^"\\]|\\.)*"$')
_HEADER_COMMENT_RE = re.compile(
    r"^#\s*(?P<language>.*?)\s*translation of (?P<project>.*?)\s*$", re.MULTILINE
)


@dataclass
class TranslationEntry:
    """
    A single source string and its translation.

    Plural entries carry ``source_plural`` and a tuple of translated forms in
    ``translation``. ``status`` is only set on entries read from the
    translation store and does not take part in equality.
    """

    source: str
    translation: str | tuple[str, ...] = ""
    context: str = ""
    source_plural: str | None = None
    status: str | None = field(default=None, compare=False)

    @property
    def key(self) -> tuple[str, str]:
        """Entries are unique by (context, source) within a set."""
        return (self.context, self.source)

    @property
    def is_plural(self) -> bool:
        return self.source_plural is not None

    @property
    def is_translated(self) -> bool:
        if self.is_plural:
            return any(self.translation)
        return bool(self.translation)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation (used for batch payloads)."""
        return {
            "source": self.source,
            "translation": (
                list(self.translation) if self.is_plural else self.translation
            ),
            "context": self.context,
            "source_plural": self.source_plural,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TranslationEntry":
        translation = data.get("translation", "")
        if data.get("source_plural") is not None:
            translation = tuple(translation or ())
        return cls(
            source=data["source"],
            translation=translation,
            context=data.get("context") or "",
            source_plural=data.get("source_plural"),
        )


@dataclass
class PoHeader:
    """Metadata carried by the ``msgid ""`` entry and the leading comment."""

    project_name: str = ""
    language_name: str = ""
    langcode: str | None = field(default=None, compare=False)
    plural_forms: str | None = field(default=None, compare=False)
    created: datetime | None = field(default=None, compare=False)

    @property
    def comment(self) -> str:
        return f"# {self.language_name} translation of {self.project_name}"


class TranslationSet:
    """
    Ordered collection of translation entries for one language.

    Adding an entry whose key is already present replaces it in place, so the
    set never holds two entries for the same (context, source) pair.
    """

    def __init__(
        self,
        langcode: str | None = None,
        header: PoHeader | None = None,
        entries: Iterable[TranslationEntry] = (),
    ):
        self.langcode = langcode
        self.header = header or PoHeader(langcode=langcode)
        self._entries: dict[tuple[str, str], TranslationEntry] = {}
        self.extend(entries)

    def add(self, entry: TranslationEntry) -> None:
        self._entries[entry.key] = entry

    def extend(self, entries: Iterable[TranslationEntry]) -> None:
        for entry in entries:
            self.add(entry)

    def get(self, source: str, context: str = "") -> TranslationEntry | None:
        return self._entries.get((context, source))

    def __iter__(self) -> Iterator[TranslationEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __eq__(self, other) -> bool:
        if not isinstance(other, TranslationSet):
            return NotImplemented
        return self.header == other.header and list(self) == list(other)

    def __repr__(self) -> str:
        return f"<TranslationSet {self.langcode!r} ({len(self)} entries)>"


def langcode_to_locale_identifier(langcode: str) -> str:
    """Convert a langcode (``pt-br``) to a gettext locale identifier (``pt_BR``)."""
    parts = langcode.replace("-", "_").split("_")
    if len(parts) > 1 and len(parts[1]) == 2:  # noqa: PLR2004
        parts[1] = parts[1].upper()
    return "_".join(parts)


def locale_identifier_to_langcode(identifier: str | None) -> str | None:
    if not identifier:
        return None
    return identifier.replace("_", "-").lower()


def _babel_locale(langcode: str | None) -> Locale | str | None:
    """
    Return the Babel locale for a langcode.

    Unknown but well-formed identifiers are returned as plain strings so that
    the ``Language`` header is still written.
    """
    if not langcode:
        return None
    identifier = langcode_to_locale_identifier(langcode)
    try:
        return Locale.parse(identifier)
    except UnknownLocaleError:
        return identifier
    except ValueError:
        return None


def _where(path) -> str:
    return f" {path}" if path else ""


def _malformed(message: str, lineno: int, path=None) -> MalformedPoFileError:
    return MalformedPoFileError(
        f"Malformed PO file{_where(path)}, line {lineno}: {message}",
        path=path,
        lineno=lineno,
    )


def _iter_lines(stream, path=None) -> Iterator[str]:
    """
    Yield the lines of a binary or text stream without their line endings.

    Only ``\\n`` ends a line. Form feeds, ``U+2028`` and the other characters
    ``str.splitlines`` breaks on may appear unescaped inside PO strings.
    """
    first = True
    try:
        for line in stream:
            if isinstance(line, bytes):
                line = line.decode("utf-8-sig" if first else "utf-8")  # noqa: PLW2901
            elif first:
                line = line.removeprefix("\ufeff")  # noqa: PLW2901
            first = False
            yield line.rstrip("\r\n")
    except UnicodeDecodeError as exc:
        msg = f"PO file{_where(path)} is not valid UTF-8: {exc}"
        raise MalformedPoFileError(msg, path=path) from exc


def _iter_blocks(lines: Iterable[str]) -> Iterator[tuple[int, list[str]]]:
    """Group lines into blank-line separated blocks with their first line number."""
    block: list[str] = []
    start = 1
    for lineno, line in enumerate(lines, start=1):
        if line.strip():
            if not block:
                start = lineno
            block.append(line)
        elif block:
            yield start, block
            block = []
    if block:
        yield start, block


def check_structure(  # noqa: C901
    lines: Iterable[str], path=None, start: int = 1
) -> None:
    """
    Validate the block structure of PO text.

    Raises ``MalformedPoFileError`` for unterminated or garbage strings,
    unknown keywords, ``msgstr`` without a preceding ``msgid`` and ``msgid``
    without a ``msgstr``. ``start`` is the file line number of the first line.
    """
    has_msgid = False
    has_msgstr = False
    in_string = False
    lineno = start - 1

    for lineno, raw_line in enumerate(lines, start=start):
        line = raw_line.strip()
        if line.startswith("#~"):
            continue
        if not line or line.startswith("#"):
            if line and has_msgid and not has_msgstr:
                raise _malformed("msgid without msgstr", lineno, path)
            if line or has_msgstr:
                has_msgid = has_msgstr = False
            in_string = False
            continue

        if line.startswith('"'):
            if not in_string:
                raise _malformed("string outside of a keyword", lineno, path)
            if not _STRING_RE.match(line):
                raise _malformed("unterminated string", lineno, path)
            continue

        match = _KEYWORD_RE.match(line)
        if not match:
            raise _malformed("unknown keyword", lineno, path)
        keyword, value = match.group("keyword"), match.group("value")
        if value is None:
            raise _malformed(f"{keyword} must be followed by a string", lineno, path)
        if not _STRING_RE.match(value.strip()):
            raise _malformed("unterminated string", lineno, path)

        if keyword in ("msgctxt", "msgid"):
            if has_msgid and not has_msgstr:
                raise _malformed("msgid without msgstr", lineno, path)
            has_msgid = keyword == "msgid"
            has_msgstr = False
        elif keyword == "msgid_plural":
            if not has_msgid or has_msgstr:
                raise _malformed("msgid_plural without msgid", lineno, path)
        else:
            if not has_msgid:
                raise _malformed("msgstr without msgid", lineno, path)
            has_msgstr = True
        in_string = True

    if has_msgid and not has_msgstr:
        raise _malformed("msgid without msgstr", lineno, path)


def _header_from_catalog(catalog: Catalog) -> PoHeader:
    project = catalog.project if catalog.project != PLACEHOLDER_PROJECT else ""
    language_name = ""
    match = _HEADER_COMMENT_RE.search(catalog.header_comment or "")
    if match:
        language_name = match.group("language")
    created = catalog.creation_date
    return PoHeader(
        project_name=project,
        language_name=language_name,
        langcode=locale_identifier_to_langcode(catalog.locale_identifier),
        plural_forms=catalog.plural_forms,
        created=created if isinstance(created, datetime) else None,
    )


def _entries_from_catalog(catalog: Catalog) -> Iterator[TranslationEntry]:
    for message in catalog:
        if not message.id:
            # The header message
            continue
        if message.pluralizable:
            yield TranslationEntry(
                source=message.id[0],
                source_plural=message.id[1],
                translation=tuple(message.string),
                context=message.context or "",
            )
        else:
            yield TranslationEntry(
                source=message.id,
                translation=message.string or "",
                context=message.context or "",
            )


def _declares_message(block: list[str]) -> bool:
    return any(line.lstrip().startswith("msgid") for line in block)


class PoReader:
    """
    Single-pass reader yielding the entries of a PO stream block by block.

    Only one block is held in memory at a time. Every block is parsed together
    with the header block so Babel applies the file's Plural-Forms rule.
    ``header`` is set once the header block has been read and
    ``max_plural_forms`` is the largest number of forms a plural entry had.
    """

    def __init__(self, stream, path=None):
        self.stream = stream
        self.path = path
        self.header: PoHeader | None = None
        self.max_plural_forms = 0
        self._header_lines: list[str] = []

    def _parse_block(self, block: list[str], start: int) -> Catalog:
        prefix = [*self._header_lines, ""] if self._header_lines else []
        try:
            return read_po(prefix + block, ignore_obsolete=True, abort_invalid=True)
        except PoFileError as exc:
            lineno = max(start, start + exc.lineno - len(prefix))
            raise _malformed(str(exc), lineno, self.path) from exc
        except ValueError as exc:
            raise _malformed(str(exc), start, self.path) from exc

    def __iter__(self) -> Iterator[TranslationEntry]:
        for start, block in _iter_blocks(_iter_lines(self.stream, self.path)):
            check_structure(block, self.path, start=start)
            catalog = self._parse_block(block, start)
            if not len(catalog):
                # Header, comment-only or obsolete block
                if self.header is None and _declares_message(block):
                    self._header_lines = block
                    self.header = _header_from_catalog(catalog)
                continue
            for entry in _entries_from_catalog(catalog):
                if entry.is_plural:
                    self.max_plural_forms = max(
                        self.max_plural_forms, len(entry.translation)
                    )
                yield entry


def iter_entries(stream, path=None) -> Iterator[TranslationEntry]:
    """
    Lazily yield the entries of a PO stream.

    The returned generator is single-pass; the stream is only read once the
    first entry is requested, and then one block at a time.
    """
    yield from PoReader(stream, path)


def decode(stream, langcode: str | None = None, path=None) -> TranslationSet:
    """
    Parse PO text from a binary or text stream into a ``TranslationSet``.

    ``langcode`` overrides the language declared in the file header.
    """
    reader = PoReader(stream, path)
    entries = list(reader)
    header = reader.header or PoHeader()
    return TranslationSet(
        langcode=langcode or header.langcode,
        header=header,
        entries=entries,
    )


class _PoCatalog(Catalog):
    """Babel catalog that writes Plural-Forms for locales Babel does not know."""

    @property
    def mime_headers(self):
        headers = Catalog.mime_headers.fget(self)
        if self.locale is None and all(name != "Plural-Forms" for name, _ in headers):
            headers.append(("Plural-Forms", self.plural_forms))
        return headers

    @mime_headers.setter
    def mime_headers(self, headers):
        Catalog.mime_headers.fset(self, headers)


def _plural_forms_for(catalog: Catalog, translation_set: TranslationSet) -> str | None:
    """
    Return a Plural-Forms value with room for every stored plural form.

    Babel writes exactly ``num_plurals`` forms per plural entry, so the count
    is raised when an entry carries more forms than the header or the locale
    declares.
    """
    needed = max(
        (len(entry.translation) for entry in translation_set if entry.is_plural),
        default=0,
    )
    if needed <= catalog.num_plurals:
        return None
    return f"nplurals={needed}; plural={catalog.plural_expr};"


def build_catalog(translation_set: TranslationSet) -> Catalog:
    """Build a Babel catalog holding the header and entries of the set."""
    header = translation_set.header
    catalog = _PoCatalog(
        locale=_babel_locale(translation_set.langcode or header.langcode),
        header_comment=header.comment,
        project=header.project_name or None,
        creation_date=header.created,
        fuzzy=False,
    )
    if header.plural_forms:
        catalog.mime_headers = [("Plural-Forms", header.plural_forms)]
    plural_forms = _plural_forms_for(catalog, translation_set)
    if plural_forms:
        logger.warning(
            "Raising Plural-Forms of %s to %s", translation_set.langcode, plural_forms
        )
        catalog.mime_headers = [("Plural-Forms", plural_forms)]

    for entry in translation_set:
        if entry.is_plural:
            catalog.add(
                (entry.source, entry.source_plural),
                string=tuple(entry.translation),
                context=entry.context or None,
            )
        else:
            catalog.add(
                entry.source,
                string=entry.translation,
                context=entry.context or None,
            )
    return catalog


def encode(translation_set: TranslationSet, sink) -> None:
    """
    Render a ``TranslationSet`` as PO text into ``sink``.

    Binary sinks receive UTF-8 bytes, text sinks (``sys.stdout``, command
    output wrappers) receive ``str``.
    """
    catalog = build_catalog(translation_set)
    if isinstance(sink, io.TextIOBase):
        sink.write("".join(generate_po(catalog, width=PO_LINE_WIDTH)))
    else:
        write_po(sink, catalog, width=PO_LINE_WIDTH)


@contextmanager
def open_po_file(path):
    """Open the PO file at ``path`` for binary reading."""
    path = Path(path)
    try:
        po_file = path.open("rb")
    except FileNotFoundError as exc:
        msg = f"File to import at {path} not found."
        raise PoFileNotFoundError(msg, path=path) from exc
    except OSError as exc:
        msg = f"Could not read {path}: {exc}"
        raise TranslationFileError(msg, path=path) from exc
    with po_file:
        yield po_file


def read_po_file(path, langcode: str | None = None) -> TranslationSet:
    """Decode the PO file at ``path``, closing it on every exit path."""
    with open_po_file(path) as po_file:
        return decode(po_file, langcode=langcode, path=Path(path))


def scan_po_file(path) -> PoReader:
    """
    Read the whole PO file at ``path`` without keeping its entries.

    Raises on the first malformed block. The returned reader carries the
    header and the plural form count of the file.
    """
    path = Path(path)
    with open_po_file(path) as po_file:
        reader = PoReader(po_file, path)
        for _entry in reader:
            pass
    return reader


def iter_po_file(path) -> Iterator[TranslationEntry]:
    """Lazily yield the entries of the PO file at ``path``."""
    path = Path(path)
    with open_po_file(path) as po_file:
        yield from PoReader(po_file, path)


def write_po_file(translation_set: TranslationSet, path) -> Path:
    """
    Encode ``translation_set`` to ``path``.

    Output goes to a sibling temporary file that replaces the target only once
    encoding succeeded, so a failed export never leaves a truncated file.
    """
    path = Path(path)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        with tmp_path.open("wb") as po_file:
            encode(translation_set, po_file)
        tmp_path.replace(path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        msg = f"Could not write {path}: {exc}"
        raise TargetNotWritableError(msg, path=path) from exc
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d entries to %s", len(translation_set), path)
    return path
