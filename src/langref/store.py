"""
Entry Store: raw records → validated, immutable Document.

Every input layer (YAML/JSON serialization, CSV) produces plain Python
records and hands them here. This is the ONLY place the model invariants
are checked, so backends can trust any Document they receive.

Record shapes:

    entry:    {"task": str, "description": str, "snippets": SNIPPETS}
    section:  {"title": str, "entries": [entry, ...]}

    SNIPPETS is either a mapping {language: code}
    or a list [{"language": ..., "code": ...}, ...].

The list form keeps duplicates visible, so a repeated language is
reported instead of silently collapsing.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from langref.model import ComparisonEntry, Document, Section, Snippet

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """
    Raised at load time when a record breaks a model invariant.

    Attributes:
        location: Path to the offending record, e.g. "sections[1].entries[0]"
        record: Task or section title of the offending record, if known
    """

    def __init__(self, message: str, location: Optional[str] = None, record: Optional[str] = None):
        self.reason = message
        self.location = location
        self.record = record
        parts = []
        if location:
            parts.append(location)
        if record:
            parts.append(repr(record))
        prefix = " ".join(parts)
        super().__init__(f"{prefix}: {message}" if prefix else message)


def _require_mapping(record: Any, location: str, kind: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise ValidationError(
            f"{kind} record must be a mapping, got {type(record).__name__}",
            location=location,
        )
    return record


def _require_text(record: Mapping[str, Any], key: str, location: str, name: Optional[str] = None) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"missing or blank '{key}'", location=location, record=name)
    # Titles become single-line headings
    return " ".join(value.split())


def _snippet_pairs(raw: Any, location: str, task: str) -> List[Tuple[Any, Any]]:
    """Flatten either snippet form into (language, code) pairs, keeping duplicates."""
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        return list(raw.items())
    if isinstance(raw, (list, tuple)):
        pairs = []
        for i, item in enumerate(raw):
            if not isinstance(item, Mapping) or "language" not in item or "code" not in item:
                raise ValidationError(
                    f"snippets[{i}] must be a mapping with 'language' and 'code'",
                    location=location,
                    record=task,
                )
            pairs.append((item["language"], item["code"]))
        return pairs
    raise ValidationError(
        f"'snippets' must be a mapping or a list, got {type(raw).__name__}",
        location=location,
        record=task,
    )


def load_entry(record: Any, location: str = "entry") -> ComparisonEntry:
    """
    Validate one raw entry record.

    Raises:
        ValidationError: If the task is blank, there are no snippets,
            a language is blank or repeated, or code is not text
    """
    record = _require_mapping(record, location, "entry")
    task = _require_text(record, "task", location)

    description = record.get("description")
    if description is None:
        description = ""
    if not isinstance(description, str):
        raise ValidationError("'description' must be text", location=location, record=task)

    pairs = _snippet_pairs(record.get("snippets"), location, task)
    if not pairs:
        raise ValidationError("entry has no snippets", location=location, record=task)

    snippets = []
    seen = set()
    for language, code in pairs:
        if not isinstance(language, str) or not language.strip():
            raise ValidationError("snippet language must be non-blank text", location=location, record=task)
        language = language.strip()
        if language in seen:
            raise ValidationError(f"duplicate language '{language}'", location=location, record=task)
        if not isinstance(code, str):
            raise ValidationError(
                f"code for '{language}' must be text, got {type(code).__name__}",
                location=location,
                record=task,
            )
        if not code.strip():
            raise ValidationError(f"empty code for '{language}'", location=location, record=task)
        seen.add(language)
        snippets.append(Snippet(language=language, code=code))

    return ComparisonEntry(task=task, description=description.strip(), snippets=tuple(snippets))


def load_section(record: Any, location: str = "section") -> Section:
    """
    Validate one raw section record and all of its entries.

    Raises:
        ValidationError: If the title is blank, the section is empty,
            or any entry is invalid
    """
    record = _require_mapping(record, location, "section")
    title = _require_text(record, "title", location)

    raw_entries = record.get("entries") or []
    if not isinstance(raw_entries, (list, tuple)):
        raise ValidationError("'entries' must be a list", location=location, record=title)
    if not raw_entries:
        raise ValidationError("section has no entries", location=location, record=title)

    entries = tuple(
        load_entry(raw, location=f"{location}.entries[{i}]")
        for i, raw in enumerate(raw_entries)
    )
    return Section(title=title, entries=entries)


def load_document(
    records: Iterable[Any],
    title: str = "",
    locations: Optional[Sequence[str]] = None,
) -> Document:
    """
    Validate a sequence of raw section records into a Document.

    Args:
        records: Raw section records, in display order
        title: Document title (may be empty)
        locations: Names reported in errors for each record (e.g. file
            names); defaults to "sections[i]"

    Returns:
        Immutable Document

    Raises:
        ValidationError: On the first invalid record, or when two
            sections share a title
    """
    if title is not None and not isinstance(title, str):
        raise ValidationError(f"document title must be text, got {type(title).__name__}")

    sections = []
    titles = set()
    for i, raw in enumerate(records):
        location = locations[i] if locations is not None else f"sections[{i}]"
        section = load_section(raw, location=location)
        if section.title in titles:
            raise ValidationError("duplicate section title", location=location, record=section.title)
        titles.add(section.title)
        logger.debug("Loaded section %r with %d entries", section.title, len(section.entries))
        sections.append(section)

    return Document(title=(title or "").strip(), sections=tuple(sections))


__all__ = ["ValidationError", "load_entry", "load_section", "load_document"]
