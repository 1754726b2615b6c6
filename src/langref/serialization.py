"""
Serialization helpers for langref Documents.

Provides JSON/YAML round-trip via an intermediate dict representation, and
loading of a reference manual kept as one topic file per section.

Everything read from disk goes through langref.store, so a loaded Document
is always validated. Snippets are written in the mapping form
({language: code}); YAML mappings with a repeated key are rejected rather
than silently keeping the last value.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from langref.model import ComparisonEntry, Document, Section
from langref.store import ValidationError, load_document, load_section

logger = logging.getLogger(__name__)

TOPIC_SUFFIXES = (".yaml", ".yml", ".json")
DOCUMENT_META_FILE = "_document.yaml"


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses duplicate keys within one mapping."""


def _construct_unique_mapping(loader: _UniqueKeyLoader, node: yaml.MappingNode, deep: bool = False) -> Dict[Any, Any]:
    loader.flatten_mapping(node)
    seen = set()
    for key_node, _value_node in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if key in seen:
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping", node.start_mark,
                f"found duplicate key {key!r}", key_node.start_mark,
            )
        seen.add(key)
    return loader.construct_mapping(node, deep=deep)


_UniqueKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_unique_mapping
)


def _safe_load_yaml(text: str, source: str = "<string>") -> Any:
    try:
        return yaml.load(text, Loader=_UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise ValidationError(f"invalid YAML: {e}", location=source)


def _safe_load_json(text: str, source: str = "<string>") -> Any:
    try:
        return json.loads(text, object_pairs_hook=_reject_duplicate_pairs)
    except json.JSONDecodeError as e:
        raise ValidationError(f"invalid JSON: {e}", location=source)
    except ValidationError as e:
        raise ValidationError(e.reason, location=source)


def _reject_duplicate_pairs(pairs: List[tuple]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ValidationError(f"duplicate key {key!r}")
        result[key] = value
    return result


def entry_to_dict(e: ComparisonEntry) -> Dict[str, Any]:
    return {
        "task": e.task,
        "description": e.description,
        "snippets": {s.language: s.code for s in e.snippets},
    }


def section_to_dict(s: Section) -> Dict[str, Any]:
    return {"title": s.title, "entries": [entry_to_dict(e) for e in s.entries]}


def document_to_dict(d: Document) -> Dict[str, Any]:
    return {"title": d.title, "sections": [section_to_dict(s) for s in d.sections]}


def document_from_dict(d: Any) -> Document:
    if not isinstance(d, dict):
        raise ValidationError(f"document must be a mapping, got {type(d).__name__}")
    sections = d.get("sections") or []
    if not isinstance(sections, list):
        raise ValidationError("'sections' must be a list")
    return load_document(sections, title=d.get("title") or "")


def document_to_json(d: Document) -> str:
    # Key order carries snippet order, so keys are NOT sorted
    return json.dumps(document_to_dict(d), indent=2, ensure_ascii=False)


def document_from_json(s: str) -> Document:
    return document_from_dict(_safe_load_json(s))


def document_to_yaml(d: Document) -> str:
    return yaml.safe_dump(document_to_dict(d), sort_keys=False, allow_unicode=True)


def document_from_yaml(s: str) -> Document:
    return document_from_dict(_safe_load_yaml(s))


def _read_topic_file(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return _safe_load_json(text, source=str(path))
    return _safe_load_yaml(text, source=str(path))


def load_section_file(path: str | Path) -> Section:
    """
    Load one topic file (a single section) from YAML or JSON.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file is malformed or breaks an invariant
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Topic file not found: {path}")
    section = load_section(_read_topic_file(path), location=path.name)
    logger.debug("Loaded %s: section %r", path, section.title)
    return section


def load_document_dir(path: str | Path, title: str | None = None) -> Document:
    """
    Load a directory of topic files as one Document.

    Topic files (*.yaml, *.yml, *.json) are read in file-name order, so a
    numeric prefix ("01_print.yaml") fixes section order. An optional
    _document.yaml supplies the title.

    Title precedence: _document.yaml > `title` argument > directory name.

    Raises:
        FileNotFoundError: If the directory doesn't exist
        ValidationError: On the first invalid topic file or duplicate section title
    """
    path = Path(path)
    if not path.is_dir():
        raise FileNotFoundError(f"Topic directory not found: {path}")

    meta_path = path / DOCUMENT_META_FILE
    if meta_path.is_file():
        meta = _read_topic_file(meta_path) or {}
        if not isinstance(meta, dict):
            raise ValidationError("document metadata must be a mapping", location=meta_path.name)
        title = meta.get("title") or title

    topic_files = sorted(
        p for p in path.iterdir()
        if p.is_file() and p.suffix in TOPIC_SUFFIXES and p.name != DOCUMENT_META_FILE
    )

    records = []
    for topic in topic_files:
        record = _read_topic_file(topic)
        if isinstance(record, dict):
            record.setdefault("title", topic.stem)
        records.append(record)
    logger.debug("Read %d topic files from %s", len(records), path)

    return load_document(
        records,
        title=title if title is not None else path.name,
        locations=[topic.name for topic in topic_files],
    )


def save_document_yaml(d: Document, path: str | Path) -> None:
    Path(path).write_text(document_to_yaml(d), encoding="utf-8")
    logger.info("Wrote %s", path)


__all__ = [
    "document_to_dict",
    "document_from_dict",
    "document_to_json",
    "document_from_json",
    "document_to_yaml",
    "document_from_yaml",
    "load_section_file",
    "load_document_dir",
    "save_document_yaml",
]
