"""
CSV Parser for langref (Raw Input → Document).

Lets a whole reference manual be edited as one spreadsheet.

CSV Format:
    section, task, description, <language>, <language>, ...

Syntax Notes:
    - Every column other than section/task/description is a language
    - Language columns keep their left-to-right order
    - An empty language cell means "no snippet for this language"
    - Rows are grouped into sections in order of first appearance
    - Cells may contain newlines (quote them, as any CSV writer does)
"""

import csv
import warnings
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import Dict, List, Optional

from langref.model import Document
from langref.store import ValidationError, load_document

REQUIRED_COLUMNS = ["section", "task", "description"]


class CSVParseError(ValidationError):
    """Raised when the CSV structure itself is unusable."""
    pass


@dataclass
class CSVRow:
    """Parsed CSV row."""
    line: int
    section: str
    task: str
    description: str
    snippets: Dict[str, str] = field(default_factory=dict)


def _parse_csv_rows(csv_content: str) -> List[CSVRow]:
    """Parse CSV content into structured rows."""
    reader = csv.reader(StringIO(csv_content))
    header = next(reader, None)

    if header is None:
        raise CSVParseError("CSV is empty")

    header = [col.strip() for col in header]
    missing = [col for col in REQUIRED_COLUMNS if col not in header]
    if missing:
        raise CSVParseError(f"Missing required columns: {missing}")

    duplicates = sorted({col for col in header if col and header.count(col) > 1})
    if duplicates:
        raise CSVParseError(f"Duplicate columns: {duplicates}", location="line 1")

    languages = [col for col in header if col and col not in REQUIRED_COLUMNS]

    rows = []
    for line_num, values in enumerate(reader, start=2):  # Start at 2 (header is line 1)
        if not any(v.strip() for v in values):
            warnings.warn(f"Skipping blank CSV row at line {line_num}", UserWarning)
            continue
        if len(values) > len(header):
            raise CSVParseError(
                f"Row has {len(values)} cells but header has {len(header)}",
                location=f"line {line_num}",
            )
        record = dict(zip(header, values))
        rows.append(CSVRow(
            line=line_num,
            section=record.get("section", "").strip(),
            task=record.get("task", "").strip(),
            description=record.get("description", "").strip(),
            snippets={
                lang: record[lang]
                for lang in languages
                if record.get(lang, "").strip()
            },
        ))

    return rows


def parse_csv_string(csv_content: str, title: str = "") -> Document:
    """
    Parse CSV content into a Document.

    Args:
        csv_content: CSV as string
        title: Document title

    Returns:
        Validated Document

    Raises:
        CSVParseError: If the CSV structure is unusable
        ValidationError: If a row breaks a model invariant (e.g. no snippets)
    """
    rows = _parse_csv_rows(csv_content)

    sections: Dict[str, List[dict]] = {}
    for row in rows:
        if not row.section:
            raise CSVParseError("missing section", location=f"line {row.line}", record=row.task or None)
        sections.setdefault(row.section, []).append({
            "task": row.task,
            "description": row.description,
            "snippets": row.snippets,
        })

    records = [{"title": name, "entries": entries} for name, entries in sections.items()]
    return load_document(records, title=title)


def parse_csv_file(filepath: str, title: Optional[str] = None) -> Document:
    """
    Parse CSV file into a Document.

    Args:
        filepath: Path to CSV file
        title: Optional document title (defaults to the file name)

    Raises:
        FileNotFoundError: If file doesn't exist
        CSVParseError: If parsing fails
    """
    path = Path(filepath)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    if title is None:
        title = path.stem

    return parse_csv_string(content, title=title)


__all__ = [
    "parse_csv_string",
    "parse_csv_file",
    "CSVParseError",
]
