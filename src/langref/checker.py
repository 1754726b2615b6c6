"""
Document Checker — consistency report for langref Documents.

This module provides lightweight analysis of Document objects:
    - Language inventory and coverage
    - Entries missing languages the rest of the document covers
    - Tasks repeated across sections or within one
    - Entries without a description
    - Warning flags for an uneven reference table

IMPORTANT: Loading already rejected anything malformed. This layer does
NOT modify the document and never raises; it only produces read-only
reports about gaps a human editor may want to fill.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from langref.model import ComparisonEntry, Document, Section


@dataclass
class DocumentReport:
    """Consistency report for a document."""

    document_title: str
    total_sections: int = 0
    total_entries: int = 0
    total_snippets: int = 0

    # Language coverage
    languages: List[str] = field(default_factory=list)
    language_coverage: Dict[str, int] = field(default_factory=dict)
    coverage_percent: float = 100.0

    # Gaps, keyed by (section title, task, position of the entry in its section)
    missing_snippets: Dict[Tuple[str, str, int], List[str]] = field(default_factory=dict)
    duplicate_tasks: Dict[str, List[str]] = field(default_factory=dict)
    repeated_tasks: Dict[Tuple[str, str], int] = field(default_factory=dict)
    entries_without_description: List[Tuple[str, str]] = field(default_factory=list)

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return not self.warnings

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _iter_positioned(document: Document) -> Iterator[Tuple[Section, ComparisonEntry, int]]:
    for section in document.sections:
        for position, entry in enumerate(section.entries):
            yield section, entry, position


def check_document(document: Document) -> DocumentReport:
    """
    Check a Document for gaps and inconsistencies.

    Checks for:
    - Entries missing a language used elsewhere in the document
    - The same task appearing in more than one section, or twice in one
    - Entries with no description

    Returns a DocumentReport with metrics and warnings.
    """
    report = DocumentReport(document_title=document.title)

    report.total_sections = len(document.sections)
    report.total_entries = document.entry_count
    report.languages = list(document.languages)

    # =========================================================================
    # 1. LANGUAGE COVERAGE
    # =========================================================================

    coverage: Dict[str, int] = {lang: 0 for lang in report.languages}
    for section, entry, position in _iter_positioned(document):
        report.total_snippets += len(entry.snippets)
        for lang in entry.languages:
            coverage[lang] += 1

        missing = [lang for lang in report.languages if lang not in entry.languages]
        if missing:
            report.missing_snippets[(section.title, entry.task, position)] = missing

    report.language_coverage = coverage

    possible = report.total_entries * len(report.languages)
    if possible:
        report.coverage_percent = (report.total_snippets / possible) * 100

    # =========================================================================
    # 2. TASK UNIQUENESS
    # =========================================================================

    sections_by_task: Dict[str, List[str]] = defaultdict(list)
    counts: Dict[Tuple[str, str], int] = defaultdict(int)
    for section, entry in document.iter_entries():
        counts[(section.title, entry.task)] += 1
        if section.title not in sections_by_task[entry.task]:
            sections_by_task[entry.task].append(section.title)

    report.duplicate_tasks = {
        task: titles for task, titles in sections_by_task.items() if len(titles) > 1
    }
    report.repeated_tasks = {key: n for key, n in counts.items() if n > 1}

    # =========================================================================
    # 3. DESCRIPTIONS
    # =========================================================================

    for section, entry in document.iter_entries():
        if not entry.description:
            report.entries_without_description.append((section.title, entry.task))

    # =========================================================================
    # 4. WARNING FLAGS
    # =========================================================================

    for (section_title, task, position), missing in report.missing_snippets.items():
        label = task
        if (section_title, task) in report.repeated_tasks:
            label = f"{task} (entry {position + 1})"
        report.add_warning(
            f"{section_title} / {label}: missing {', '.join(missing)}"
        )

    for task, titles in report.duplicate_tasks.items():
        report.add_warning(
            f"Task {task!r} appears in several sections: {', '.join(titles)}"
        )

    for (section_title, task), n in report.repeated_tasks.items():
        report.add_warning(
            f"Task {task!r} appears {n} times in section {section_title!r}"
        )

    if report.entries_without_description:
        report.add_warning(
            f"Entries without description: {len(report.entries_without_description)}"
        )

    return report


__all__ = ["DocumentReport", "check_document"]
