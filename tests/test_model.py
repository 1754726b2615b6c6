"""
Tests for langref Core Model Objects

These tests verify:
    - Basic model creation
    - Immutability
    - Ordering helpers (languages in first-seen order)
    - Retrieval methods
"""

import dataclasses

import pytest
from langref.model import (
    Snippet,
    ComparisonEntry,
    Section,
    Document,
)


def _entry(task, *languages):
    return ComparisonEntry(
        task=task,
        snippets=tuple(Snippet(language=lang, code=f"{lang} code") for lang in languages),
    )


class TestComparisonEntry:
    """Test ComparisonEntry objects."""

    def test_languages_follow_insertion_order(self):
        entry = _entry("Print", "python", "go", "c")
        assert entry.languages == ("python", "go", "c")

    def test_get_snippet(self):
        entry = _entry("Print", "python", "go")
        assert entry.get_snippet("go").code == "go code"
        assert entry.get_snippet("rust") is None

    def test_description_defaults_to_empty(self):
        assert _entry("Print", "python").description == ""

    def test_entry_is_immutable(self):
        entry = _entry("Print", "python")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.task = "Other"


class TestSection:
    """Test Section objects."""

    def test_languages_union_in_first_seen_order(self):
        section = Section(
            title="Basics",
            entries=(_entry("A", "python", "go"), _entry("B", "rust", "python")),
        )
        assert section.languages == ("python", "go", "rust")

    def test_get_entry(self):
        section = Section(title="Basics", entries=(_entry("A", "python"),))
        assert section.get_entry("A").task == "A"
        assert section.get_entry("Z") is None


class TestDocument:
    """Test Document (root container)."""

    def test_empty_document(self):
        doc = Document()
        assert doc.title == ""
        assert doc.sections == ()
        assert doc.languages == ()
        assert doc.entry_count == 0

    def test_get_section_and_counts(self):
        doc = Document(
            title="Ref",
            sections=(
                Section(title="Basics", entries=(_entry("A", "python"), _entry("B", "go"))),
                Section(title="I/O", entries=(_entry("C", "c"),)),
            ),
        )
        assert doc.get_section("I/O").entries[0].task == "C"
        assert doc.get_section("Missing") is None
        assert doc.entry_count == 3
        assert doc.languages == ("python", "go", "c")

    def test_iter_entries_in_document_order(self):
        doc = Document(
            sections=(
                Section(title="S1", entries=(_entry("A", "python"),)),
                Section(title="S2", entries=(_entry("B", "python"),)),
            ),
        )
        pairs = [(section.title, entry.task) for section, entry in doc.iter_entries()]
        assert pairs == [("S1", "A"), ("S2", "B")]

    def test_document_is_immutable(self):
        doc = Document(title="Ref")
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.title = "Other"
