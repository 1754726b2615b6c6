"""
Tests for the Document Checker.

Tests verify that the checker correctly:
    - Counts sections, entries and snippets
    - Measures per-language coverage
    - Finds entries missing languages
    - Finds tasks repeated across sections
    - Flags entries without descriptions
"""

from langref.model import Document
from langref.store import load_document
from langref.checker import check_document


def _doc(*sections):
    return load_document(list(sections), title="Ref")


def test_fully_covered_document():
    doc = _doc({"title": "Basics", "entries": [
        {"task": "Print", "description": "d", "snippets": {"python": "print()", "go": "fmt.Println()"}},
        {"task": "Length", "description": "d", "snippets": {"python": "len(s)", "go": "len(s)"}},
    ]})

    report = check_document(doc)

    assert report.document_title == "Ref"
    assert report.total_sections == 1
    assert report.total_entries == 2
    assert report.total_snippets == 4
    assert report.languages == ["python", "go"]
    assert report.language_coverage == {"python": 2, "go": 2}
    assert report.coverage_percent == 100.0
    assert report.missing_snippets == {}
    assert report.is_consistent


def test_missing_languages():
    """Should list languages an entry lacks relative to the whole document."""
    doc = _doc(
        {"title": "Basics", "entries": [
            {"task": "Print", "description": "d", "snippets": {"python": "print()", "go": "fmt.Println()"}},
        ]},
        {"title": "Async", "entries": [
            {"task": "Await", "description": "d", "snippets": {"python": "await f()"}},
        ]},
    )

    report = check_document(doc)

    assert report.missing_snippets == {("Async", "Await", 0): ["go"]}
    assert report.language_coverage == {"python": 2, "go": 1}
    assert report.coverage_percent == 75.0
    assert "Async / Await: missing go" in report.warnings
    assert not report.is_consistent


def test_duplicate_tasks_across_sections():
    doc = _doc(
        {"title": "Basics", "entries": [{"task": "Print", "description": "d", "snippets": {"go": "a"}}]},
        {"title": "Output", "entries": [{"task": "Print", "description": "d", "snippets": {"go": "b"}}]},
    )

    report = check_document(doc)

    assert report.duplicate_tasks == {"Print": ["Basics", "Output"]}
    assert any("appears in several sections" in w for w in report.warnings)


def test_entries_without_description():
    doc = _doc({"title": "Basics", "entries": [
        {"task": "Print", "snippets": {"go": "a"}},
        {"task": "Loop", "description": "d", "snippets": {"go": "b"}},
    ]})

    report = check_document(doc)

    assert report.entries_without_description == [("Basics", "Print")]
    assert "Entries without description: 1" in report.warnings


def test_empty_document():
    report = check_document(Document())
    assert report.total_entries == 0
    assert report.languages == []
    assert report.coverage_percent == 100.0
    assert report.is_consistent


def test_warnings_are_not_duplicated():
    doc = _doc({"title": "Basics", "entries": [{"task": "Print", "snippets": {"go": "a"}}]})
    report = check_document(doc)
    report.add_warning(report.warnings[0])
    assert len(report.warnings) == 1


def test_checker_does_not_modify_document():
    doc = _doc({"title": "Basics", "entries": [{"task": "Print", "snippets": {"go": "a"}}]})
    before = doc
    check_document(doc)
    assert doc == before
    assert doc.sections[0].entries[0].languages == ("go",)


def test_task_repeated_within_one_section():
    """Both copies keep their own gaps, and the repeat is not called a cross-section duplicate."""
    doc = _doc({"title": "Basics", "entries": [
        {"task": "Print", "description": "d", "snippets": {"python": "print()"}},
        {"task": "Print", "description": "d", "snippets": {"go": "fmt.Println()"}},
    ]})

    report = check_document(doc)

    assert report.duplicate_tasks == {}
    assert report.repeated_tasks == {("Basics", "Print"): 2}
    assert report.missing_snippets == {
        ("Basics", "Print", 0): ["go"],
        ("Basics", "Print", 1): ["python"],
    }
    assert "Basics / Print (entry 1): missing go" in report.warnings
    assert "Basics / Print (entry 2): missing python" in report.warnings
    assert "Task 'Print' appears 2 times in section 'Basics'" in report.warnings


def test_cross_section_duplicate_lists_each_section_once():
    doc = _doc(
        {"title": "Basics", "entries": [
            {"task": "Print", "description": "d", "snippets": {"go": "a"}},
            {"task": "Print", "description": "d", "snippets": {"go": "b"}},
        ]},
        {"title": "Output", "entries": [{"task": "Print", "description": "d", "snippets": {"go": "c"}}]},
    )

    report = check_document(doc)

    assert report.duplicate_tasks == {"Print": ["Basics", "Output"]}
    assert report.repeated_tasks == {("Basics", "Print"): 2}
