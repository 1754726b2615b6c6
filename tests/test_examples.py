"""
Test the example reference document.

Validates that the example builder loads through the Entry Store and covers
every topic of the reference manual.
"""

from langref.examples import build_example_document
from langref.checker import check_document


def test_example_document_structure():
    doc = build_example_document()

    assert doc.title == "Language Reference"
    assert [s.title for s in doc.sections] == [
        "Basics",
        "Error handling",
        "File I/O",
        "Regular expressions",
        "Object-oriented syntax",
        "Database access",
        "Asynchronous programming",
        "API consumption",
    ]
    assert doc.languages == ("python", "javascript", "go")

    printing = doc.get_section("Basics").get_entry("Print to console")
    assert printing.languages == ("python", "javascript", "go")


def test_example_document_has_known_gaps():
    report = check_document(build_example_document())
    assert report.missing_snippets[("Database access", "Run a query", 0)] == ["javascript"]
    assert report.missing_snippets[("Asynchronous programming", "Await a result", 0)] == ["go"]
