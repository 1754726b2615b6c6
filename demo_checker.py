#!/usr/bin/env python3
"""
Demo: Run the consistency checker on the example document and print the report.
"""

from langref.examples import build_example_document
from langref.checker import check_document


def print_report(report):
    """Pretty-print a DocumentReport."""
    print()
    print("=" * 70)
    print(f"CONSISTENCY REPORT: {report.document_title}")
    print("=" * 70)
    print()

    print("BASIC METRICS")
    print(f"  Sections:              {report.total_sections}")
    print(f"  Entries:               {report.total_entries}")
    print(f"  Snippets:              {report.total_snippets}")
    print(f"  Coverage:              {report.coverage_percent:.1f}%")
    print()

    print("LANGUAGES")
    for lang in report.languages:
        print(f"  {lang}: {report.language_coverage[lang]} of {report.total_entries} entries")
    print()

    if report.warnings:
        print(f"WARNINGS ({len(report.warnings)})")
        for warning in report.warnings:
            print(f"  - {warning}")
    else:
        print("No warnings: every entry covers every language.")
    print()


def main():
    document = build_example_document()
    print_report(check_document(document))


if __name__ == "__main__":
    main()
