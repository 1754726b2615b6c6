#!/usr/bin/env python3
"""
Complete Pipeline Demo: CSV → Document → Check → Markdown

Shows the full workflow:
1. Parse a CSV comparison table
2. Validate it into an immutable Document
3. Check it for gaps
4. Render markdown and save YAML topic data
"""

import logging

from langref.csv_parser import parse_csv_string
from langref.checker import check_document
from langref.backends import iter_markdown, save_markdown_file, RenderMode
from langref.serialization import save_document_yaml

SAMPLE_CSV = '''section,task,description,python,go,rust
Basics,Print to console,Write a line to stdout.,"print(""x"")","fmt.Println(""x"")","println!(""x"");"
Basics,String length,,len(s),len(s),s.len()
Error handling,Raise an error,,"raise ValueError(""bad"")","return errors.New(""bad"")",
'''


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: CSV → Document → Check → Markdown")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Parse CSV
    # =========================================================================
    print("\n1. PARSING CSV...")
    document = parse_csv_string(SAMPLE_CSV, title="Pipeline Demo")
    print(f"   Loaded document: {document.title}")
    print(f"   Sections: {len(document.sections)}")
    print(f"   Entries: {document.entry_count}")
    print(f"   Languages: {', '.join(document.languages)}")

    # =========================================================================
    # STEP 2: Check
    # =========================================================================
    print("\n2. CHECKING DOCUMENT...")
    report = check_document(document)
    print(f"   Coverage: {report.coverage_percent:.1f}%")
    for warning in report.warnings:
        print(f"      - {warning}")

    # =========================================================================
    # STEP 3: Render
    # =========================================================================
    print("\n3. SECTION TABLE OUTPUT:")
    print("-" * 80)
    for line in iter_markdown(document, mode=RenderMode.SECTION_TABLE):
        print(f"   {line}")

    # =========================================================================
    # STEP 4: Save
    # =========================================================================
    print("\n4. SAVING...")
    save_markdown_file(document, "pipeline_demo.md")
    save_document_yaml(document, "pipeline_demo.yaml")

    print("\n" + "=" * 80)
    print("PIPELINE COMPLETE!")
    print("=" * 80)


if __name__ == "__main__":
    main()
