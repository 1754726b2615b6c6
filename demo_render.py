#!/usr/bin/env python3
"""
Demo: Render the example reference document to markdown.

Shows all three layout modes (TABLE, SECTION_TABLE, CODE_BLOCKS).
"""

import logging

from langref.examples import build_example_document
from langref.backends import render_markdown, save_markdown_file, RenderMode


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    document = build_example_document()

    print("=" * 80)
    print("MARKDOWN RENDERER DEMO")
    print("=" * 80)

    modes = [RenderMode.TABLE, RenderMode.SECTION_TABLE, RenderMode.CODE_BLOCKS]

    for mode in modes:
        print(f"\n{mode.value.upper()} MODE:")
        print("-" * 80)

        print(render_markdown(document, mode=mode))

        filename = f"reference_{mode.value}.md"
        save_markdown_file(document, filename, mode=mode)
        print(f"Saved to: {filename}")


if __name__ == "__main__":
    main()
