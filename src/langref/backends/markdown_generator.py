"""
Markdown generator for language reference documents.

Converts a Document into GitHub-flavoured markdown, one line at a time.

Supports multiple modes:
    - TABLE: Heading per task, then a one-row table with a column per language
    - SECTION_TABLE: One table per section, a row per task
    - CODE_BLOCKS: Heading per task, then a fenced code block per language

Rendering is a pure function of (document, mode, options): the line
iterator keeps no state between calls, so the same Document always
renders to the same text.
"""

import logging
import re
from typing import Iterator, List, Optional

from langref.config import RenderMode, RenderOptions
from langref.model import ComparisonEntry, Document, Section

logger = logging.getLogger(__name__)

_BACKTICK_RUN = re.compile(r"`+")


def _longest_backtick_run(text: str) -> int:
    return max((len(m) for m in _BACKTICK_RUN.findall(text)), default=0)


def _escape_cell_text(s: str) -> str:
    """Escape plain text (headers, task names) for a table cell."""
    s = " ".join(s.split())
    return s.replace("|", "\\|")


def _inline_code(line: str) -> str:
    """Wrap one line in a code span that survives backticks inside it."""
    if not line.strip():
        return ""
    ticks = "`" * (_longest_backtick_run(line) + 1)
    # A span starting or ending with a backtick needs padding
    if line.startswith("`") or line.endswith("`"):
        line = f" {line} "
    return f"{ticks}{line}{ticks}"


def _code_cell(code: str) -> str:
    """Render a snippet as a table cell; each source line becomes its own code span."""
    lines = code.strip("\n").splitlines()
    cell = "<br>".join(_inline_code(line) for line in lines)
    # GFM splits cells on '|' even inside code spans
    return cell.replace("|", "\\|")


def _row(cells: List[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _separator(count: int) -> str:
    return _row(["---"] * count)


def render_entry_row(entry: ComparisonEntry) -> str:
    """
    Render an entry's snippets as a single table row.

    The row has exactly one cell per language, in insertion order.
    """
    return _row([_code_cell(s.code) for s in entry.snippets])


def _fenced_block(code: str, tag: str) -> List[str]:
    fence = "`" * max(3, _longest_backtick_run(code) + 1)
    return [f"{fence}{tag}", *code.strip("\n").splitlines(), fence]


def _entry_preamble(entry: ComparisonEntry, options: RenderOptions) -> List[List[str]]:
    blocks = [[options.heading(2, entry.task)]]
    if options.include_descriptions and entry.description:
        blocks.append(entry.description.splitlines())
    return blocks


def _table_blocks(section: Section, options: RenderOptions) -> Iterator[List[str]]:
    for entry in section.entries:
        yield from _entry_preamble(entry, options)
        header = [_escape_cell_text(options.label_for(lang)) for lang in entry.languages]
        yield [_row(header), _separator(len(header)), render_entry_row(entry)]


def _section_table_blocks(section: Section, options: RenderOptions) -> Iterator[List[str]]:
    languages = section.languages
    header = ["Task"] + [_escape_cell_text(options.label_for(lang)) for lang in languages]
    lines = [_row(header), _separator(len(header))]
    for entry in section.entries:
        cells = [_escape_cell_text(entry.task)]
        for lang in languages:
            snippet = entry.get_snippet(lang)
            cells.append(_code_cell(snippet.code) if snippet else "")
        lines.append(_row(cells))
    yield lines


def _code_block_blocks(section: Section, options: RenderOptions) -> Iterator[List[str]]:
    for entry in section.entries:
        yield from _entry_preamble(entry, options)
        for snippet in entry.snippets:
            yield [f"**{options.label_for(snippet.language)}**"]
            yield _fenced_block(snippet.code, options.fence_tag_for(snippet.language))


_SECTION_RENDERERS = {
    RenderMode.TABLE: _table_blocks,
    RenderMode.SECTION_TABLE: _section_table_blocks,
    RenderMode.CODE_BLOCKS: _code_block_blocks,
}


def _iter_blocks(document: Document, mode: RenderMode, options: RenderOptions) -> Iterator[List[str]]:
    if not document.sections:
        return

    if document.title:
        yield [options.heading(0, document.title)]

    render_section = _SECTION_RENDERERS[mode]
    for section in document.sections:
        yield [options.heading(1, section.title)]
        yield from render_section(section, options)


def iter_markdown(
    document: Document,
    mode: Optional[RenderMode] = None,
    options: Optional[RenderOptions] = None,
) -> Iterator[str]:
    """
    Lazily generate markdown lines for a document.

    Args:
        document: Validated Document to render
        mode: Layout mode; defaults to options.mode (TABLE if no options)
        options: Presentation settings

    Yields:
        Markdown lines without trailing newlines. Blocks are separated by
        a single empty line. An empty Document yields nothing.
    """
    options = options or RenderOptions()
    mode = mode or options.mode

    first = True
    for block in _iter_blocks(document, mode, options):
        if not first:
            yield ""
        first = False
        yield from block


def render_markdown(
    document: Document,
    mode: Optional[RenderMode] = None,
    options: Optional[RenderOptions] = None,
) -> str:
    """
    Render a document to a markdown string.

    Returns:
        Markdown text ending in a newline, or "" for an empty Document
    """
    lines = list(iter_markdown(document, mode=mode, options=options))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def save_markdown_file(
    document: Document,
    filename: str,
    mode: Optional[RenderMode] = None,
    options: Optional[RenderOptions] = None,
) -> None:
    """
    Render markdown and save to file.

    Args:
        document: Document to render
        filename: Output file path (.md extension recommended)
        mode: Layout mode
        options: Presentation settings
    """
    text = render_markdown(document, mode=mode, options=options)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info("Wrote %s (%d sections, %d entries)", filename, len(document.sections), document.entry_count)


__all__ = ["RenderMode", "iter_markdown", "render_markdown", "render_entry_row", "save_markdown_file"]
