"""Backends for langref output generation (markdown)."""

from .markdown_generator import RenderMode, iter_markdown, render_entry_row, render_markdown, save_markdown_file

__all__ = ["RenderMode", "iter_markdown", "render_entry_row", "render_markdown", "save_markdown_file"]
