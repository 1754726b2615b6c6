"""
Core Document Model Objects

Defines the fundamental data structures of a language reference document.

These are pure data classes representing:
    - Snippets (one language's code for a task)
    - Comparison entries (one task across languages)
    - Sections (titled groups of entries)
    - Documents (root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about markdown or input formats
        - Are immutable (frozen, tuple-backed)
        - Are built by the Entry Store, which enforces the invariants
        - Represent structure, not presentation
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


def _unique_in_order(items) -> Tuple[str, ...]:
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return tuple(seen)


@dataclass(frozen=True)
class Snippet:
    """
    One language's code for a task.

    Properties:
        language: Language key as written in the input (e.g. "python", "go")
        code: Code text, verbatim (may span several lines)
    """

    language: str
    code: str


@dataclass(frozen=True)
class ComparisonEntry:
    """
    One row's worth of cross-language snippets for a single task.

    Properties:
        task:
            Task identifier, e.g. "Print to console"

        description:
            Human-readable note shown under the task (may be empty)

        snippets:
            Snippets in insertion order. The order is significant:
            renderers emit columns in exactly this order.

    INVARIANTS (enforced by langref.store):
        - At least one snippet
        - Languages are unique within the entry
    """

    task: str
    description: str = ""
    snippets: Tuple[Snippet, ...] = ()

    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(s.language for s in self.snippets)

    def get_snippet(self, language: str) -> Optional[Snippet]:
        """
        Retrieve the snippet for a language.

        Args:
            language: Language key

        Returns:
            Snippet or None if this entry has no code for the language
        """
        for snippet in self.snippets:
            if snippet.language == language:
                return snippet
        return None


@dataclass(frozen=True)
class Section:
    """
    A titled grouping of comparison entries, e.g. "File I/O".

    INVARIANTS (enforced by langref.store):
        - At least one entry
        - Title is unique within the document
    """

    title: str
    entries: Tuple[ComparisonEntry, ...] = ()

    @property
    def languages(self) -> Tuple[str, ...]:
        """Union of entry languages, in first-seen order."""
        return _unique_in_order(
            lang for entry in self.entries for lang in entry.languages
        )

    def get_entry(self, task: str) -> Optional[ComparisonEntry]:
        for entry in self.entries:
            if entry.task == task:
                return entry
        return None


@dataclass(frozen=True)
class Document:
    """
    Root container: the full reference manual.

    This is THE artifact every backend renders from.

    Created once at load time, immutable thereafter, discarded after
    rendering. Because nothing mutates it, any number of renders may
    share one Document.

    Properties:
        title: Document title, rendered as the top-level heading (may be empty)
        sections: Sections in display order
    """

    title: str = ""
    sections: Tuple[Section, ...] = ()

    @property
    def languages(self) -> Tuple[str, ...]:
        return _unique_in_order(
            lang for section in self.sections for lang in section.languages
        )

    @property
    def entry_count(self) -> int:
        return sum(len(section.entries) for section in self.sections)

    def get_section(self, title: str) -> Optional[Section]:
        """
        Retrieve a section by title.

        Args:
            title: Section title

        Returns:
            Section object or None if not found
        """
        for section in self.sections:
            if section.title == title:
                return section
        return None

    def iter_entries(self) -> Iterator[Tuple[Section, ComparisonEntry]]:
        """All (section, entry) pairs in document order."""
        for section in self.sections:
            for entry in section.entries:
                yield section, entry
