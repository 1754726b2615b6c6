"""Render configuration with 3-tier precedence: overrides > YAML file > defaults."""

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml


class ConfigError(ValueError):
    """Raised when a render configuration is invalid."""
    pass


class RenderMode(Enum):
    """Layout modes for markdown output."""
    TABLE = "table"                  # One small table per entry
    SECTION_TABLE = "section_table"  # One wide table per section
    CODE_BLOCKS = "code_blocks"      # Fenced code block per language


@dataclass(frozen=True)
class RenderOptions:
    """
    Presentation settings for the markdown renderer.

    Properties:
        mode: Layout mode
        heading_level: Level of the document title heading; sections and
            entries sit one and two levels below it
        language_labels: Display names for language keys ("js" -> "JavaScript")
        fence_tags: Code-fence info strings for language keys ("c++" -> "cpp")
        include_descriptions: Emit entry descriptions as paragraphs
    """

    mode: RenderMode = RenderMode.TABLE
    heading_level: int = 1
    language_labels: Tuple[Tuple[str, str], ...] = ()
    fence_tags: Tuple[Tuple[str, str], ...] = ()
    include_descriptions: bool = True

    def __post_init__(self):
        # Mappings are frozen into (key, value) pairs so options stay hashable
        for name in ("language_labels", "fence_tags"):
            value = getattr(self, name)
            if isinstance(value, Mapping):
                object.__setattr__(self, name, tuple(value.items()))

    def label_for(self, language: str) -> str:
        return dict(self.language_labels).get(language, language)

    def fence_tag_for(self, language: str) -> str:
        return dict(self.fence_tags).get(language, language.lower())

    def heading(self, depth: int, text: str) -> str:
        """Heading `depth` levels below the document title (capped at h6)."""
        level = min(self.heading_level + depth, 6)
        return f"{'#' * level} {text}"


def _coerce(values: Any, source: str = "render options") -> Dict[str, Any]:
    if not isinstance(values, dict):
        raise ConfigError(f"{source} must be a mapping, got {type(values).__name__}")

    known = {f.name for f in fields(RenderOptions)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"Unknown render option(s): {', '.join(unknown)}")

    result = dict(values)
    if "mode" in result and not isinstance(result["mode"], RenderMode):
        try:
            result["mode"] = RenderMode(result["mode"])
        except ValueError:
            valid = ", ".join(m.value for m in RenderMode)
            raise ConfigError(f"Invalid mode {result['mode']!r} (expected one of: {valid})")

    if "heading_level" in result:
        level = result["heading_level"]
        if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= 4:
            raise ConfigError(f"heading_level must be an integer from 1 to 4, got {level!r}")

    for key in ("language_labels", "fence_tags"):
        if key in result:
            mapping = result[key] or {}
            if not isinstance(mapping, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in mapping.items()
            ):
                raise ConfigError(f"{key} must map language names to strings")
            result[key] = dict(mapping)

    if "include_descriptions" in result and not isinstance(result["include_descriptions"], bool):
        raise ConfigError("include_descriptions must be true or false")

    return result


def load_render_options(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> RenderOptions:
    """
    Build RenderOptions with 3-tier precedence.

    Priority order:
    1. Explicit overrides (highest priority)
    2. YAML file (top-level mapping, or the `render` key within it)
    3. RenderOptions defaults (lowest priority)

    Raises:
        FileNotFoundError: If `path` is given but does not exist
        ConfigError: On unknown keys or invalid values
    """
    options = RenderOptions()

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Render config not found: {path}")
        with open(path, encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}")
        if not isinstance(loaded, dict):
            raise ConfigError(f"Render config {path} must contain a mapping")
        if "render" in loaded:
            loaded = loaded["render"]
        options = replace(options, **_coerce(loaded, source=f"Render config {path}"))

    if overrides:
        options = replace(options, **_coerce(overrides))

    return options


__all__ = ["ConfigError", "RenderMode", "RenderOptions", "load_render_options"]
