"""BookGen configuration management.

Loads configuration from .bookgen/config.toml if present, with sensible defaults.
Configuration hierarchy (highest priority first):
1. Command-line flags
2. Repo-level config (.bookgen/config.toml)
3. Defaults
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from bookgen.html.indent import DEFAULT_INDENT
from bookgen.html.numbering import HeadingPolicy
from bookgen.html.style import DEFAULT_THEME, THEMES
from bookgen.html.toc import DEFAULT_MAX_ENTRIES, DEFAULT_TOC_TITLE


@dataclass
class OutputConfig:
    """Configuration for emitted markup."""

    indent: str = DEFAULT_INDENT

    def __post_init__(self) -> None:
        if not isinstance(self.indent, str) or self.indent.strip():
            raise ValueError(f"output.indent must be a string of whitespace, got {self.indent!r}")


@dataclass
class TocConfig:
    """Table of contents configuration."""

    max_entries: int = DEFAULT_MAX_ENTRIES
    depth: int = 0  # 0 lists every heading level
    title: str = DEFAULT_TOC_TITLE

    def __post_init__(self) -> None:
        for name in ("max_entries", "depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"toc.{name} must be an integer, got {value!r}")
        if self.max_entries < 1:
            raise ValueError(f"toc.max_entries must be at least 1, got {self.max_entries}")
        if self.depth < 0:
            raise ValueError(f"toc.depth must be 0 or positive, got {self.depth}")


@dataclass
class HeadingsConfig:
    """Heading numbering configuration."""

    policy: HeadingPolicy = HeadingPolicy.RELAXED

    def __post_init__(self) -> None:
        try:
            self.policy = HeadingPolicy(self.policy)
        except ValueError:
            raise ValueError(
                f"headings.policy must be 'relaxed' or 'strict', got {self.policy!r}"
            ) from None


@dataclass
class StyleConfig:
    """Default stylesheet configuration."""

    theme: str = DEFAULT_THEME

    def __post_init__(self) -> None:
        if self.theme not in THEMES:
            raise ValueError(f"style.theme must be one of {', '.join(THEMES)}, got {self.theme!r}")


@dataclass
class BookgenConfig:
    """BookGen configuration."""

    output: OutputConfig = field(default_factory=OutputConfig)
    toc: TocConfig = field(default_factory=TocConfig)
    headings: HeadingsConfig = field(default_factory=HeadingsConfig)
    style: StyleConfig = field(default_factory=StyleConfig)


def load_config(workspace: Path) -> BookgenConfig:
    """Load configuration from .bookgen/config.toml if it exists.

    Args:
        workspace: Path to the workspace/repository root.

    Returns:
        BookgenConfig with values from config file or defaults.
    """
    config_path = workspace / CONFIG_RELATIVE_PATH

    if not config_path.exists():
        return BookgenConfig()

    return load_config_file(config_path)


def load_config_file(config_path: Path) -> BookgenConfig:
    """Load configuration from an explicit TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the TOML is invalid or holds invalid values
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    output_data = data.get("output", {})
    toc_data = data.get("toc", {})
    headings_data = data.get("headings", {})
    style_data = data.get("style", {})

    output = OutputConfig(indent=output_data.get("indent", DEFAULT_INDENT))

    toc = TocConfig(
        max_entries=toc_data.get("max_entries", DEFAULT_MAX_ENTRIES),
        depth=toc_data.get("depth", 0),
        title=toc_data.get("title", DEFAULT_TOC_TITLE),
    )

    headings = HeadingsConfig(policy=headings_data.get("policy", HeadingPolicy.RELAXED))

    style = StyleConfig(theme=style_data.get("theme", DEFAULT_THEME))

    return BookgenConfig(output=output, toc=toc, headings=headings, style=style)


CONFIG_RELATIVE_PATH = Path(".bookgen") / "config.toml"
