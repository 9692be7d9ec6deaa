"""CLI entry point for BookGen.

Usage:
    python -m bookgen init                        # Write a starter outline to book.yaml
    python -m bookgen build book.yaml             # Render to standard output
    python -m bookgen build book.yaml -o book.html

Or via the installed command:
    bookgen init my-book.yaml
    bookgen build my-book.yaml -o my-book.html --toc-depth 2
    bookgen build my-book.yaml -o my-book.html --strict --atomic
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel

from bookgen._version import get_full_version_string
from bookgen.config import BookgenConfig, load_config, load_config_file
from bookgen.html.context import DocumentContext
from bookgen.html.document import HtmlDocument
from bookgen.html.errors import BookGenError
from bookgen.html.numbering import HeadingPolicy
from bookgen.html.sink import open_output
from bookgen.html.style import THEMES
from bookgen.outline import get_template, load_outline, render_outline

# Load environment variables
load_dotenv()

# Default log level is WARNING; override with LOG_LEVEL=INFO or LOG_LEVEL=DEBUG
if "LOG_LEVEL" not in os.environ:
    os.environ["LOG_LEVEL"] = "WARNING"

logger = logging.getLogger(__name__)

# Status goes to stderr so that standard output carries only the document
console = Console(stderr=True)

DEFAULT_OUTLINE_PATH = Path("book.yaml")


def configure_logging() -> None:
    """Configure root logging from the LOG_LEVEL environment variable."""
    level_name = os.environ.get("LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def resolve_config(config_path: Path | None, workspace: Path) -> BookgenConfig:
    """Load the explicit config file if given, else the workspace config."""
    if config_path is not None:
        return load_config_file(config_path)
    return load_config(workspace)


def run_build(
    outline_path: Path,
    output: Path | None,
    config: BookgenConfig,
    *,
    toc_depth: int | None = None,
    no_toc: bool = False,
    strict: bool = False,
    theme: str | None = None,
    atomic: bool = False,
) -> int:
    """Render an outline to HTML.

    Args:
        outline_path: Path to the YAML outline
        output: Output file, or None for standard output
        config: Configuration supplying defaults
        toc_depth: Override for the table of contents depth
        no_toc: Leave out the table of contents
        strict: Reject headings that skip a level
        theme: Override for the default stylesheet theme
        atomic: Replace the output file only once rendering succeeded

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if output is not None:
        console.print(Panel("[bold blue]BookGen - Build[/]", expand=False))
        console.print(f"[dim]Outline: {outline_path}[/]")
        console.print(f"[dim]Output: {output}[/]")
        console.print()

    try:
        outline = load_outline(outline_path)
    except (FileNotFoundError, BookGenError) as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    if toc_depth is not None:
        outline.toc.depth = toc_depth
    if no_toc:
        outline.toc.enabled = False
    if theme is not None:
        outline.document.theme = theme

    policy = HeadingPolicy.STRICT if strict else config.headings.policy

    try:
        with open_output(output, atomic=atomic) as sink:
            context = DocumentContext(
                sink,
                indent=config.output.indent,
                max_entries=config.toc.max_entries,
                policy=policy,
            )
            headings = render_outline(outline, HtmlDocument(context), config)
    except (BookGenError, ValueError, OSError) as e:
        console.print(f"[red]Error:[/] {e}")
        if output is not None and not atomic:
            console.print(f"[yellow]![/] Partial output left in {output}")
        return 1

    if not context.indent.is_balanced:
        logger.warning("Document ended with %d unclosed elements", context.depth)

    if output is not None:
        console.print(f"[green]✓[/] Wrote {output} ({headings} headings)")
    return 0


def run_init(path: Path, *, force: bool = False, template: str = "example") -> int:
    """Write a starter outline.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if path.exists() and not force:
        console.print(f"[red]Error:[/] {path} already exists (use --force to overwrite)")
        return 1

    try:
        content = get_template(template)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    console.print(f"[green]✓[/] Created {path}")
    console.print(f"[dim]Render it with: bookgen build {path} -o {path.with_suffix('.html')}[/]")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="bookgen",
        description="BookGen - Generate indented, numbered HTML documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  bookgen init                           Write a starter outline to book.yaml
  bookgen build book.yaml                Render to standard output
  bookgen build book.yaml -o book.html   Render to a file
  bookgen build book.yaml --toc-depth 2  List only h1 and h2 in the TOC

Configuration:
  Create .bookgen/config.toml in your repo to change defaults:
    [toc]
    max_entries = 100
    depth = 0

    [headings]
    policy = "relaxed"   # or "strict"

    [style]
    theme = "light"      # or "dark"
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=get_full_version_string(),
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Render a YAML outline to HTML",
    )
    build_parser.add_argument(
        "outline",
        type=Path,
        help="Path to the YAML outline",
    )
    build_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file (defaults to standard output)",
    )
    build_parser.add_argument(
        "--toc-depth",
        type=int,
        default=None,
        help="Deepest heading level listed in the table of contents (0 = all)",
    )
    build_parser.add_argument(
        "--no-toc",
        action="store_true",
        help="Leave out the table of contents",
    )
    build_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject headings that skip a level (e.g. h1 followed by h3)",
    )
    build_parser.add_argument(
        "--theme",
        choices=sorted(THEMES),
        default=None,
        help="Theme of the default stylesheet",
    )
    build_parser.add_argument(
        "--atomic",
        action="store_true",
        help="Only replace the output file once rendering succeeded",
    )
    build_parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Configuration file (defaults to .bookgen/config.toml in the git root)",
    )

    # Init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a starter outline",
    )
    init_parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=DEFAULT_OUTLINE_PATH,
        help=f"Where to write the outline (default: {DEFAULT_OUTLINE_PATH})",
    )
    init_parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Overwrite an existing file",
    )

    args = parser.parse_args(argv)
    configure_logging()

    if args.command == "init":
        return run_init(args.path, force=args.force)

    if args.toc_depth is not None and args.toc_depth < 0:
        console.print("[red]Error:[/] --toc-depth must be 0 or positive")
        return 1

    try:
        config = resolve_config(args.config, find_git_root(Path.cwd()))
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/] Invalid configuration: {e}")
        return 1

    return run_build(
        args.outline,
        args.output,
        config,
        toc_depth=args.toc_depth,
        no_toc=args.no_toc,
        strict=args.strict,
        theme=args.theme,
        atomic=args.atomic,
    )


def find_git_root(start_path: Path) -> Path:
    """Find the git repository root from a starting path.

    Args:
        start_path: Directory to start searching from

    Returns:
        Path to the git root, or start_path if not found
    """
    current = start_path.resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return start_path


if __name__ == "__main__":
    sys.exit(main())
