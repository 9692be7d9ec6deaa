"""Built-in stylesheet for generated documents."""

from dataclasses import dataclass

THEMES: dict[str, dict[str, str]] = {
    "light": {
        "text_primary": "#333333",
        "text_secondary": "#666666",
        "text_muted": "#888888",
        "bg_page": "#ffffff",
        "bg_subtle": "#eeeeee",
        "bg_surface": "#f5f5f5",
        "border_primary": "#cccccc",
        "border_accent": "#bbbbbb",
    },
    "dark": {
        "text_primary": "#e6e6e6",
        "text_secondary": "#b3b3b3",
        "text_muted": "#9a9a9a",
        "bg_page": "#121212",
        "bg_subtle": "#242424",
        "bg_surface": "#1e1e1e",
        "border_primary": "#3a3a3a",
        "border_accent": "#4a4a4a",
    },
}

DEFAULT_THEME = "light"


@dataclass
class StyleRule:
    """A CSS rule.

    Inline rules are written on one line, others as an indented block.
    """

    selector: str
    declarations: list[str]
    inline: bool = False


def get_theme(name: str) -> dict[str, str]:
    """Get theme colors by name.

    Raises:
        ValueError: If the theme doesn't exist
    """
    if name not in THEMES:
        available = ", ".join(THEMES)
        raise ValueError(f"Unknown theme: {name}. Available: {available}")
    return THEMES[name]


def default_rules(theme: str = DEFAULT_THEME) -> list[StyleRule]:
    """Rules of the default stylesheet for a theme."""
    c = get_theme(theme)
    return [
        StyleRule("body", [
            "max-width: 800px;",
            "margin: 40px auto;",
            "padding: 0 20px;",
            f"color: {c['text_primary']};",
            f"background: {c['bg_page']};",
            "font-family: serif;",
        ]),
        StyleRule("h1", [
            f"border-bottom: 2px solid {c['border_primary']};",
            "padding-bottom: 10px;",
        ], inline=True),
        StyleRule("code", [
            f"background: {c['bg_surface']};",
            "padding: 2px;",
            "font-family: monospace;",
        ]),
        StyleRule("pre", [
            f"background: {c['bg_surface']};",
            "padding: 15px;",
            "overflow-x: auto;",
            f"border-left: 4px solid {c['border_accent']};",
        ]),
        StyleRule("a", ["text-decoration: underline;", "color: inherit;"], inline=True),
        StyleRule(".toc ul", ["list-style: none;", "padding-left: 0;"], inline=True),
        StyleRule(".toc a", ["text-decoration: none;"], inline=True),
        StyleRule("li.toc-L1", [
            "font-weight: bold;", "margin-top: 10px;", f"color: {c['text_primary']};",
        ], inline=True),
        StyleRule("li.toc-L2", [
            "padding-left: 20px;", "font-size: 0.95em;", f"color: {c['text_primary']};",
        ], inline=True),
        StyleRule("li.toc-L3", [
            "padding-left: 40px;", "font-size: 0.9em;", f"color: {c['text_secondary']};",
        ], inline=True),
        StyleRule("li.toc-L4", [
            "padding-left: 40px;", "font-size: 0.9em;", f"color: {c['text_secondary']};",
        ], inline=True),
        StyleRule("li.toc-L5", [
            "padding-left: 50px;", "font-size: 0.9em;", f"color: {c['text_muted']};",
        ], inline=True),
        StyleRule("li.toc-L6", [
            "padding-left: 60px;", "font-size: 0.9em;", f"color: {c['text_muted']};",
        ], inline=True),
        StyleRule("table", [
            "border-collapse: collapse;", "width: 100%;", "margin: 20px 0;",
        ], inline=True),
        StyleRule("th, td", [
            f"border: 1px solid {c['border_primary']};", "padding: 8px 10px;",
        ], inline=True),
        StyleRule("th", [
            f"background: {c['bg_subtle']};", "font-weight: bold;", "text-align: left;",
        ], inline=True),
        StyleRule("caption", [
            "caption-side: bottom;",
            "font-size: 0.9em;",
            f"color: {c['text_muted']};",
            "margin-top: 8px;",
        ], inline=True),
        StyleRule("@media print", ["body { max-width: 100%; margin: 0; }"], inline=True),
        StyleRule("blockquote", [
            "margin: 1.5em 0;",
            "padding: 0.75em 1.5em;",
            f"border-left: 4px solid {c['border_accent']};",
            f"background: {c['bg_surface']};",
            f"color: {c['text_secondary']};",
        ]),
        StyleRule("blockquote p", ["margin: 0;", "font-style: italic;"]),
        StyleRule("blockquote footer", [
            "margin-top: 0.5em;", "font-size: 0.9em;", f"color: {c['text_muted']};",
        ]),
        StyleRule("figcaption", [
            "margin-top: 0.5em;",
            "font-size: 0.9em;",
            f"color: {c['text_muted']};",
            "text-align: center;",
        ]),
        StyleRule("figure", [
            "margin: 1.5em auto;", "text-align: center;", "width: fit-content;",
        ]),
        StyleRule("figure img", ["display: block;", "margin: 0 auto;"]),
    ]
