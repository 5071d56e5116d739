"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the listing, chrome, and modal overlays.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    reset: str
    title: str
    header: str
    marker: str
    entry_dir: str
    entry_file: str
    entry_size: str
    status_error: str
    status_hint: str
    modal_title: str
    modal_border: str
    modal_button: str
    modal_button_focused: str
    modal_danger: str
    backdrop: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    title="\033[1;38;5;81m",
    header="\033[1;38;5;250m",
    marker="\033[38;5;44m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    entry_size="\033[38;5;109m",
    status_error="\033[1;38;5;203m",
    status_hint="\033[2;38;5;250m",
    modal_title="\033[1;38;5;45m",
    modal_border="\033[38;5;45m",
    modal_button="\033[38;5;250m",
    modal_button_focused="\033[1;7;38;5;229m",
    modal_danger="\033[1;38;5;203m",
    backdrop="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    header="\033[1;38;5;110m",
    marker="\033[38;5;39m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_size="\033[38;5;73m",
    status_error="\033[1;38;5;209m",
    status_hint="\033[2;38;5;110m",
    modal_title="\033[1;38;5;39m",
    modal_border="\033[38;5;39m",
    modal_button="\033[38;5;153m",
    modal_button_focused="\033[1;7;38;5;153m",
    modal_danger="\033[1;38;5;209m",
    backdrop="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    title="",
    header="",
    marker="",
    entry_dir="",
    entry_file="",
    entry_size="",
    status_error="",
    status_hint="",
    modal_title="",
    modal_border="",
    modal_button="",
    modal_button_focused="",
    modal_danger="",
    backdrop="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
