"""Font discovery and registration for the Insper typography.

Font availability comes from matplotlib's font manager. Registering local
font files never mutates package state: ``register_insper_fonts`` returns
settings with ``fonts_loaded=True`` that the caller passes on to
``theme_insper`` and the chart constructors.
"""

from __future__ import annotations

import functools
from pathlib import Path

from loguru import logger
from matplotlib import font_manager
from rich.console import Console

from insperplot.config import InsperSettings, resolve_settings

FONT_SUFFIXES = (".ttf", ".otf")

# family -> (search pattern, role); Georgia is a system font and cannot be "loaded"
RECOMMENDED_FONTS: dict[str, tuple[str, str]] = {
    "Georgia": ("georgia", "serif, primary for titles"),
    "Inter": ("inter", "sans-serif, body text"),
    "EB Garamond": ("garamond", "serif, title fallback"),
    "Barlow": ("barlow", "sans-serif, body text alternative"),
    "Playfair Display": ("playfair", "serif, title alternative"),
}
SYSTEM_FONTS = frozenset({"Georgia"})

GOOGLE_FONTS_URL = "https://fonts.google.com"


@functools.lru_cache(maxsize=1)
def installed_font_families() -> tuple[str, ...]:
    """Sorted family names known to matplotlib's font manager (cached)."""
    return tuple(sorted({f.name for f in font_manager.fontManager.ttflist}))


def font_is_installed(font_name: str) -> bool:
    """Case-insensitive substring search over installed families."""
    needle = font_name.lower()
    return any(needle in family.lower() for family in installed_font_families())


def detect_font(
    font_name: str,
    fallback: str = "sans-serif",
    settings: InsperSettings | None = None,
) -> str:
    """Return ``font_name`` if usable in this session, else ``fallback``.

    Never raises: any failure while probing fonts yields the fallback.
    """
    settings = resolve_settings(settings)
    if settings.fonts_loaded:
        return font_name
    try:
        if font_is_installed(font_name):
            return font_name
    except Exception as e:  # font cache can be unreadable on locked-down hosts
        logger.debug("Font probe failed for {}: {}", font_name, e)
        return fallback
    logger.debug("Font '{}' not available, using '{}'", font_name, fallback)
    return fallback


def register_insper_fonts(
    font_dir: str | Path,
    settings: InsperSettings | None = None,
) -> InsperSettings:
    """Register every .ttf/.otf file under ``font_dir`` with matplotlib.

    Returns:
        Settings with ``fonts_loaded=True`` when at least one file was
        registered; the input settings unchanged otherwise.
    """
    settings = resolve_settings(settings)
    font_dir = Path(font_dir).expanduser()
    if not font_dir.is_dir():
        logger.warning("Font directory not found: {}", font_dir)
        return settings

    registered = 0
    for path in sorted(font_dir.rglob("*")):
        if path.suffix.lower() not in FONT_SUFFIXES:
            continue
        try:
            font_manager.fontManager.addfont(str(path))
        except (OSError, RuntimeError, ValueError) as e:
            logger.warning("Could not register font {}: {}", path.name, e)
            continue
        registered += 1
        logger.debug("Registered font {}", path.name)

    if not registered:
        logger.warning("No font files found in {}", font_dir)
        return settings

    installed_font_families.cache_clear()
    logger.info("Registered {} font file(s) from {}", registered, font_dir)
    return settings.model_copy(update={"fonts_loaded": True})


def check_insper_fonts(
    settings: InsperSettings | None = None,
    verbose: bool = False,
    console: Console | None = None,
) -> dict[str, bool]:
    """Availability of each recommended font family."""
    settings = resolve_settings(settings)
    status: dict[str, bool] = {}
    for family, (pattern, _) in RECOMMENDED_FONTS.items():
        installed = font_is_installed(pattern)
        status[family] = installed or (settings.fonts_loaded and family not in SYSTEM_FONTS)

    if verbose:
        _print_font_status(status, settings, console or Console())
    return status


def has_insper_fonts(settings: InsperSettings | None = None) -> bool:
    """True when the configured title and body fonts both resolve."""
    settings = resolve_settings(settings)
    theme = settings.theme
    return (
        detect_font(theme.font_title, "serif", settings) == theme.font_title
        and detect_font(theme.font_text, "sans-serif", settings) == theme.font_text
    )


def setup_insper_fonts(
    font_dir: str | Path | None = None,
    check_only: bool = False,
    settings: InsperSettings | None = None,
    console: Console | None = None,
) -> InsperSettings:
    """Check font status and register local fonts when a directory is given."""
    console = console or Console()
    settings = resolve_settings(settings)
    status = check_insper_fonts(settings, verbose=True, console=console)

    if check_only or all(status.values()):
        return settings
    if font_dir is None:
        console.print(
            f"[yellow]Download the missing families from {GOOGLE_FONTS_URL} and "
            "pass their folder with --font-dir (or install them system-wide).[/yellow]"
        )
        return settings

    updated = register_insper_fonts(font_dir, settings)
    if updated.fonts_loaded:
        console.print(f"[green]Fonts registered from {font_dir}[/green]")
    else:
        console.print(f"[red]No usable font files in {font_dir}[/red]")
    return updated


def _print_font_status(status: dict[str, bool], settings: InsperSettings, console: Console) -> None:
    from rich.table import Table

    table = Table(title="Insper Font Status", show_lines=False)
    table.add_column("Font", style="cyan")
    table.add_column("Role")
    table.add_column("Status", justify="center")
    for family, available in status.items():
        role = RECOMMENDED_FONTS[family][1]
        if available and font_is_installed(RECOMMENDED_FONTS[family][0]):
            mark = "[green]INSTALLED[/green]"
        elif available:
            mark = "[green]LOADED[/green]"
        else:
            mark = "[red]NOT FOUND[/red]"
        table.add_row(family, role, mark)
    console.print(table)

    if settings.fonts_loaded:
        console.print("[green]Fonts registered for this session[/green]")
    if not all(status.values()):
        console.print("Plots will use system fallback fonts (serif / sans-serif) until fonts are available.")
