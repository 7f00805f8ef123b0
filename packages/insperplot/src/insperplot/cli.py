"""insperplot CLI -- Typer application with Rich output."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from insperplot.colors import COLOR_FAMILIES, INSPER_COLORS, INSPER_PALETTES, list_palettes
from insperplot.config import InsperSettings
from insperplot.exceptions import InsperPlotError
from insperplot.export import save_insper_plot
from insperplot.fonts import check_insper_fonts, register_insper_fonts, setup_insper_fonts
from insperplot.logging_setup import setup_logging
from insperplot.showcase import show_insper_palette

console = Console()
app = typer.Typer(
    name="insperplot",
    help="Insper visual identity for Plotly charts -- palettes, colors and fonts.",
    no_args_is_help=True,
)


def _load_settings(config: Path | None) -> InsperSettings:
    if config is not None:
        return InsperSettings.from_yaml(config)
    return InsperSettings()


def _display_error(exc: Exception) -> None:
    console.print(Panel(str(exc), title=f"[red]{type(exc).__name__}[/red]", border_style="red"))


def _swatch(hex_color: str) -> Text:
    return Text("      ", style=f"on {hex_color}")


@app.command()
def palettes(
    type: str = typer.Option("all", "--type", "-t", help="all, sequential, diverging or qualitative"),
    names_only: bool = typer.Option(False, "--names-only", help="Print palette names only"),
    save: Path = typer.Option(None, "--save", help="Write a swatch chart (.html/.png) of every palette"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the Insper palettes."""
    setup_logging(verbose)
    try:
        info = list_palettes(type=type, names_only=names_only)
    except InsperPlotError as exc:
        _display_error(exc)
        raise typer.Exit(1)

    if names_only:
        for name in info:
            console.print(name)
        return

    table = Table(title=f"Insper Palettes ({len(info)})", show_lines=False)
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Colors", justify="right")
    table.add_column("Swatch")
    table.add_column("Recommended use")
    for row in info.itertuples(index=False):
        swatch = Text()
        for hex_color in INSPER_PALETTES[row.name]:
            swatch.append("  ", style=f"on {hex_color}")
        table.add_row(row.name, row.type, str(row.n_colors), swatch, row.recommended_use)
    console.print(table)

    if save is not None:
        try:
            path = save_insper_plot(show_insper_palette("all"), save)
        except InsperPlotError as exc:
            _display_error(exc)
            raise typer.Exit(1)
        console.print(f"[green]Saved[/green] {path}")


@app.command()
def colors(
    family: str = typer.Option("all", "--family", "-f", help="all, " + ", ".join(COLOR_FAMILIES)),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the individual brand colors."""
    setup_logging(verbose)
    if family == "all":
        names = list(INSPER_COLORS)
    elif family in COLOR_FAMILIES:
        names = list(COLOR_FAMILIES[family])
    else:
        _display_error(ValueError(f"Invalid color family '{family}'. Choose: all, {', '.join(COLOR_FAMILIES)}"))
        raise typer.Exit(1)

    table = Table(title=f"Insper Colors: {family}", show_lines=False)
    table.add_column("Name", style="cyan")
    table.add_column("Hex")
    table.add_column("Swatch")
    for name in names:
        table.add_row(name, INSPER_COLORS[name], _swatch(INSPER_COLORS[name]))
    console.print(table)


@app.command()
def fonts(
    font_dir: Path = typer.Option(None, "--font-dir", help="Folder with .ttf/.otf files to register"),
    config: Path = typer.Option(None, "--config", "-c", help="Path to insperplot.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show which Insper fonts are available."""
    setup_logging(verbose)
    try:
        settings = _load_settings(config)
    except InsperPlotError as exc:
        _display_error(exc)
        raise typer.Exit(1)
    if font_dir is not None:
        settings = register_insper_fonts(font_dir, settings)
    check_insper_fonts(settings, verbose=True, console=console)


@app.command()
def setup(
    font_dir: Path = typer.Option(None, "--font-dir", help="Folder with downloaded font files"),
    check_only: bool = typer.Option(False, "--check-only", help="Only report font status"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Guided font setup: check status and register local font files."""
    setup_logging(verbose)
    console.print("[bold]Insper font setup[/bold]")
    setup_insper_fonts(font_dir=font_dir, check_only=check_only, console=console)
