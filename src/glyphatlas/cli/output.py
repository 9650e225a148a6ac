"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphatlas.domain import FontModel, OutputPosition

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _char_label(c: str) -> str:
    """Printable label for a character, escaping whitespace and controls."""
    if c.isprintable() and not c.isspace():
        return c
    return f"U+{ord(c):04X}"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]glyphatlas[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_atlas_info(image_path: str, font: FontModel) -> None:
    """Print atlas summary.

    Args:
        image_path: Path the atlas image was loaded from
        font: Loaded font (image must be a Pillow image)
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font.name, style="bold")
    line1.append(f" {font.font_size}px {SYM_DOT} ")
    line1.append(image_path)
    console.print(line1)

    width, height = font.image.size
    console.print(f"  {width}×{height} {font.image.mode} {SYM_DOT} line height {font.line_height}")
    console.print(
        f"  {len(font.glyphs):,} glyphs {SYM_DOT} {len(font.kerning_pairs):,} kerning pairs "
        f"{SYM_DOT} max width {font.max_width}"
    )


def print_glyph_table(font: FontModel) -> None:
    """Print per-character metrics.

    Args:
        font: Font whose glyph table to print
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Char")
    table.add_column("Code", style="dim")
    table.add_column("Advance", justify="right")
    table.add_column("Offset", justify="right")

    for c in font.characters:
        info = font.glyphs[c]
        table.add_row(
            Text(_char_label(c)),
            f"U+{ord(c):04X}",
            f"{info.advance[0]}, {info.advance[1]}",
            f"{info.pixel_offset[0]}, {info.pixel_offset[1]}",
        )

    console.print(table)


def print_layout(positions: list[OutputPosition], skipped: int, bounds: tuple[int, int]) -> None:
    """Print laid-out glyph positions.

    Args:
        positions: Positioned glyphs from the layout engine
        skipped: Number of characters without a glyph in the atlas
        bounds: (width, height) of the laid-out text
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Char")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("Size", justify="right")

    for i, glyph in enumerate(positions):
        table.add_row(
            str(i),
            Text(_char_label(glyph.c)),
            str(glyph.pos[0]),
            str(glyph.pos[1]),
            f"{glyph.size[0]}×{glyph.size[1]}",
        )

    console.print(table)

    summary = f"  {len(positions)} glyphs {SYM_DOT} {bounds[0]}×{bounds[1]} px"
    if skipped:
        summary += f" {SYM_DOT} [yellow]{skipped} not in atlas[/yellow]"
    console.print(summary)


def print_success(message: str, output_paths: list[str]) -> None:
    """Print success message with written files.

    Args:
        message: Completion message
        output_paths: Files written
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    for path in output_paths:
        line = Text("  ")
        line.append(path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_warning(message: str) -> None:
    """Print warning message.

    Args:
        message: Warning text
    """
    console.print(f"\n[bold yellow]![/bold yellow] {message}")
