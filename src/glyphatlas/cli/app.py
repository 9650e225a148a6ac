"""CLI application entry point for glyphatlas.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphatlas import __version__
from glyphatlas.cli.output import (
    console,
    print_atlas_info,
    print_error,
    print_glyph_table,
    print_header,
    print_layout,
    print_step,
    print_success,
    print_warning,
)
from glyphatlas.config import GlyphAtlasSettings, ImageFormat, LoggingConfig
from glyphatlas.core import LayoutEngine
from glyphatlas.exceptions import (
    AtlasDecodeError,
    AtlasEncodeError,
    AtlasIOError,
    GlyphAtlasError,
)
from glyphatlas.io import open_atlas, save_atlas
from glyphatlas.io.atlas import AtlasFont
from glyphatlas.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphatlas",
    help="Inspect, lay out text with, and convert pre-rendered bitmap font atlases.",
    add_completion=False,
    no_args_is_help=True,
)

MetadataOption = Annotated[
    Path | None,
    typer.Option(
        "--metadata",
        "-m",
        help="Metadata JSON path (default: image path with .json suffix)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]glyphatlas[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect, lay out text with, and convert pre-rendered bitmap font atlases."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = GlyphAtlasSettings(logging=LoggingConfig(log_file=log_file, log_level=log_level))
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )


def _load(image: Path, metadata: Path | None) -> AtlasFont:
    """Load an atlas, turning library errors into CLI exits."""
    if not image.is_file():
        print_error(
            f"Input file not found: {image}",
            details=f"The file '{image}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    try:
        return open_atlas(image, metadata)
    except AtlasIOError as e:
        print_error(f"Could not read {e.path}", details=e.reason)
        raise typer.Exit(code=1)
    except AtlasDecodeError as e:
        print_error("Could not load atlas", details=str(e))
        raise typer.Exit(code=1)


@app.command()
def info(
    image: Annotated[
        Path,
        typer.Argument(help="Path to the atlas image", show_default=False),
    ],
    metadata: MetadataOption = None,
    glyphs: Annotated[
        bool,
        typer.Option("--glyphs", "-g", help="List per-character metrics"),
    ] = False,
) -> None:
    """Show an atlas's name, metrics, image and table sizes."""
    font = _load(image, metadata)
    print_atlas_info(str(image), font)
    if glyphs:
        print_glyph_table(font)


@app.command()
def layout(
    image: Annotated[
        Path,
        typer.Argument(help="Path to the atlas image", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Text to lay out (use \\n for line breaks)", show_default=False),
    ],
    metadata: MetadataOption = None,
) -> None:
    """Print the draw position of every character of TEXT."""
    font = _load(image, metadata)
    text = text.replace("\\n", "\n")

    engine = LayoutEngine()
    positions = engine.positions_for(font, text)
    skipped = sum(1 for c in text if c != "\n" and c not in font)
    print_layout(positions, skipped, engine.bounds(font, text))


@app.command()
def convert(
    image: Annotated[
        Path,
        typer.Argument(help="Path to the atlas image", show_default=False),
    ],
    output: Annotated[
        Path,
        typer.Argument(help="Path of the converted atlas image", show_default=False),
    ],
    metadata: MetadataOption = None,
    output_metadata: Annotated[
        Path | None,
        typer.Option(
            "--output-metadata",
            help="Metadata path for the converted atlas (default: output with .json suffix)",
        ),
    ] = None,
    image_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Image format (default: from output extension)",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Re-save an atlas in another image format with a fresh metadata file."""
    settings = GlyphAtlasSettings()

    fmt: ImageFormat | None = None
    if image_format is not None:
        try:
            fmt = ImageFormat.parse(image_format)
        except ValueError:
            print_error(
                f"Invalid format: {image_format}",
                details="Valid values: " + ", ".join(f.value.lower() for f in ImageFormat),
            )
            raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading atlas")

    font = _load(image, metadata)

    if not quiet:
        print_atlas_info(str(image), font)
        print_step("Writing atlas")

    if output_metadata is None:
        output_metadata = settings.atlas.metadata_path_for(output)

    if fmt is None:
        try:
            fmt = ImageFormat.from_path(output)
        except ValueError:
            fmt = settings.atlas.image_format
    if fmt.is_lossy and not quiet:
        print_warning(f"{fmt.value} is lossy, atlas pixels may change")

    try:
        save_atlas(
            font,
            output,
            output_metadata,
            format=fmt,
            indent=settings.atlas.metadata_indent,
        )
    except AtlasIOError as e:
        print_error(f"Could not write {e.path}", details=e.reason)
        raise typer.Exit(code=1)
    except AtlasEncodeError as e:
        print_error("Could not encode atlas", details=str(e))
        raise typer.Exit(code=1)
    except GlyphAtlasError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_success("Converted", [str(output), str(output_metadata)])


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
