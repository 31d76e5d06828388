"""CLI application entry point for decktransfer.

This module provides the batch CLI using Typer.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

import typer

from decktransfer import __version__
from decktransfer.cli.output import (
    console,
    print_check,
    print_derived_lines,
    print_document_info,
    print_error,
    print_header,
    print_section_info,
    print_section_summary,
    print_step,
    print_success,
)
from decktransfer.cli.sink import ConsolePolygonSink
from decktransfer.config import DeckTransferSettings, ImportConfig, LoggingConfig
from decktransfer.core import (
    CenterlineDeriver,
    SectionProcessor,
    net_area,
    perimeter,
    signed_area,
)
from decktransfer.domain import DeckSection, SectionDocument
from decktransfer.exceptions import DeckTransferError, InvalidGeometryError

# Create the Typer app
app = typer.Typer(
    name="decktransfer",
    help="Transfer bridge-deck cross-sections between CAD tools via JSON interchange files.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    """Options shared by all commands."""

    settings: DeckTransferSettings = field(default_factory=DeckTransferSettings)
    quiet: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]decktransfer[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Transfer bridge-deck cross-sections between CAD tools."""
    console.quiet = quiet
    ctx.obj = CliState(
        settings=DeckTransferSettings(
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        ),
        quiet=quiet,
    )


def _state(ctx: typer.Context) -> CliState:
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    return CliState()


def _check_input(input_file: Path) -> None:
    """Exit with code 1 unless input_file is an existing file."""
    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input path is not a file: {input_file}",
            details="Please provide a path to a section JSON file.",
        )
        raise typer.Exit(code=1)


def _load(processor: SectionProcessor, input_file: Path, derive: bool) -> SectionDocument:
    try:
        return processor.load(input_file, derive=derive)
    except DeckTransferError as e:
        print_error(f"Could not load {input_file}", details=str(e))
        raise typer.Exit(code=1) from None


InputFile = Annotated[
    Path,
    typer.Argument(
        help="Path to section JSON file",
        show_default=False,
    ),
]


@app.command("import")
def import_section(
    ctx: typer.Context,
    input_file: InputFile,
    target: Annotated[
        str,
        typer.Option(
            "--target",
            "-t",
            help="Target section name in the analysis model (default: section name)",
        ),
    ] = "",
    no_ref_point: Annotated[
        bool,
        typer.Option(
            "--no-ref-point",
            help="Don't set the reference point",
        ),
    ] = False,
    keep_voids: Annotated[
        bool,
        typer.Option(
            "--keep-voids",
            help="Don't clear existing voids",
        ),
    ] = False,
) -> None:
    """Load a section file and hand its first section to the analysis tool.

    Example:
        decktransfer import BoxGirder.json --target Deck1
    """
    state = _state(ctx)
    _check_input(input_file)
    print_header(__version__)

    processor = SectionProcessor(state.settings)

    print_step(f"Loading {input_file}")
    document = _load(processor, input_file, derive=True)
    section = document.first()
    print_section_summary(section)

    options = ImportConfig(
        target_section_name=target,
        set_reference_point=not no_ref_point,
        clear_existing_voids=not keep_voids,
    )

    print_step("Transferring")
    try:
        report = processor.transfer(section, ConsolePolygonSink(console), options)
    except DeckTransferError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    for warning in report.warnings:
        print_check("WARN", warning)

    print_success("Import completed")
    console.print(f"  Section: {report.section_name}")
    console.print(f"  Exterior vertices: {report.exterior_vertices}")
    console.print(f"  Voids: {len(report.voids_created)}")
    console.print(
        f"  Centerlines: {len(section.centerlines)} · Cutlines: {len(section.cutlines)}"
    )


def _validate_section(section: DeckSection, deriver: CenterlineDeriver) -> bool:
    """Print checks for one section and return whether it passed."""
    if not section.exterior.is_valid():
        print_check(
            "FAIL", "Exterior boundary: missing or invalid (need at least 3 points)"
        )
        return False
    print_check("PASS", f"Exterior boundary: {section.exterior.vertex_count} vertices")

    exterior_area = abs(signed_area(section.exterior.points))
    if exterior_area <= 0:
        print_check("FAIL", "Area: zero")
        return False
    print_check("PASS", f"Calculated exterior area: {exterior_area:.4f}")

    for void in section.voids:
        if not void.is_valid():
            print_check("WARN", f"Void '{void.name}': less than 3 vertices")
        else:
            void_area = abs(signed_area(void.points))
            print_check(
                "PASS", f"Void '{void.name}': {void.vertex_count} vertices, area {void_area:.4f}"
            )

    section_net_area = net_area(section)
    print_check("INFO", f"Net area (exterior - voids): {section_net_area:.4f}")
    if section_net_area <= 0:
        print_check("WARN", "Net area is zero or negative - voids may be larger than exterior")

    try:
        lines = deriver.derive(section)
    except InvalidGeometryError as e:
        print_check("FAIL", f"Derivation: {e}")
        return False
    print_check(
        "PASS",
        f"Derivation: {len(lines.centerlines)} centerlines, {len(lines.cutlines)} cutlines",
    )
    return True


@app.command()
def validate(ctx: typer.Context, input_file: InputFile) -> None:
    """Check a section file's geometry and derivation.

    Exits with code 1 if any section fails.
    """
    state = _state(ctx)
    _check_input(input_file)

    processor = SectionProcessor(state.settings)
    print_step(f"Validating {input_file}")
    document = _load(processor, input_file, derive=False)

    passed = True
    for section in document.sections:
        print_step(f"Section {section.name}")
        if not _validate_section(section, processor.deriver):
            passed = False

    if not passed:
        print_error("Validation failed")
        raise typer.Exit(code=1)

    print_success("Validation passed")


@app.command()
def info(ctx: typer.Context, input_file: InputFile) -> None:
    """Print section properties stored in a section file."""
    state = _state(ctx)
    _check_input(input_file)

    processor = SectionProcessor(state.settings)
    document = _load(processor, input_file, derive=False)

    print_step("File")
    print_document_info(str(input_file), document.export_info, len(document.sections))

    for section in document.sections:
        print_step(f"Section {section.name}")
        void_areas = [abs(signed_area(void.points)) for void in section.voids]
        print_section_info(
            section,
            exterior_area=abs(signed_area(section.exterior.points)),
            exterior_perimeter=perimeter(section.exterior.points),
            void_areas=void_areas,
            section_net_area=net_area(section),
        )


@app.command()
def derive(
    ctx: typer.Context,
    input_file: InputFile,
    section_name: Annotated[
        str | None,
        typer.Option(
            "--section",
            "-s",
            help="Section to derive (default: every section)",
        ),
    ] = None,
) -> None:
    """Derive and list centerlines and cutlines for a section file."""
    state = _state(ctx)
    _check_input(input_file)

    processor = SectionProcessor(state.settings)
    document = _load(processor, input_file, derive=False)

    sections = document.sections
    if section_name is not None:
        sections = [s for s in sections if s.name == section_name]
        if not sections:
            print_error(f"Section not found: {section_name}")
            raise typer.Exit(code=1)

    for section in sections:
        print_step(f"Section {section.name}")
        try:
            lines = processor.derive(section)
        except DeckTransferError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from None
        print_derived_lines(lines.centerlines, lines.cutlines, lines.bounds)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
