"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library
with tables, check results and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from decktransfer.core import SectionGeometryBounds
from decktransfer.domain import Centerline, Cutline, DeckSection, ExportInfo

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

CHECK_STYLES = {
    "PASS": "green",
    "WARN": "yellow",
    "FAIL": "red",
    "INFO": "blue",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]decktransfer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_check(status: str, message: str) -> None:
    """Print one validation check line.

    Args:
        status: PASS, WARN, FAIL or INFO
        message: Check description
    """
    style = CHECK_STYLES.get(status, "white")
    line = Text("  ")
    line.append(f"[{status}]", style=f"bold {style}")
    line.append(f" {message}")
    console.print(line)


def print_document_info(path: str, info: ExportInfo, section_count: int) -> None:
    """Print interchange file header information.

    Args:
        path: Path to the file
        info: Export header
        section_count: Number of sections in the file
    """
    line = Text("  ")
    line.append(path)
    line.append(f" ({info.tool} {info.version})")
    console.print(line)
    console.print(
        f"  {section_count} section(s) {SYM_DOT} {info.units} {SYM_DOT} "
        f"{info.coordinate_system} {SYM_DOT} exported {info.date:%Y-%m-%d %H:%M}"
    )


def print_section_summary(section: DeckSection) -> None:
    """Print the short summary shown before an import."""
    line = Text("  Loaded section: ")
    line.append(section.name, style="bold")
    console.print(line)
    console.print(f"  Exterior vertices: {section.exterior.vertex_count}")
    console.print(f"  Voids: {section.void_count}")
    console.print(f"  Area: {section.area:.4f}")
    ref = section.reference_point
    console.print(f"  Reference: ({ref.x:.4f}, {ref.y:.4f})")


def print_section_info(
    section: DeckSection,
    exterior_area: float,
    exterior_perimeter: float,
    void_areas: list[float],
    section_net_area: float,
) -> None:
    """Print the full section report used by the info command.

    Args:
        section: Section to describe
        exterior_area: Absolute exterior area
        exterior_perimeter: Exterior perimeter
        void_areas: Absolute area of each void, in section order
        section_net_area: Exterior area minus void areas
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="bold")
    table.add_column("Value")

    ref = section.reference_point
    table.add_row("Name", Text(section.name))
    table.add_row("Station", f"{section.station:.4f}")
    table.add_row("Area", f"{section.area:.4f}")
    table.add_row("Centroid", f"({section.centroid.x:.4f}, {section.centroid.y:.4f})")
    table.add_row(
        "Reference Point", Text(f"({ref.x:.4f}, {ref.y:.4f}) - {ref.description}")
    )
    table.add_row("Exterior Vertices", str(section.exterior.vertex_count))
    table.add_row("Exterior Area", f"{exterior_area:.4f}")
    table.add_row("Exterior Perimeter", f"{exterior_perimeter:.4f}")
    table.add_row("Interior Voids", str(section.void_count))
    for void, area in zip(section.voids, void_areas):
        table.add_row("", Text(f"{void.name}: {void.vertex_count} vertices, area {area:.4f}"))
    if void_areas:
        table.add_row("Total Void Area", f"{sum(void_areas):.4f}")
    table.add_row("Net Area", f"{section_net_area:.4f}")
    table.add_row("Concrete Strength", f"{section.material.concrete_strength} MPa")
    table.add_row("Density", f"{section.material.density} kg/m³")
    table.add_row("Elastic Modulus", f"{section.material.elastic_modulus} MPa")
    console.print(table)


def print_derived_lines(
    centerlines: list[Centerline],
    cutlines: list[Cutline],
    bounds: SectionGeometryBounds | None = None,
) -> None:
    """Print derived centerlines and cutlines as a table.

    Args:
        centerlines: Derived centerlines
        cutlines: Derived cutlines
        bounds: Section extrema, printed as a footer when given
    """
    table = Table(show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")

    for line in [*centerlines, *cutlines]:
        table.add_row(
            line.name,
            line.line_type.value,
            f"({line.start.x:.4f}, {line.start.y:.4f})",
            f"({line.end.x:.4f}, {line.end.y:.4f})",
        )
    console.print(table)
    console.print(
        f"  {len(centerlines)} centerlines {SYM_DOT} {len(cutlines)} cutlines"
    )
    if bounds is not None:
        console.print(
            f"  Bounds X [{bounds.min_x:.4f}, {bounds.max_x:.4f}] {SYM_DOT} "
            f"Y [{bounds.bottom_surface_y:.4f}, {bounds.top_surface_y:.4f}]"
        )


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    line = Text("\n")
    line.append(f"{SYM_ERR} Error:", style="bold red")
    line.append(f" {message}")
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
