"""PolygonSink that reports host calls on the console.

Used by the import command when no analysis-side adapter is installed: it
prints each call an adapter would make, in order, so the transfer can be
reviewed before running it against a live model.
"""

from rich.console import Console
from rich.text import Text

from decktransfer.domain import Point2D


class ConsolePolygonSink:
    """Prints PolygonSink calls instead of executing them."""

    def __init__(self, console: Console) -> None:
        self._console = console
        self.calls: list[tuple[str, str]] = []

    def _report(self, operation: str, message: str) -> None:
        self.calls.append((operation, message))
        self._console.print(Text(f"  {message}"))

    def clear_voids(self, section_name: str) -> None:
        self._report("clear_voids", f"Clearing existing voids on '{section_name}'")

    def define_exterior(self, section_name: str, points: list[Point2D]) -> None:
        self._report(
            "define_exterior",
            f"Creating exterior polygon '{section_name}' with {len(points)} vertices",
        )

    def define_void(self, section_name: str, void_name: str, points: list[Point2D]) -> None:
        self._report(
            "define_void",
            f"Creating void '{void_name}' with {len(points)} vertices",
        )

    def set_reference_point(self, section_name: str, x: float, y: float) -> None:
        self._report(
            "set_reference_point",
            f"Setting reference point of '{section_name}' to ({x:.4f}, {y:.4f})",
        )
