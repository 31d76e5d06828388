"""Shared fixtures for decktransfer tests."""

from datetime import datetime
from pathlib import Path

import pytest

from decktransfer.domain import (
    DeckSection,
    ExportInfo,
    MaterialProperties,
    Point2D,
    Polygon,
    PolygonType,
    ReferencePoint,
    SectionDocument,
)
from decktransfer.io import render_document


def make_points(*coords: tuple[float, float]) -> list[Point2D]:
    """Build a point list from (x, y) tuples."""
    return [Point2D(x, y) for x, y in coords]


class RecordingSink:
    """PolygonSink that records every call.

    Operations named in fail_on raise RuntimeError, the way a host API
    rejects a call.
    """

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.fail_on = fail_on or set()
        self.calls: list[tuple] = []

    def _record(self, operation: str, *args) -> None:
        if operation in self.fail_on:
            raise RuntimeError(f"host rejected {operation}")
        self.calls.append((operation, *args))

    def clear_voids(self, section_name: str) -> None:
        self._record("clear_voids", section_name)

    def define_exterior(self, section_name: str, points: list[Point2D]) -> None:
        self._record("define_exterior", section_name, len(points))

    def define_void(self, section_name: str, void_name: str, points: list[Point2D]) -> None:
        self._record("define_void", section_name, void_name, len(points))

    def set_reference_point(self, section_name: str, x: float, y: float) -> None:
        self._record("set_reference_point", section_name, x, y)

    @property
    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def solid_section() -> DeckSection:
    """A 10 x 2 solid slab without voids."""
    return DeckSection(
        name="Slab",
        area=20.0,
        centroid=Point2D(5.0, 1.0),
        exterior=Polygon(
            name="Exterior",
            polygon_type=PolygonType.SOLID,
            points=make_points((0, 0), (10, 0), (10, 2), (0, 2)),
        ),
    )


@pytest.fixture
def two_cell_section() -> DeckSection:
    """A 10 x 2 box girder with two 3 x 1.4 cells."""
    return DeckSection(
        name="Box",
        station=125.5,
        area=11.6,
        centroid=Point2D(5.0, 1.0),
        reference_point=ReferencePoint(5.0, 2.0, "Custom point"),
        material=MaterialProperties(40.0, 2500.0, 35000.0),
        exterior=Polygon(
            name="Exterior",
            polygon_type=PolygonType.SOLID,
            points=make_points((0, 0), (10, 0), (10, 2), (0, 2)),
        ),
        voids=[
            Polygon(
                name="Void_1",
                polygon_type=PolygonType.OPENING,
                points=make_points((1, 0.3), (1, 1.7), (4, 1.7), (4, 0.3)),
            ),
            Polygon(
                name="Void_2",
                polygon_type=PolygonType.OPENING,
                points=make_points((6, 0.3), (6, 1.7), (9, 1.7), (9, 0.3)),
            ),
        ],
    )


@pytest.fixture
def export_info() -> ExportInfo:
    """A fixed export header."""
    return ExportInfo(
        date=datetime(2024, 3, 1, 9, 30, 0),
        tool="decktransfer",
        version="0.1.0",
        units="Meters",
        coordinate_system="Local",
    )


@pytest.fixture
def section_file(tmp_path: Path, two_cell_section: DeckSection, export_info: ExportInfo) -> Path:
    """Interchange file holding the two-cell section."""
    path = tmp_path / "Box.json"
    document = SectionDocument(export_info=export_info, sections=[two_cell_section])
    path.write_text(render_document(document), encoding="utf-8")
    return path


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Sink that accepts and records every call."""
    return RecordingSink()


@pytest.fixture
def sink_factory() -> type[RecordingSink]:
    """RecordingSink class, for tests that need rejecting sinks."""
    return RecordingSink
