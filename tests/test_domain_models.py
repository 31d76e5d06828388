"""Tests for domain models to verify they work correctly."""

from datetime import datetime

import pytest

from decktransfer.domain import (
    Centerline,
    CenterlineType,
    Cutline,
    CutlineType,
    DeckSection,
    ExportInfo,
    MaterialProperties,
    Point2D,
    Polygon,
    PolygonType,
    SectionDocument,
)


class TestPoint2D:
    """Tests for Point2D class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point2D(1.5, -2.0)
        assert p.x == 1.5
        assert p.y == -2.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point2D(1.0, 2.0).to_tuple() == (1.0, 2.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point2D(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test points can be used in sets."""
        assert len({Point2D(1.0, 2.0), Point2D(1.0, 2.0), Point2D(2.0, 1.0)}) == 2


class TestPolygon:
    """Tests for Polygon class."""

    def test_valid_polygon(self) -> None:
        """Test a triangle is a valid polygon."""
        polygon = Polygon(
            name="Exterior",
            polygon_type=PolygonType.SOLID,
            points=[Point2D(0, 0), Point2D(1, 0), Point2D(0, 1)],
        )
        assert polygon.is_valid()
        assert polygon.vertex_count == 3
        assert not polygon.is_opening()

    def test_too_few_points(self) -> None:
        """Test two points do not enclose an area."""
        polygon = Polygon(
            name="Void_1",
            polygon_type=PolygonType.OPENING,
            points=[Point2D(0, 0), Point2D(1, 0)],
        )
        assert not polygon.is_valid()
        assert polygon.is_opening()

    def test_polygon_type_codes(self) -> None:
        """Test type codes match the analysis tool."""
        assert PolygonType.SOLID.value == 1
        assert PolygonType.OPENING.value == 2

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        polygon = Polygon(
            name="Exterior",
            polygon_type=PolygonType.SOLID,
            points=[Point2D(1, 2), Point2D(10, 3), Point2D(5, 15)],
        )
        assert polygon.bounding_box() == (1.0, 2.0, 10.0, 15.0)

    def test_bounding_box_empty(self) -> None:
        """Test bounding box of an empty polygon is all zero."""
        polygon = Polygon(name="Exterior", polygon_type=PolygonType.SOLID)
        assert polygon.bounding_box() == (0.0, 0.0, 0.0, 0.0)

    def test_handle_not_compared(self) -> None:
        """Test the source handle does not affect equality."""
        points = [Point2D(0, 0), Point2D(1, 0), Point2D(0, 1)]
        picked = Polygon("Void_1", PolygonType.OPENING, list(points), handle="2A1")
        loaded = Polygon("Void_1", PolygonType.OPENING, list(points))
        assert picked == loaded


class TestLines:
    """Tests for Centerline and Cutline classes."""

    def test_centerline_geometry(self) -> None:
        """Test start, end and length of a centerline."""
        cl = Centerline(
            points=[Point2D(0, 1), Point2D(3, 1), Point2D(3, 5)],
            line_type=CenterlineType.TOP_SLAB,
            name="TopSlabCL",
        )
        assert cl.start == Point2D(0, 1)
        assert cl.end == Point2D(3, 5)
        assert cl.length() == pytest.approx(7.0)

    def test_horizontal_and_vertical(self) -> None:
        """Test orientation checks."""
        horizontal = Cutline(
            points=[Point2D(0, 1), Point2D(10, 1)],
            line_type=CutlineType.HORIZONTAL_TOP,
        )
        vertical = Cutline(points=[Point2D(2, 0), Point2D(2, 2)])
        assert horizontal.is_horizontal()
        assert not horizontal.is_vertical()
        assert vertical.is_vertical()
        assert vertical.line_type == CutlineType.VERTICAL_WEB

    def test_line_type_values(self) -> None:
        """Test enum values used in reports."""
        assert CenterlineType.WEB_INTERIOR.value == "WebInterior"
        assert CutlineType.HORIZONTAL_BOTTOM.value == "HorizontalBottom"


class TestMaterialProperties:
    """Tests for MaterialProperties class."""

    def test_defaults(self) -> None:
        """Test default concrete values."""
        material = MaterialProperties()
        assert material.concrete_strength == 30.0
        assert material.density == 2400.0
        assert material.elastic_modulus == 30000.0

    @pytest.mark.parametrize("field_name", ["concrete_strength", "density", "elastic_modulus"])
    def test_non_positive_rejected(self, field_name: str) -> None:
        """Test every material value must be positive."""
        with pytest.raises(ValueError, match=field_name):
            MaterialProperties(**{field_name: 0.0})


class TestDeckSection:
    """Tests for DeckSection class."""

    def test_defaults(self) -> None:
        """Test an empty section."""
        section = DeckSection(name="Empty")
        assert section.exterior.name == "Exterior"
        assert section.exterior.polygon_type == PolygonType.SOLID
        assert section.void_count == 0
        assert not section.has_voids()
        assert not section.has_derived_lines()

    def test_get_void(self, two_cell_section: DeckSection) -> None:
        """Test void lookup by name."""
        assert two_cell_section.get_void("Void_2") is two_cell_section.voids[1]
        assert two_cell_section.get_void("Void_9") is None

    def test_equality_ignores_derived_lines(self, solid_section: DeckSection) -> None:
        """Test derived lines do not affect equality."""
        other = DeckSection(
            name=solid_section.name,
            area=solid_section.area,
            centroid=solid_section.centroid,
            exterior=Polygon(
                name="Exterior",
                polygon_type=PolygonType.SOLID,
                points=list(solid_section.exterior.points),
            ),
        )
        other.centerlines = [Centerline(points=[Point2D(0, 1), Point2D(10, 1)])]
        assert other == solid_section

    def test_web_centerlines_sorted(self) -> None:
        """Test web centerlines are returned left to right, slabs excluded."""
        section = DeckSection(name="Webs")
        section.centerlines = [
            Centerline(
                points=[Point2D(0, 1), Point2D(10, 1)],
                line_type=CenterlineType.TOP_SLAB,
                name="TopSlabCL",
            ),
            Centerline(
                points=[Point2D(9, 0), Point2D(9, 2)],
                line_type=CenterlineType.WEB_EXTERIOR,
                name="RightWebCL",
            ),
            Centerline(
                points=[Point2D(5, 0), Point2D(5, 2)],
                line_type=CenterlineType.WEB_INTERIOR,
                name="Web1CL",
            ),
            Centerline(
                points=[Point2D(1, 0), Point2D(1, 2)],
                line_type=CenterlineType.WEB_EXTERIOR,
                name="LeftWebCL",
            ),
        ]
        assert [cl.name for cl in section.web_centerlines()] == [
            "LeftWebCL",
            "Web1CL",
            "RightWebCL",
        ]

    def test_clear_derived(self) -> None:
        """Test dropping derived lines."""
        section = DeckSection(name="S")
        section.cutlines = [Cutline(points=[Point2D(0, 0), Point2D(0, 1)])]
        assert section.has_derived_lines()
        section.clear_derived()
        assert not section.has_derived_lines()


class TestSectionDocument:
    """Tests for SectionDocument class."""

    def test_first(self, solid_section: DeckSection) -> None:
        """Test first section access."""
        info = ExportInfo(datetime(2024, 1, 1), "decktransfer", "0.1.0", "Meters", "Local")
        document = SectionDocument(export_info=info, sections=[solid_section])
        assert document.first() is solid_section

    def test_first_empty(self) -> None:
        """Test first section of an empty document."""
        info = ExportInfo(datetime(2024, 1, 1), "decktransfer", "0.1.0", "Meters", "Local")
        with pytest.raises(IndexError):
            SectionDocument(export_info=info).first()
