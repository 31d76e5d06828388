"""Domain models for decktransfer.

This module contains the core domain models representing deck sections,
their boundary polygons and the reference lines derived from them. All
models are:

- Plain dataclasses (Point2D is frozen)
- Independent of any CAD host object model
- Independent of the interchange file schema

Key classes:
- Point2D: A 2D coordinate
- Polygon: An exterior boundary or void
- DeckSection: A cross-section with properties and derived lines
- Centerline / Cutline: Derived reference polylines
- SectionDocument: Export header plus sections
"""

from decktransfer.domain.document import ExportInfo, SectionDocument
from decktransfer.domain.lines import Centerline, CenterlineType, Cutline, CutlineType
from decktransfer.domain.polygon import Point2D, Polygon, PolygonType, WindingDirection
from decktransfer.domain.section import DeckSection, MaterialProperties, ReferencePoint

__all__: list[str] = [
    # Enums
    "WindingDirection",
    "PolygonType",
    "CenterlineType",
    "CutlineType",
    # Core types
    "Point2D",
    "Polygon",
    "Centerline",
    "Cutline",
    "ReferencePoint",
    "MaterialProperties",
    "DeckSection",
    "ExportInfo",
    "SectionDocument",
]
