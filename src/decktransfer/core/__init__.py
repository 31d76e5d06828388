"""Core algorithms for decktransfer.

This module contains the core algorithms for:

- Geometry operations (signed area, centroid, winding, perimeter)
- Section extrema analysis (surfaces, void edges)
- Centerline and cutline derivation
- Section assembly from raw polygons
- Section transfer to the analysis-side tool

All algorithms are pure; only SectionProcessor logs.

Key functions:
- signed_area: Calculate polygon area using shoelace formula
- polygon_centroid: Area-weighted polygon centroid
- ensure_clockwise / ensure_counter_clockwise: Winding normalization
- net_area: Exterior area minus void areas
- perimeter: Closed polygon perimeter

Key classes:
- BoundsAnalyzer: Computes section extrema
- CenterlineDeriver: Derives centerlines and cutlines
- SectionBuilder: Assembles sections from selected polygons
- SectionTransfer: Replays sections against a PolygonSink
- SectionProcessor: Orchestrates the workflow with logging
"""

from decktransfer.core.bounds import BoundsAnalyzer, SectionGeometryBounds, VoidBounds
from decktransfer.core.builder import (
    ReferencePointMode,
    SectionBuilder,
    polygons_from_coordinates,
)
from decktransfer.core.derivation import (
    CenterlineDeriver,
    DerivedLines,
    select_second_level,
    validate_lines,
)
from decktransfer.core.geometry import (
    bounding_box,
    ensure_clockwise,
    ensure_counter_clockwise,
    net_area,
    perimeter,
    polygon_centroid,
    signed_area,
    winding_direction,
)
from decktransfer.core.processor import SectionProcessor
from decktransfer.core.transfer import PolygonSink, SectionTransfer, TransferReport

__all__ = [
    # Bounds
    "BoundsAnalyzer",
    "SectionGeometryBounds",
    "VoidBounds",
    # Derivation
    "CenterlineDeriver",
    "DerivedLines",
    "select_second_level",
    "validate_lines",
    # Builder
    "ReferencePointMode",
    "SectionBuilder",
    "polygons_from_coordinates",
    # Transfer
    "PolygonSink",
    "SectionTransfer",
    "TransferReport",
    # Processor
    "SectionProcessor",
    # Geometry functions
    "bounding_box",
    "ensure_clockwise",
    "ensure_counter_clockwise",
    "net_area",
    "perimeter",
    "polygon_centroid",
    "signed_area",
    "winding_direction",
]
