"""Conversion between wire DTOs and domain models.

The mapping is lossless for every persisted field. Polygon handles and
derived centerlines/cutlines are not part of the file format.
"""

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
from decktransfer.io.schema import (
    DeckSectionDTO,
    ExportInfoDTO,
    MaterialDTO,
    PointDTO,
    ReferencePointDTO,
    SectionDocumentDTO,
    VoidDTO,
)


def _points_to_dto(points: list[Point2D]) -> list[PointDTO]:
    return [PointDTO(x=p.x, y=p.y) for p in points]


def _points_from_dto(points: list[PointDTO]) -> list[Point2D]:
    return [Point2D(p.x, p.y) for p in points]


def section_to_dto(section: DeckSection) -> DeckSectionDTO:
    """Convert a domain section to its wire form.

    Args:
        section: Domain section

    Returns:
        DeckSectionDTO ready for serialization
    """
    return DeckSectionDTO(
        name=section.name,
        station=section.station,
        area=section.area,
        centroid=PointDTO(x=section.centroid.x, y=section.centroid.y),
        reference_point=ReferencePointDTO(
            x=section.reference_point.x,
            y=section.reference_point.y,
            description=section.reference_point.description,
        ),
        material=MaterialDTO(
            concrete_strength=section.material.concrete_strength,
            density=section.material.density,
            elastic_modulus=section.material.elastic_modulus,
        ),
        exterior_boundary=_points_to_dto(section.exterior.points),
        interior_voids=[
            VoidDTO(name=void.name, points=_points_to_dto(void.points))
            for void in section.voids
        ],
    )


def dto_to_section(dto: DeckSectionDTO) -> DeckSection:
    """Convert a wire section to the domain model.

    The exterior is always named "Exterior" and typed SOLID; voids are
    typed OPENING.

    Args:
        dto: Parsed wire section

    Returns:
        DeckSection without derived lines
    """
    return DeckSection(
        name=dto.name,
        station=dto.station,
        area=dto.area,
        centroid=Point2D(dto.centroid.x, dto.centroid.y),
        reference_point=ReferencePoint(
            x=dto.reference_point.x,
            y=dto.reference_point.y,
            description=dto.reference_point.description,
        ),
        material=MaterialProperties(
            concrete_strength=dto.material.concrete_strength,
            density=dto.material.density,
            elastic_modulus=dto.material.elastic_modulus,
        ),
        exterior=Polygon(
            name="Exterior",
            polygon_type=PolygonType.SOLID,
            points=_points_from_dto(dto.exterior_boundary),
        ),
        voids=[
            Polygon(
                name=void.name,
                polygon_type=PolygonType.OPENING,
                points=_points_from_dto(void.points),
            )
            for void in dto.interior_voids
        ],
    )


def export_info_to_dto(info: ExportInfo) -> ExportInfoDTO:
    """Convert export metadata to its wire form."""
    return ExportInfoDTO(
        date=info.date,
        tool=info.tool,
        version=info.version,
        units=info.units,
        coordinate_system=info.coordinate_system,
    )


def dto_to_export_info(dto: ExportInfoDTO) -> ExportInfo:
    """Convert wire export metadata to the domain model."""
    return ExportInfo(
        date=dto.date,
        tool=dto.tool,
        version=dto.version,
        units=dto.units,
        coordinate_system=dto.coordinate_system,
    )


def document_to_dto(document: SectionDocument) -> SectionDocumentDTO:
    """Convert a whole document to its wire form."""
    return SectionDocumentDTO(
        export_info=export_info_to_dto(document.export_info),
        sections=[section_to_dto(s) for s in document.sections],
    )


def dto_to_document(dto: SectionDocumentDTO) -> SectionDocument:
    """Convert a parsed wire document to the domain model."""
    return SectionDocument(
        export_info=dto_to_export_info(dto.export_info),
        sections=[dto_to_section(s) for s in dto.sections],
    )
