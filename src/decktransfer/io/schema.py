"""Wire schema of the section interchange file.

Field names are camelCase on the wire and snake_case in Python. Fields
that are None are omitted when writing.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PointDTO(WireModel):
    x: float
    y: float


class ReferencePointDTO(WireModel):
    x: float = 0.0
    y: float = 0.0
    description: str = ""


class MaterialDTO(WireModel):
    concrete_strength: float = Field(default=30.0, gt=0.0)
    density: float = Field(default=2400.0, gt=0.0)
    elastic_modulus: float = Field(default=30000.0, gt=0.0)


class VoidDTO(WireModel):
    name: str = ""
    points: list[PointDTO] = Field(default_factory=list)


class DeckSectionDTO(WireModel):
    name: str
    station: float = 0.0
    area: float = 0.0
    centroid: PointDTO = Field(default_factory=lambda: PointDTO(x=0.0, y=0.0))
    reference_point: ReferencePointDTO = Field(default_factory=ReferencePointDTO)
    material: MaterialDTO = Field(default_factory=MaterialDTO)
    exterior_boundary: list[PointDTO]
    interior_voids: list[VoidDTO] = Field(default_factory=list)


class ExportInfoDTO(WireModel):
    date: datetime
    tool: str
    version: str
    units: str
    coordinate_system: str


class SectionDocumentDTO(WireModel):
    """Root object of an interchange file."""

    export_info: ExportInfoDTO
    sections: list[DeckSectionDTO] = Field(default_factory=list)
