"""
Staff DTO
=========

Pydantic models for staff API responses.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from staff_directory.domain.models.specialties import Specialties
from staff_directory.domain.models.staff_member import StaffMember


class SpecialtiesResponse(BaseModel):
    """DTO for specialty flags."""
    inf: bool
    pri: bool
    ing: bool
    fra: bool
    ef: bool
    pt: bool
    al: bool
    mus: bool

    @classmethod
    def from_entity(cls, specialties: Specialties) -> "SpecialtiesResponse":
        return cls(**specialties.to_dict())


class StaffMemberResponse(BaseModel):
    """
    DTO for teacher and user data.

    ``id`` is rendered as ``_id`` and left out entirely when absent.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "65a1f0c2e4b0a1b2c3d4e5f6",
                "initial_position": 12,
                "name": "MARIA",
                "surname": "LOPEZ GARCIA",
                "has_services": False,
                "specialties": {
                    "inf": True, "pri": False, "ing": False, "fra": False,
                    "ef": False, "pt": False, "al": False, "mus": False,
                },
            }
        },
    )

    id: Optional[str] = Field(None, alias="_id", description="Store identifier")
    initial_position: int
    name: str
    surname: str
    has_services: bool
    specialties: SpecialtiesResponse

    @classmethod
    def from_entity(cls, member: StaffMember) -> "StaffMemberResponse":
        """Convert a domain entity to its response DTO."""
        return cls(
            id=member.id,
            initial_position=member.initial_position,
            name=member.name,
            surname=member.surname,
            has_services=member.has_services,
            specialties=SpecialtiesResponse.from_entity(member.specialties),
        )
