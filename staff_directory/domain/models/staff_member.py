"""
Staff Member Model
==================

Domain models for the person records served by the directory.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from typing import Optional

from staff_directory.domain.models.specialties import Specialties


@dataclass(frozen=True)
class StaffMember:
    """
    Staff member domain model.

    Records are created and maintained outside this service, so
    instances are read-only. ``id`` is the store-assigned identifier
    as a hex string and is None for records that were never stored.
    """
    initial_position: int
    name: str
    surname: str
    has_services: bool
    specialties: Specialties = field(default_factory=Specialties)
    id: Optional[str] = None


@dataclass(frozen=True)
class Teacher(StaffMember):
    """A teacher record. Name filters match by substring."""


@dataclass(frozen=True)
class User(StaffMember):
    """A user record. Name filters match exactly."""
