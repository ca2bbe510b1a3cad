"""
Teacher Controller
==================

FastAPI controller for teacher lookups.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends

from staff_directory.api.v1.dependencies import get_teacher_service
from staff_directory.application.dto.staff_dto import StaffMemberResponse
from staff_directory.application.services.staff_service import TeacherService
from staff_directory.domain.models.staff_filter import StaffFilter

router = APIRouter(tags=["teachers"])


@router.get(
    "",
    response_model=List[StaffMemberResponse],
    response_model_exclude_none=True,
    summary="List teachers",
    description="""
    List teachers, optionally filtered.
    
    - name: case-insensitive substring of the first name
    - surname: case-insensitive substring of the last name
    - specialty: specialty code the teacher must hold (inf, pri, ing, fra, ef, pt, al, mus)
    
    Returns 404 when nothing matches.
    """
)
def list_teachers(
    name: Optional[str] = None,
    surname: Optional[str] = None,
    specialty: Optional[str] = None,
    service: TeacherService = Depends(get_teacher_service),
) -> List[StaffMemberResponse]:
    """List teachers with optional filters."""
    teachers = service.list_teachers(StaffFilter.from_params(name, surname, specialty))
    return [StaffMemberResponse.from_entity(teacher) for teacher in teachers]


@router.get(
    "/{teacher_id}",
    response_model=StaffMemberResponse,
    response_model_exclude_none=True,
    summary="Get teacher by ID",
    description="Get details of a specific teacher. Malformed IDs are reported as 404."
)
def get_teacher(
    teacher_id: str,
    service: TeacherService = Depends(get_teacher_service),
) -> StaffMemberResponse:
    """Get a specific teacher by ID."""
    return StaffMemberResponse.from_entity(service.get_teacher(teacher_id))
