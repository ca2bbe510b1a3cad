"""
User Controller
===============

FastAPI controller for user lookups.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends

from staff_directory.api.v1.dependencies import get_user_service
from staff_directory.application.dto.staff_dto import StaffMemberResponse
from staff_directory.application.services.staff_service import UserService
from staff_directory.domain.models.staff_filter import StaffFilter

router = APIRouter(tags=["users"])


@router.get(
    "",
    response_model=List[StaffMemberResponse],
    response_model_exclude_none=True,
    summary="List users",
    description="List users, optionally filtered by exact name, surname substring or specialty code."
)
def list_users(
    name: Optional[str] = None,
    surname: Optional[str] = None,
    specialty: Optional[str] = None,
    service: UserService = Depends(get_user_service),
) -> List[StaffMemberResponse]:
    """List users with optional filters."""
    users = service.list_users(StaffFilter.from_params(name, surname, specialty))
    return [StaffMemberResponse.from_entity(user) for user in users]


@router.get(
    "/{user_id}",
    response_model=StaffMemberResponse,
    response_model_exclude_none=True,
    summary="Get user by ID",
    description="Get details of a specific user. Malformed IDs are reported as 404."
)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> StaffMemberResponse:
    """Get a specific user by ID."""
    return StaffMemberResponse.from_entity(service.get_user(user_id))
