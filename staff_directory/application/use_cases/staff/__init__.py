from .list_staff import ListStaffUseCase
from .get_staff_member import GetStaffMemberUseCase

__all__ = ["ListStaffUseCase", "GetStaffMemberUseCase"]
