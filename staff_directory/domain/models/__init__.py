from .specialties import Specialties
from .staff_member import StaffMember, Teacher, User
from .staff_filter import StaffFilter

__all__ = ["Specialties", "StaffMember", "Teacher", "User", "StaffFilter"]
