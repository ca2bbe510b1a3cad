"""
MongoDB Teacher Repository
==========================

Concrete implementation of TeacherRepository using MongoDB.
"""
from staff_directory.domain.models.staff_member import Teacher
from staff_directory.domain.repositories.teacher_repository import TeacherRepository
from staff_directory.infrastructure.db.mongo_staff_repository import MongoStaffRepository
from staff_directory.infrastructure.db.query_builder import MatchMode


class MongoTeacherRepository(MongoStaffRepository[Teacher], TeacherRepository):
    """
    MongoDB implementation of TeacherRepository.

    Name criteria match as a case-insensitive substring.
    """

    ENTITY = Teacher
    NAME_MATCH = MatchMode.SUBSTRING
