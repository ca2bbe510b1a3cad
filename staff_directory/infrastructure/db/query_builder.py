"""
Staff Query Builder
===================

Translates a StaffFilter into a MongoDB filter document.
"""
import re
from enum import Enum
from typing import Any, Dict

from staff_directory.domain.constants.specialty_codes import SpecialtyCodes
from staff_directory.domain.constants.staff_fields import StaffFields
from staff_directory.domain.models.staff_filter import StaffFilter

# Clause that no stored document satisfies: every document has an _id.
MATCH_NOTHING: Dict[str, Any] = {StaffFields.MONGO_ID: {"$exists": False}}


class MatchMode(Enum):
    """How a text criterion is compared against the stored value."""
    EXACT = "exact"
    SUBSTRING = "substring"


def text_clause(value: str, mode: MatchMode) -> Dict[str, str]:
    """
    Build a case-insensitive regex clause for a text criterion.

    The value is upper-cased and escaped, so it is matched literally.
    """
    pattern = re.escape(value.upper())
    if mode is MatchMode.EXACT:
        pattern = f"^{pattern}$"
    return {"$regex": pattern, "$options": "i"}


def specialty_path(code: str) -> str:
    return f"{StaffFields.SPECIALTIES}.{code}"


def build_staff_query(staff_filter: StaffFilter, name_match: MatchMode) -> Dict[str, Any]:
    """
    Build the conjunctive MongoDB filter for a staff query.

    Args:
        staff_filter: Criteria to translate; absent criteria add no clause
        name_match: Match mode for the name criterion

    Returns:
        Filter document; empty when no criteria are set
    """
    query: Dict[str, Any] = {}

    if staff_filter.name is not None:
        query[StaffFields.NAME] = text_clause(staff_filter.name, name_match)

    if staff_filter.surname is not None:
        query[StaffFields.SURNAME] = text_clause(staff_filter.surname, MatchMode.SUBSTRING)

    if staff_filter.specialty is not None:
        code = SpecialtyCodes.lookup(staff_filter.specialty)
        if code is None:
            query.update(MATCH_NOTHING)
        else:
            query[specialty_path(code)] = True

    return query
