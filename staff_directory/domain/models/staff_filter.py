"""
Staff Filter
============

Optional criteria used to select staff records.
"""
from dataclasses import dataclass
from typing import Optional


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


@dataclass(frozen=True)
class StaffFilter:
    """
    Filter descriptor for staff queries.

    All criteria are optional and combine with AND. An absent
    criterion imposes no constraint.
    """
    name: Optional[str] = None
    surname: Optional[str] = None
    specialty: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        name: Optional[str] = None,
        surname: Optional[str] = None,
        specialty: Optional[str] = None,
    ) -> "StaffFilter":
        """
        Build a filter from raw request parameters.

        Blank values are treated as absent; others are kept verbatim.
        """
        return cls(name=_clean(name), surname=_clean(surname), specialty=_clean(specialty))
