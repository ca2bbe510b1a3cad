"""
Specialties Model
=================

Fixed set of boolean specialty flags carried by every staff record.
"""
from dataclasses import dataclass, fields
from typing import Dict, Mapping

from staff_directory.domain.constants.specialty_codes import SpecialtyCodes


@dataclass(frozen=True)
class Specialties:
    """
    Specialty flags of a staff member.

    Each field indicates whether the person holds that specialty.
    Field names are the specialty codes themselves.
    """
    inf: bool = False
    pri: bool = False
    ing: bool = False
    fra: bool = False
    ef: bool = False
    pt: bool = False
    al: bool = False
    mus: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, bool]) -> "Specialties":
        """
        Build specialties from a stored mapping.

        Keys outside the known code set are ignored. Every known code
        must be present.

        Raises:
            TypeError: If the value is not a mapping or a flag is not a bool
            ValueError: If a known code is missing from the mapping
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Specialties must be a mapping, got {type(data).__name__}")
        missing = [code for code in SpecialtyCodes.ALL if code not in data]
        if missing:
            raise ValueError(f"Specialties missing codes: {', '.join(missing)}")
        wrong_type = [code for code in SpecialtyCodes.ALL if not isinstance(data[code], bool)]
        if wrong_type:
            raise TypeError(f"Specialties must be booleans: {', '.join(wrong_type)}")
        return cls(**{code: data[code] for code in SpecialtyCodes.ALL})

    def to_dict(self) -> Dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
