"""Constants for specialty codes"""
from typing import Final, Optional, Tuple


class SpecialtyCodes:
    """
    The closed set of specialty codes a staff record carries.

    Every stored record has exactly these keys under ``specialties``.
    """
    INF = "inf"  # Informatics
    PRI = "pri"  # Primary education
    ING = "ing"  # English
    FRA = "fra"  # French
    EF = "ef"    # Physical education
    PT = "pt"    # Therapeutic pedagogy
    AL = "al"    # Audition and language
    MUS = "mus"  # Music

    ALL: Final[Tuple[str, ...]] = (INF, PRI, ING, FRA, EF, PT, AL, MUS)

    @classmethod
    def lookup(cls, code: Optional[str]) -> Optional[str]:
        """
        Resolve a caller-supplied code against the known set.

        Args:
            code: Raw specialty code from the caller

        Returns:
            The canonical code if known, None otherwise
        """
        return code if code in cls.ALL else None
