"""Domain enumerations for quicksearch.

Enums represent fixed sets of domain values (e.g. component qualifiers).
"""

from enum import Enum


class Qualifier(str, Enum):
    """Structural kind of a component.

    Values are the short codes stored in component.qualifier and rendered
    as the group tag ("q") of a suggestions response.
    """

    VIEW = "VW"
    SUBVIEW = "SVW"
    PROJECT = "TRK"
    MODULE = "BRC"
    DIRECTORY = "DIR"
    FILE = "FIL"
    UNIT_TEST_FILE = "UTS"
    LIBRARY = "LIB"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid qualifier codes as strings.

        Returns:
            List of enum value strings (e.g. for check constraints).
        """
        return [qualifier.value for qualifier in cls]
