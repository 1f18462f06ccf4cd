"""Core constants for component suggestions.

Fixed configuration of the suggestions use case; not caller-supplied and not
read from the environment.
"""

from quicksearch.domain.enums import Qualifier

# Qualifiers offered by the suggestions search, in response order.
# Directories and libraries are never suggested.
SUGGESTION_QUALIFIERS: tuple[Qualifier, ...] = (
    Qualifier.VIEW,
    Qualifier.SUBVIEW,
    Qualifier.PROJECT,
    Qualifier.MODULE,
    Qualifier.FILE,
    Qualifier.UNIT_TEST_FILE,
)

RESULTS_PER_QUALIFIER = 6

# Shorter queries are rejected before the index is called.
MINIMUM_QUERY_LENGTH = 2

# Tags wrapped around matched substrings in highlighted names.
HIGHLIGHT_START = "<mark>"
HIGHLIGHT_END = "</mark>"
