"""quicksearch: component suggestions grouped by qualifier."""

__version__ = "1.0.0"
