"""Infrastructure layer: persistence and adapters implementing application ports."""
