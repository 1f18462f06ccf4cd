"""Application layer: DTOs, ports, and use cases (no infrastructure imports)."""
