"""Application layer: DTOs and the orchestrating services."""
