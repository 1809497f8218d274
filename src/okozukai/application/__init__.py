"""Application layer: use-case services, DTOs and factory protocols."""
