"""Infrastructure layer: persistence and export adapters."""
