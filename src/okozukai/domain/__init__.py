"""Domain layer: entities, value objects, repositories and domain services."""
