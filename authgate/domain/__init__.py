"""Domain layer: entities, enums and protocols (ports)."""
