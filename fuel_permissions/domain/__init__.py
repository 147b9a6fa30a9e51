"""Domain layer: enums, policy value objects and protocols (ports)."""
