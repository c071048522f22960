"""Domain layer - product families and the factory port."""
