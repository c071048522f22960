"""Infrastructure layer - concrete factories, registry and logging."""
