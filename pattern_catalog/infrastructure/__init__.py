"""Infrastructure layer - registry, logging and shared pattern mechanics."""
