"""Infrastructure layer — template loading."""
