"""Infrastructure adapters and the composition root."""
