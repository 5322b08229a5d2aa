"""Infrastructure layer - adapters for domain ports."""
