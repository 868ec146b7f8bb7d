"""Infrastructure adapters for persistence, identity, and reporting."""
