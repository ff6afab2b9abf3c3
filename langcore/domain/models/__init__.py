"""Domain models (value objects and records)."""
