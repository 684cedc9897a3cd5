"""Domain layer: document entity and exceptions."""
