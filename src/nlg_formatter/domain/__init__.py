"""Domain layer: document tree models, ports and errors."""
