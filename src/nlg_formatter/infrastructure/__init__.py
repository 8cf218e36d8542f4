"""Infrastructure adapters: concrete implementations of domain ports."""
