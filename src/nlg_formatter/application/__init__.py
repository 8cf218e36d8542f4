"""Application layer: use cases that orchestrate domain ports."""
