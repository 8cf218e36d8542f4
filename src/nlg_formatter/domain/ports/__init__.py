"""Domain ports: abstract contracts implemented by infrastructure."""
