"""Domain core: exception hierarchy and security primitives."""
