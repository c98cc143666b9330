"""Statistics and relative-speed computations."""
