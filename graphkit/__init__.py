"""Graph and grid algorithms: representations, traversal, cycles, topological order, components and grids."""

__version__ = "0.1.0"