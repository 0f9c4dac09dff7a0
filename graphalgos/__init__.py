"""Classic graph algorithms over plain adjacency lists, matrices and grids."""

__version__ = "0.1.0"
__all__ = ["representations", "disjoint_set", "traversal", "topology", "shortest_paths", "grids"]