"""Search trees, heap sort, spanning trees and probabilistic filters, each with a console."""

__version__ = "0.1.0"

__all__ = ["avl", "bst", "countmin", "filters", "heap", "kruskal", "prims", "threaded"]