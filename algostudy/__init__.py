"""Search trees, a priority queue, caches, sorting, linked lists, binary trees and dynamic programming."""

__version__ = "0.1.0"