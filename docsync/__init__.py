"""Ordered trees and a priority queue for collaborative document sync."""

__version__ = "0.2.1"

__all__ = ["llrb", "pq", "splay"]