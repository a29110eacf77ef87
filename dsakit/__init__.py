"""Classic data structures and algorithms: array helpers, a bounded stack, binary trees and linked lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "stack", "tree", "linked_list"]