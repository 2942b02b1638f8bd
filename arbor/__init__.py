"""Binary trees with parent links, traversals, measures, BSTs, AVL trees and max heaps."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "measures", "bst", "avl", "heap"]