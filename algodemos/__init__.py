"""Interactive demonstrations of binary search, interpolation search, merge sort and selection sort."""

__version__ = "0.1.0"
__all__ = ["binary_search", "interpolation", "merge_sort", "selection_sort"]