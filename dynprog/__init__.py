"""Classic dynamic programming algorithms over sequences, grids, subsets, knapsacks, stocks, strings and intervals."""

__version__ = "0.1.0"
__all__ = [
    "grids",
    "increasing",
    "intervals",
    "knapsack",
    "linear",
    "stocks",
    "strings",
    "subsets",
]