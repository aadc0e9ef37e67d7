"""Classic sorting, searching, graph and dynamic-programming algorithms."""

__version__ = "0.1.0"

__all__ = [
    "coin_change",
    "dijkstra",
    "edit_distance",
    "egg_drop",
    "fibonacci",
    "knapsack",
    "quick_select",
    "search",
    "snail",
    "sorting",
    "subarrays",
    "subsequences",
    "ternary_search",
    "topological",
]