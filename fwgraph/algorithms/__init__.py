"""Path algorithms.

`floyd_warshall` holds the all-pairs relaxation engine; `base` holds the weight
type aliases and the stock operators and comparators it is configured with.
"""
