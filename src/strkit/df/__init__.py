"""
DataFrame utilities subpackage - requires polars.

Column-wise application of strkit functions.
"""

from strkit.df.columns import (
    map_column,
    filter_matching,
)

__all__ = [
    "map_column",
    "filter_matching",
]
