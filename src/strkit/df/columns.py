"""
DataFrame string columns - requires polars.

Apply strkit functions to polars DataFrame columns.
"""

__all__ = [
    "map_column",
    "filter_matching",
]

from typing import Any, Callable, Iterable, Optional

import polars as pl

from strkit.checks import matches_any


def map_column(
    df: pl.DataFrame,
    column: str,
    func: Callable[[str], Any],
    output_column: Optional[str] = None,
    return_dtype: pl.DataType = pl.Utf8,
) -> pl.DataFrame:
    """
    Apply a string function to every non-null value of a column.

    Args:
        df: Input DataFrame
        column: Column holding strings
        func: Any one-argument strkit function (transform or predicate)
        output_column: Name for the result column (defaults to overwriting column)
        return_dtype: Polars dtype of the result (use ``pl.Boolean`` for predicates)

    Returns:
        DataFrame with the mapped column; unchanged if column is missing

    Example:
        >>> df = pl.DataFrame({"name": ["Hello World", None]})
        >>> map_column(df, "name", kebab, "slug")
        shape: (2, 2)
        ┌─────────────┬─────────────┐
        │ name        ┆ slug        │
        ├─────────────┼─────────────┤
        │ Hello World ┆ hello-world │
        │ null        ┆ null        │
        └─────────────┴─────────────┘
    """
    if column not in df.columns:
        return df

    out_col = output_column or column
    return df.with_columns(
        pl.col(column)
        .map_elements(func, return_dtype=return_dtype, skip_nulls=True)
        .alias(out_col)
    )


def filter_matching(
    df: pl.DataFrame,
    column: str,
    patterns: Iterable[str],
    wildcard: bool = False,
    exclude: bool = False,
) -> pl.DataFrame:
    """
    Filter DataFrame to rows whose column matches any pattern.

    Matching follows ``matches_any``: case-insensitive, trimmed, with
    optional trailing-``*`` prefix patterns. Null values never match.

    Args:
        df: Input DataFrame
        column: Column to test
        patterns: Patterns to match against
        wildcard: Treat a trailing ``*`` as a prefix marker
        exclude: If True, drop matching rows instead of keeping them

    Returns:
        Filtered DataFrame

    Example:
        >>> df = pl.DataFrame({"page": ["admin.php", "index.php", "edit.php"]})
        >>> filter_matching(df, "page", ["admin*", "edit*"], wildcard=True)
        shape: (2, 1)
        ┌───────────┐
        │ page      │
        ├───────────┤
        │ admin.php │
        │ edit.php  │
        └───────────┘
    """
    if column not in df.columns:
        return df

    patterns = list(patterns)
    condition = (
        pl.col(column)
        .map_elements(
            lambda value: matches_any(value, patterns, wildcard),
            return_dtype=pl.Boolean,
        )
        .fill_null(False)
    )
    if exclude:
        condition = ~condition

    return df.filter(condition)
