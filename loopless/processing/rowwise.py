# -*- coding: utf-8 -*-

"""
********************************
loopless.processing.rowwise
********************************

Apply a function to the values within each row, one result per row.

The thing to watch for: a summary function handed a block of columns has no
idea where one row ends and the next begins. ``mutate_whole`` does exactly
that on purpose, so the difference is easy to see::

    >>> df = pd.DataFrame({"col_a": [1, 10], "col_b": [1, 20]})
    >>> mutate_rowwise(df, "avg", ["col_a", "col_b"], "mean")["avg"].tolist()
    [1.0, 15.0]
    >>> mutate_whole(df, "avg", ["col_a", "col_b"], "mean")["avg"].tolist()
    [8.0, 8.0]

The second is the mean of all four numbers, repeated on every row.

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""
# STDlib imports
import logging

# 3rd party package imports
import pandas as pd

# project imports
from loopless.processing.across import REDUCTIONS, reduce_series
from loopless.processing.selectors import select_columns


# Local logger
_logger = logging.getLogger(__name__)


def row_apply(df: "pd.DataFrame", cols, fn, na_rm: bool = False) -> "pd.Series":
    """
    Apply ``fn`` to each row of the selected columns.

    Args:
        df (DataFrame): input table; not modified.
        cols: columns making up each row, anything ``select_columns`` accepts.
        fn (str | callable): name from ``REDUCTIONS``, or ``fn(row) -> value``
            where ``row`` is a Series indexed by column name.
        na_rm (bool): skip missing values within the row.

    Returns:
        Series: one value per row, with the index of ``df``.
    """
    selected = select_columns(df, cols)
    sub = df[selected]
    _logger.debug("row_apply: %r over %r", fn, selected)

    if isinstance(fn, str):
        if fn not in REDUCTIONS:
            raise ValueError(f"Unknown reduction {fn!r}, expected one of {REDUCTIONS}")
        return getattr(sub, fn)(axis=1, skipna=na_rm)

    if sub.empty:
        return pd.Series(index=df.index, dtype=object)

    return sub.apply(lambda row: fn(row.dropna() if na_rm else row), axis=1)


def mutate_rowwise(df: "pd.DataFrame", name: str, cols, fn, na_rm: bool = False) -> "pd.DataFrame":
    """Return a copy of ``df`` with ``row_apply(df, cols, fn)`` stored in column ``name``."""
    out = df.copy()
    out[name] = row_apply(df, cols, fn, na_rm=na_rm)
    return out


def mutate_whole(df: "pd.DataFrame", name: str, cols, fn, na_rm: bool = False) -> "pd.DataFrame":
    """
    Apply ``fn`` once to every value of the selected columns, across all rows,
    and store that single result on every row of column ``name``.

    This is what a summary function does when it is not told about rows. Use
    ``mutate_rowwise`` when you want one result per row.
    """
    selected = select_columns(df, cols)
    values = pd.Series(df[selected].to_numpy().ravel())
    out = df.copy()
    out[name] = reduce_series(values, fn, na_rm=na_rm)
    _logger.debug("mutate_whole: %r over %d values from %r", fn, len(values), selected)
    return out
