# -*- coding: utf-8 -*-

"""
********************************
loopless.processing.across
********************************

Apply a function across a selection of columns, instead of looping over the
column names.

``mutate_across`` keeps the shape of the table and transforms values;
``summarise_across`` collapses each column to one value (per group, if
``by`` is given)::

    from loopless.processing import mutate_across, summarise_across, numeric, starts_with

    mutate_across(penguins, numeric(), lambda x: x / 10)
    mutate_across(penguins, starts_with("bill"), lambda s: s - s.mean(), by="species", vectorised=True)
    summarise_across(penguins, starts_with("bill"), "mean", by="species", na_rm=True)

Missing values propagate through a summary unless ``na_rm=True``, so
``summarise_across(df, "x", "mean")`` is NaN if any ``x`` is missing.

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""
# STDlib imports
import logging

# 3rd party package imports
import numpy as np
import pandas as pd

# project imports
from loopless.processing.selectors import select_columns


# Local logger
_logger = logging.getLogger(__name__)

#: Reductions that can be named by string; each is the pandas Series method.
REDUCTIONS = ("mean", "sum", "median", "min", "max", "std", "var")


def _as_list(by):
    if by is None:
        return []
    if isinstance(by, str):
        return [by]
    return list(by)


def _fn_name(fn):
    if isinstance(fn, str):
        return fn
    return getattr(fn, "__name__", "fn")


def _selected(df, cols, by):
    selected = [c for c in select_columns(df, cols) if c not in by]
    if not selected:
        _logger.warning("No columns selected by %r (grouping columns %r are never selected)", cols, by)
    return selected


def reduce_series(series: "pd.Series", fn, na_rm: bool = False):
    """
    Collapse ``series`` to a single value.

    Args:
        series (Series): values to reduce.
        fn (str | callable): name from ``REDUCTIONS``, or ``fn(Series) -> scalar``.
        na_rm (bool): drop missing values first. If False, a named reduction
            over a series with a missing value is missing.

    Raises:
        ValueError: if ``fn`` is a string not in ``REDUCTIONS``.
    """
    if isinstance(fn, str):
        if fn not in REDUCTIONS:
            raise ValueError(f"Unknown reduction {fn!r}, expected one of {REDUCTIONS}")
        return getattr(series, fn)(skipna=na_rm)
    if na_rm:
        series = series.dropna()
    return fn(series)


def _apply_vectorised(col, fn, series):
    """``fn(series)``, which must give back one value per element of ``series``."""
    result = fn(series)
    if not isinstance(result, (pd.Series, np.ndarray, list)) or len(result) != len(series):
        raise TypeError(
            f"mutate_across: fn must return {len(series)} values for column {col!r} "
            f"when vectorised=True, got {type(result).__name__}"
        )
    if isinstance(result, pd.Series):
        return result.set_axis(series.index)
    return pd.Series(result, index=series.index)


def mutate_across(df: "pd.DataFrame", cols, fn, by=None, names: str = None,
                  vectorised: bool = False) -> "pd.DataFrame":
    """
    Apply ``fn`` to every value of the selected columns.

    By default ``fn`` gets one value at a time, with or without ``by``, so the
    output at each position is ``fn`` of the input at that position. With
    ``vectorised=True`` ``fn`` gets a whole column as a Series (each group's
    slice of it, if ``by`` is given) and must return the same number of
    values; that is how a group-relative transform such as
    ``lambda s: s - s.mean()`` is written. Either way the result has the same
    rows, in the same order, as ``df``.

    Args:
        df (DataFrame): input table; not modified.
        cols: columns to transform, anything ``select_columns`` accepts.
        fn (callable): the transformation.
        by (str | list): grouping column(s). Never transformed. Rows with a
            missing key are kept.
        names (str): format string with ``{col}`` and ``{fn}``. If given the
            results go to new columns at the end and the originals are kept.
        vectorised (bool): pass ``fn`` Series instead of single values.

    Returns:
        DataFrame: a new table.

    Raises:
        TypeError: if ``vectorised`` and ``fn`` does not return one value per
            element.
    """
    by = _as_list(by)
    out = df.copy()
    selected = _selected(df, cols, by)

    if by and vectorised:
        grouped = df.groupby(by, sort=False, dropna=False)

    for c in selected:
        if not vectorised:
            new = df[c].map(fn)
        elif by:
            new = grouped[c].transform(lambda s, c=c: _apply_vectorised(c, fn, s))
        else:
            new = _apply_vectorised(c, fn, df[c])

        target = c if names is None else names.format(col=c, fn=_fn_name(fn))
        out[target] = new

    _logger.debug("mutate_across: transformed %r by %r (vectorised=%r)", selected, by, vectorised)
    return out


def summarise_across(df: "pd.DataFrame", cols, fn, by=None, na_rm: bool = False, names: str = None) -> "pd.DataFrame":
    """
    Reduce each selected column to one value, per group if ``by`` is given.

    Args:
        df (DataFrame): input table; not modified.
        cols: columns to summarise, anything ``select_columns`` accepts.
        fn (str | callable | list | dict): the reduction. A list or dict gives
            one output column per (column, function) pair.
        by (str | list): grouping column(s). Rows with a missing key are dropped.
        na_rm (bool): skip missing values. Default False, so one missing value
            makes the summary missing.
        names (str): format string with ``{col}`` and ``{fn}`` for the output
            columns. Defaults to ``{col}`` for one function and
            ``{col}_{fn}`` for several.

    Returns:
        DataFrame: one row, or one row per group with the grouping columns
            first and groups sorted by key.
    """
    by = _as_list(by)
    selected = _selected(df, cols, by)

    if isinstance(fn, dict):
        fns = dict(fn)
    elif isinstance(fn, (list, tuple)):
        fns = {_fn_name(f): f for f in fn}
    else:
        fns = {_fn_name(fn): fn}

    if names is None:
        names = "{col}" if len(fns) == 1 else "{col}_{fn}"

    if not by:
        row = {}
        for c in selected:
            for fname, f in fns.items():
                row[names.format(col=c, fn=fname)] = reduce_series(df[c], f, na_rm=na_rm)
        return pd.DataFrame([row]) if row else pd.DataFrame(index=[0])

    if not selected:
        keys = df[by].dropna().drop_duplicates()
        return keys.sort_values(by).reset_index(drop=True)

    grouped = df.groupby(by, sort=True)
    out = {}
    for c in selected:
        for fname, f in fns.items():
            out[names.format(col=c, fn=fname)] = grouped[c].agg(lambda s, f=f: reduce_series(s, f, na_rm=na_rm))

    _logger.debug("summarise_across: %r over %r by %r", list(fns), selected, by)
    return pd.DataFrame(out).reset_index()
