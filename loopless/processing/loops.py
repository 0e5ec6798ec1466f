# -*- coding: utf-8 -*-

"""
********************************
loopless.processing.loops
********************************

This module provides the baseline the tutorial starts from, a loop written out
by hand over positions ``1..N``, and two general purpose maps that hide the
loop: ``map_list`` (results in a list) and ``map_typed`` (results in a Series
of a declared type, checked as they come in).

Both maps treat a DataFrame as a collection of columns::

    map_typed(mtcars, lambda col: col.mean(), "float")   # one mean per column

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""
# STDlib imports
import logging
import numbers

# 3rd party package imports
import numpy as np
import pandas as pd
from tqdm import tqdm


# Local logger
_logger = logging.getLogger(__name__)


def indexed_loop(values, template: str, progress: bool = False) -> list:
    """
    Fill ``template`` with each element of ``values``, by position.

    Example::

        >>> indexed_loop(["pika", "fox"], "My favorite animal is the {}")
        ['My favorite animal is the pika', 'My favorite animal is the fox']

    Args:
        values: an ordered sequence; an empty one gives an empty list.
        template (str): ``str.format`` template with one positional field.
        progress (bool): show a tqdm progress bar.

    Returns:
        list: one string per element, in order.
    """
    values = list(values)
    output = []

    positions = range(1, len(values) + 1)
    if progress:
        positions = tqdm(positions, total=len(values), desc="indexed_loop")

    for i in positions:
        output.append(template.format(values[i - 1]))

    _logger.debug("indexed_loop: %d iterations", len(output))
    return output


def _items(values):
    """(label, element) pairs. A DataFrame gives its columns."""
    if isinstance(values, pd.DataFrame):
        return [(c, values[c]) for c in values.columns]
    if isinstance(values, (pd.Series, dict)):
        return list(values.items())
    return list(enumerate(values))


def map_list(values, fn):
    """
    Apply ``fn`` to each element of ``values``.

    Returns:
        list of results, or a dict keyed by column name (DataFrame) or key
        (dict, Series).
    """
    items = _items(values)
    if isinstance(values, (pd.DataFrame, pd.Series, dict)):
        return {label: fn(v) for label, v in items}
    return [fn(v) for _, v in items]


def _is_bool(v):
    return isinstance(v, (bool, np.bool_))


#: dtype name -> (check, pandas dtype)
TYPE_CHECKS = {
    "float": (lambda v: isinstance(v, numbers.Real) and not _is_bool(v), "float64"),
    "int": (lambda v: isinstance(v, numbers.Integral) and not _is_bool(v), "int64"),
    "str": (lambda v: isinstance(v, str), "object"),
    "bool": (_is_bool, "bool"),
}


def map_typed(values, fn, dtype: str) -> "pd.Series":
    """
    Apply ``fn`` to each element of ``values``, insisting every result is of
    type ``dtype``.

    Args:
        values: sequence, dict, Series, or DataFrame (iterated by column).
        fn (callable): called once per element.
        dtype (str): one of ``float``, ``int``, ``str``, ``bool``.

    Returns:
        Series: results labelled by position, key or column name.

    Raises:
        ValueError: unknown ``dtype``.
        TypeError: a result that isn't a ``dtype``.
    """
    if dtype not in TYPE_CHECKS:
        raise ValueError(f"Unknown dtype {dtype!r}, expected one of {sorted(TYPE_CHECKS)}")
    check, pd_dtype = TYPE_CHECKS[dtype]

    labels, results = [], []
    for label, v in _items(values):
        result = fn(v)
        if not check(result):
            raise TypeError(f"map_typed: result for {label!r} is {type(result).__name__}, not {dtype}")
        labels.append(label)
        results.append(result)

    return pd.Series(results, index=labels, dtype=pd_dtype)
