# -*- coding: utf-8 -*-

"""
********************************
loopless.processing.selectors
********************************

Column selection for the ``across`` and ``rowwise`` helpers. A selector picks
columns out of a DataFrame by name or by type, without the caller listing them
one at a time::

    select_columns(df, numeric())                  # every numeric column
    select_columns(df, starts_with("bill"))        # bill_length_mm, bill_depth_mm
    select_columns(df, numeric() & ~ends_with("_g"))

Anything ``select_columns`` accepts can be passed as ``cols=`` to the helpers:
``None`` (all columns), a column name, a list of names, or a ``Selector``.

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""
# STDlib imports
import re
import logging

# 3rd party package imports
import pandas as pd
from pandas.api import types as pdtypes


# Local logger
_logger = logging.getLogger(__name__)


class Selector:
    """
    A named predicate over the columns of a DataFrame.

    Attributes:
        predicate: ``predicate(name, series) -> bool``.
        description: human readable form, used in ``repr``.
    """

    def __init__(self, predicate, description="selector"):
        self.predicate = predicate
        self.description = description

    def __call__(self, df):
        return [c for c in df.columns if self.predicate(c, df[c])]

    def __or__(self, other):
        other = _as_selector(other)
        return Selector(lambda c, s: self.predicate(c, s) or other.predicate(c, s),
                        f"({self.description} | {other.description})")

    def __and__(self, other):
        other = _as_selector(other)
        return Selector(lambda c, s: self.predicate(c, s) and other.predicate(c, s),
                        f"({self.description} & {other.description})")

    def __invert__(self):
        return Selector(lambda c, s: not self.predicate(c, s), f"~{self.description}")

    def __repr__(self):
        return f"<Selector {self.description}>"


def everything():
    """Select every column."""
    return Selector(lambda c, s: True, "everything()")


def numeric():
    """Select columns with a numeric dtype. Booleans don't count."""
    return Selector(lambda c, s: pdtypes.is_numeric_dtype(s) and not pdtypes.is_bool_dtype(s), "numeric()")


def starts_with(prefix):
    """Select columns whose name starts with ``prefix``."""
    return Selector(lambda c, s: str(c).startswith(prefix), f"starts_with({prefix!r})")


def ends_with(suffix):
    """Select columns whose name ends with ``suffix``."""
    return Selector(lambda c, s: str(c).endswith(suffix), f"ends_with({suffix!r})")


def contains(text):
    """Select columns whose name contains ``text``."""
    return Selector(lambda c, s: text in str(c), f"contains({text!r})")


def matches(pattern):
    """Select columns whose name matches the regular expression ``pattern`` (``re.search``)."""
    regex = re.compile(pattern)
    return Selector(lambda c, s: regex.search(str(c)) is not None, f"matches({pattern!r})")


def where(predicate):
    """Select columns for which ``predicate(series)`` is true."""
    name = getattr(predicate, "__name__", "predicate")
    return Selector(lambda c, s: bool(predicate(s)), f"where({name})")


def _names(names):
    wanted = list(names)
    return Selector(lambda c, s: c in wanted, f"{wanted!r}")


def _as_selector(cols):
    if cols is None:
        return everything()
    if isinstance(cols, Selector):
        return cols
    if isinstance(cols, str):
        return _names([cols])
    return _names(cols)


def select_columns(df: "pd.DataFrame", cols=None) -> list:
    """
    Resolve ``cols`` against ``df``, returning column names in table order.

    Args:
        df (DataFrame): table to select from.
        cols: ``None`` (all columns), a column name, a list of column names,
            or a ``Selector``.

    Returns:
        list: selected column names, in the order they appear in ``df``.

    Raises:
        KeyError: if a name given explicitly is not a column of ``df``.
    """
    if cols is not None and not isinstance(cols, Selector):
        wanted = [cols] if isinstance(cols, str) else list(cols)
        missing = [c for c in wanted if c not in df.columns]
        if missing:
            raise KeyError(f"Columns not found in DataFrame: {missing}")

    selected = _as_selector(cols)(df)
    _logger.debug("select_columns(%r) -> %r", cols, selected)
    return selected
