# -*- coding: utf-8 -*-

"""
********************************
loopless.data.datasets
********************************

The two example tables used throughout the tutorial:

* ``mtcars``: the 1974 Motor Trend car road tests, 32 cars by 11 numeric
  specifications (plus the model name). Shipped with the package.
* ``penguins``: the Palmer Archipelago penguin measurements. Downloaded from
  ``Config().PENGUINS_URL`` the first time it is needed, then read from the
  cache in ``Config().DATA_DIR_INTERIM``.

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""
# STDlib imports
import os
import logging

# 3rd party package imports
import pandas as pd

# project imports
from loopless.config import Config
from loopless.data.cache import DataFrameCache


# Local logger
_logger = logging.getLogger(__name__)

MTCARS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "mtcars.csv")

PENGUIN_CATEGORIES = ["species", "island", "sex"]
PENGUIN_MEASUREMENTS = ["bill_length_mm", "bill_depth_mm", "flipper_length_mm", "body_mass_g"]


class MTCars(DataFrameCache):
    """
    The car specifications table. ``make_dataset`` reads the copy bundled with
    the package, so the cache only matters if you want it next to your other
    data.
    """

    filename = "mtcars"

    def make_dataset(self):
        return pd.read_csv(MTCARS_PATH)


class Penguins(DataFrameCache):
    """
    The penguin measurements table, downloaded once and cached.

    Measurement columns are floats with missing values; ``species``,
    ``island`` and ``sex`` are text.
    """

    filename = "penguins"

    def make_dataset(self):
        url = Config().get("PENGUINS_URL")
        _logger.info("Downloading penguins from %s", url)
        return pd.read_csv(url)

    def _post_read_hook(self, df):
        df = df.copy()
        for c in PENGUIN_MEASUREMENTS:
            if c in df:
                df[c] = df[c].astype(float)
        return df


def load_mtcars() -> "pd.DataFrame":
    """Return a fresh copy of the car specifications table, caching it first if needed."""
    return MTCars().data.copy()


def load_penguins() -> "pd.DataFrame":
    """Return a fresh copy of the penguins table, downloading it if not cached."""
    return Penguins().data.copy()
