# -*- coding: utf-8 -*-

"""
********************************
loopless.data
********************************

This package holds the example tables the tutorial iterates over, and the
cache that keeps them on disk.

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""

from loopless.data.cache import DataFrameCache
from loopless.data.datasets import MTCars, Penguins, load_mtcars, load_penguins
