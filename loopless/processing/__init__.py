# -*- coding: utf-8 -*-

"""
********************************
loopless.processing
********************************

This package provides the iteration helpers the tutorial demonstrates: across
columns (``across``), within rows (``rowwise``), and the plain loop and maps
(``loops``).

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""

from loopless.processing.selectors import (Selector, select_columns, everything, numeric,
                                           starts_with, ends_with, contains, matches, where)
from loopless.processing.across import mutate_across, summarise_across, reduce_series
from loopless.processing.rowwise import row_apply, mutate_rowwise, mutate_whole
from loopless.processing.loops import indexed_loop, map_list, map_typed
