# -*- coding: utf-8 -*-

"""
********************************
loopless
********************************

This package accompanies a tutorial on iterating over tables without writing
the loop yourself: apply a function across columns, apply a function per row,
or hand the iteration to a map.

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""

from .__version__ import (__title__, __description__, __version__,
                          __build__, __author__,
                          __license__, __copyright__)
