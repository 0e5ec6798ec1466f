# -*- coding: utf-8 -*-

__title__ = 'loopless'
__description__ = 'A worked tutorial on replacing hand-written loops over pandas DataFrames.'
__version__ = '0.1.0'
__build__ = 0x000100
__author__ = 'Maclean Gaulin'
__license__ = 'MIT'
__copyright__ = 'Copyright 2025 Maclean Gaulin'
