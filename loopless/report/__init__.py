# -*- coding: utf-8 -*-

"""
********************************
loopless.report
********************************

This package holds the tutorial (``tutorial``) and turns it into an HTML page
(``render``).

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""

from loopless.report.tutorial import SECTIONS, TITLE, Section, Prose, Code
from loopless.report.render import SnippetError, run_snippets, render_html, render_report
