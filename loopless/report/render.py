# -*- coding: utf-8 -*-

"""
********************************
loopless.report.render
********************************

Run the tutorial's code blocks and render the result as a single HTML page.

Every code block runs in one shared namespace, in order, so later blocks can
use what earlier ones defined. Whatever a block prints is captured and shown
under it. The page is rendered with a jinja2 template, with autoescaping on,
so code and output appear exactly as written.

One-liner from the commandline::

    python -c "from loopless.report import render_report; render_report('loopless.html')"

:copyright: (c) 2025 by Maclean Gaulin.
:license: MIT, see LICENSE for more details.
"""
# STDlib imports
import io
import logging
import contextlib

# 3rd party package imports
import pandas as pd
from jinja2 import Environment

# project imports
from loopless.config import Config
from loopless.report.tutorial import SECTIONS, TITLE, Code, Prose


# Local logger
_logger = logging.getLogger(__name__)


REPORT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>
body { max-width: 50em; margin: 2em auto; padding: 0 1em; font-family: Georgia, serif; line-height: 1.5; }
pre { padding: 0.75em; overflow-x: auto; font-size: 0.85em; }
pre.source { background: #f4f4f4; border-left: 3px solid #4a7; }
pre.output { background: #fff; border-left: 3px solid #bbb; color: #333; }
code { font-family: Menlo, Consolas, monospace; }
</style>
</head>
<body>
<h1>{{ title }}</h1>
{% for section in sections %}
<section>
<h2>{{ section.title }}</h2>
{% for block in section.blocks %}
{% if block.kind == "prose" %}
{% for paragraph in block.paragraphs %}
<p>{% for is_code, text in paragraph %}{% if is_code %}<code>{{ text }}</code>{% else %}{{ text }}{% endif %}{% endfor %}</p>
{% endfor %}
{% else %}
<pre class="source"><code>{{ block.source }}</code></pre>
{% if block.output %}<pre class="output">{{ block.output }}</pre>{% endif %}
{% endif %}
{% endfor %}
</section>
{% endfor %}
</body>
</html>
"""


class SnippetError(RuntimeError):
    """A code block of the tutorial raised."""

    def __init__(self, section_title, index, source):
        self.section_title = section_title
        self.index = index
        self.source = source
        super().__init__(f"Code block {index} of section {section_title!r} failed:\n{source}")


def _paragraphs(text):
    """Split prose into paragraphs, each a list of (is_code, text) runs split on backticks."""
    paragraphs = []
    for para in text.split("\n\n"):
        para = " ".join(line.strip() for line in para.splitlines()).strip()
        if para:
            paragraphs.append([(i % 2 == 1, run) for i, run in enumerate(para.split("`")) if run])
    return paragraphs


def run_snippets(sections=None, namespace=None):
    """
    Execute every code block of ``sections`` and capture its printed output.

    Args:
        sections (list): ``Section`` objects, default ``tutorial.SECTIONS``.
        namespace (dict): globals the blocks run in. A fresh dict by default;
            pass your own to inspect what the tutorial defined.

    Returns:
        list: one dict per section, ``{"title", "blocks"}``, where each block
            is ``{"kind": "prose", "paragraphs"}`` or
            ``{"kind": "code", "source", "output"}``.

    Raises:
        SnippetError: if a block raises; the original exception is chained.
    """
    if sections is None:
        sections = SECTIONS
    if namespace is None:
        namespace = {"__name__": "__loopless_tutorial__"}

    display_rows = Config().get("DISPLAY_ROWS", 10)

    results = []
    for section in sections:
        blocks = []
        n_code = 0
        for block in section.blocks:
            if isinstance(block, Prose):
                blocks.append({"kind": "prose", "paragraphs": _paragraphs(block.text)})
                continue
            if not isinstance(block, Code):
                raise TypeError(f"Unknown block type in section {section.title!r}: {type(block).__name__}")

            n_code += 1
            _logger.debug("Running block %d of %r", n_code, section.title)
            buffer = io.StringIO()
            try:
                with contextlib.redirect_stdout(buffer), \
                        pd.option_context("display.max_rows", display_rows, "display.width", 100):
                    exec(compile(block.source, f"<{section.title} #{n_code}>", "exec"), namespace)
            except Exception as e:
                _logger.error("Block %d of %r raised %r", n_code, section.title, e)
                raise SnippetError(section.title, n_code, block.source) from e

            blocks.append({"kind": "code", "source": block.source, "output": buffer.getvalue().rstrip("\n")})
        results.append({"title": section.title, "blocks": blocks})

    return results


def render_html(sections=None, title=TITLE) -> str:
    """Run the tutorial and return the page as an HTML string."""
    env = Environment(autoescape=True)
    template = env.from_string(REPORT_TEMPLATE)
    return template.render(title=title, sections=run_snippets(sections))


def render_report(path=None, sections=None) -> str:
    """
    Run the tutorial and write the HTML page to ``path``.

    Args:
        path (str): output file. Default: ``Config().REPORT_PATH``, then
            ``loopless.html``.
        sections (list): ``Section`` objects, default ``tutorial.SECTIONS``.

    Returns:
        str: the path written.
    """
    config = Config()
    logging.getLogger("loopless").setLevel(config.get("LOG_LEVEL", "WARNING"))

    path = path or config.get("REPORT_PATH", None) or "loopless.html"
    html = render_html(sections)

    with open(path, "w", encoding="utf-8") as fh:
        fh.write(html)

    _logger.info("Wrote tutorial to %r", path)
    return path
