"""Bitacora renderers.

Renderers convert a Changelog into an output format.

Available Renderers:
- MarkdownRenderer: Renders Keep a Changelog Markdown using LineBuilder

Thread Safety:
All renderers use a LineBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from bitacora.renderers.markdown import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
