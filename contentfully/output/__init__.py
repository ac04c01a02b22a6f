"""Output helpers: rich text HTML rendering and JSON serialization."""

from contentfully.output.html_renderer import HTMLRenderer, render_document
from contentfully.output.json_dumper import dump_models, dumps, to_serializable

__all__ = ['HTMLRenderer', 'dump_models', 'dumps', 'render_document', 'to_serializable']
