from __future__ import annotations

from .annotator import annotate_source, name_anonymous_functions
from .codegen import generate
from .js_parser import parse

__all__ = [
    "annotate_source",
    "name_anonymous_functions",
    "generate",
    "parse",
]
