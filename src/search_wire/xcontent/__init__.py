"""Structured document building and rendering."""

from search_wire.xcontent.builder import (
    EMPTY_PARAMS,
    DocumentBuilder,
    DocumentObject,
    Params,
    dumps,
    param_as_bool,
)
from search_wire.xcontent.render import Renderable, render_document, render_json


__all__ = [
    "EMPTY_PARAMS",
    "DocumentBuilder",
    "DocumentObject",
    "Params",
    "Renderable",
    "dumps",
    "param_as_bool",
    "render_document",
    "render_json",
]
