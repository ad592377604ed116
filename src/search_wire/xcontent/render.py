"""Render renderable objects into finished documents or JSON bytes."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from search_wire.config import get_settings
from search_wire.observability.metrics import RENDER_COUNT
from search_wire.observability.tracing import create_span
from search_wire.xcontent.builder import EMPTY_PARAMS, DocumentBuilder, Params, dumps, param_as_bool


logger = logging.getLogger(__name__)


@runtime_checkable
class Renderable(Protocol):
    """Anything that can write itself into a ``DocumentBuilder``."""

    def render(self, builder: DocumentBuilder, params: Params) -> None:  # pragma: no cover - interface definition
        ...


def render_document(renderable: Renderable, params: Params | None = None) -> Any:
    """Render into a fresh builder and return the root node.

    Failures from the builder or from nested renderables propagate unchanged.
    """
    active_params = params if params is not None else EMPTY_PARAMS
    name = type(renderable).__name__
    builder = DocumentBuilder()

    with create_span("document.render", attributes={"renderable": name}):
        try:
            renderable.render(builder, active_params)
            document = builder.build()
        except Exception:
            RENDER_COUNT.labels(renderable=name, status="error").inc()
            raise

    RENDER_COUNT.labels(renderable=name, status="ok").inc()
    logger.debug("Rendered %s document", name)
    return document


def render_json(renderable: Renderable, params: Params | None = None, *, pretty: bool | None = None) -> bytes:
    """Render to JSON bytes; repeated keys are written as-is."""
    active_params = params if params is not None else EMPTY_PARAMS
    if pretty is None:
        pretty = param_as_bool(active_params, "pretty", get_settings().pretty_json)
    return dumps(render_document(renderable, active_params), pretty=pretty)
