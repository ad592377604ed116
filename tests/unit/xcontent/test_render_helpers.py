"""Unit tests for render_document/render_json."""

from prometheus_client import REGISTRY
import pytest

from search_wire.query import bool_filter, match_all_filter
from search_wire.xcontent import DocumentObject, Renderable, render_document, render_json


def _render_count(renderable: str, status: str) -> float:
    return REGISTRY.get_sample_value("search_wire_render_total", {"renderable": renderable, "status": status}) or 0.0


class _ParamsEcho:
    def __init__(self):
        self.seen = []

    def render(self, builder, params):
        self.seen.append(params)
        builder.start_object()
        builder.field("mode", params.get("mode"))
        builder.end_object()


class _Exploding:
    def render(self, builder, params):
        raise ValueError("boom")


@pytest.mark.unit
class TestRenderDocument:
    def test_returns_root_object(self):
        document = render_document(match_all_filter())

        assert isinstance(document, DocumentObject)
        assert document.keys() == ["match_all"]

    def test_params_reach_nested_renderables(self):
        echo = _ParamsEcho()
        params = {"mode": "strict"}

        data = render_json(bool_filter().must(echo).should(echo), params)

        assert data == b'{"bool":{"must":{"mode":"strict"},"should":{"mode":"strict"}}}'
        assert echo.seen == [params, params]

    def test_default_params_are_empty(self):
        echo = _ParamsEcho()

        render_document(echo)

        assert dict(echo.seen[0]) == {}

    def test_nested_failure_propagates_unchanged_and_is_counted(self):
        before = _render_count("BoolFilterBuilder", "error")

        with pytest.raises(ValueError, match="boom"):
            render_document(bool_filter().must(_Exploding()))

        assert _render_count("BoolFilterBuilder", "error") == before + 1

    def test_success_is_counted(self):
        before = _render_count("MatchAllFilterBuilder", "ok")

        render_document(match_all_filter())

        assert _render_count("MatchAllFilterBuilder", "ok") == before + 1

    def test_protocol_is_structural(self):
        assert isinstance(_ParamsEcho(), Renderable)
        assert not isinstance(object(), Renderable)


@pytest.mark.unit
class TestRenderJsonPretty:
    def test_pretty_from_params(self):
        assert render_json(match_all_filter(), {"pretty": "true"}) == b'{\n  "match_all": {}\n}'

    def test_pretty_from_settings(self, monkeypatch):
        from search_wire.config import get_settings

        monkeypatch.setenv("SEARCH_WIRE_PRETTY_JSON", "true")
        get_settings.cache_clear()

        assert render_json(match_all_filter()) == b'{\n  "match_all": {}\n}'

    def test_explicit_argument_wins(self):
        assert render_json(match_all_filter(), {"pretty": "true"}, pretty=False) == b'{"match_all":{}}'
