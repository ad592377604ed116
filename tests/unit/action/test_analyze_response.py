"""Unit tests for AnalyzeResponse and AnalyzeToken."""

import pytest

from search_wire.action import AnalyzeResponse, AnalyzeToken
from search_wire.errors import MalformedStream
from search_wire.streams import StreamInput, StreamOutput
from search_wire.xcontent import render_json


@pytest.fixture
def response():
    return AnalyzeResponse(
        tokens=[
            AnalyzeToken("quick", 4, 9, 1, "<ALPHANUM>"),
            AnalyzeToken("fox", 10, 13, 2),
        ]
    )


@pytest.mark.unit
class TestAnalyzeResponse:
    def test_iteration_and_terms(self, response):
        assert len(response) == 2
        assert [token.position for token in response] == [1, 2]
        assert response.terms() == ["quick", "fox"]

    def test_round_trip(self, response):
        out = StreamOutput()
        response.write_to(out)

        decoded = AnalyzeResponse.read_from(StreamInput(out.getvalue()))

        assert decoded == response
        assert decoded.tokens[1].type is None

    def test_token_layout(self):
        out = StreamOutput()
        AnalyzeToken("ab", 0, 2, 0).write_to(out)

        assert out.getvalue() == b"\x02ab\x00\x00\x00\x00\x00\x00\x00\x02\x00\x00"

    def test_truncated_token(self):
        with pytest.raises(MalformedStream):
            AnalyzeResponse.read_from(StreamInput(b"\x01\x02ab\x00\x00"))

    def test_render_omits_missing_type(self, response):
        assert render_json(response) == (
            b'{"tokens":['
            b'{"token":"quick","start_offset":4,"end_offset":9,"type":"<ALPHANUM>","position":1},'
            b'{"token":"fox","start_offset":10,"end_offset":13,"position":2}'
            b"]}"
        )

    def test_render_empty(self):
        assert render_json(AnalyzeResponse()) == b'{"tokens":[]}'
