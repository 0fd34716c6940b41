import pytest

from linobase.services import (
    FrameGraphRequest,
    FrameGraphResponse,
    RequestParamRequest,
    RequestParamResponse,
)


def test_request_param_request_wire_form():
    assert RequestParamRequest("ab").serialize() == b"\x02\x00\x00\x00ab"


def test_request_param_request_round_trip():
    request = RequestParamRequest("/lino_base/wheel_diameter")
    assert RequestParamRequest.deserialize(request.serialize()) == request


def test_empty_response_wire_form():
    assert RequestParamResponse().serialize() == bytes(12)


def test_response_round_trip():
    response = RequestParamResponse(
        ints=[1, -7, 2147483647],
        floats=[0.25, -1.5],
        strings=["left", "right", ""],
    )
    assert RequestParamResponse.deserialize(response.serialize()) == response


def test_response_int_out_of_range():
    with pytest.raises(ValueError):
        RequestParamResponse(ints=[2**31]).serialize()


def test_response_truncated():
    data = RequestParamResponse(strings=["motor"]).serialize()
    with pytest.raises(ValueError):
        RequestParamResponse.deserialize(data[:-2])


def test_frame_graph_request_is_empty():
    assert FrameGraphRequest().serialize() == b""
    assert FrameGraphRequest.deserialize(b"") == FrameGraphRequest()


def test_frame_graph_response_round_trip():
    response = FrameGraphResponse('digraph G { "odom" -> "base_link"; }')
    assert FrameGraphResponse.deserialize(response.serialize()) == response


def test_frame_graph_response_length_prefix():
    text = "digraph G {}"
    data = FrameGraphResponse(text).serialize()
    assert int.from_bytes(data[:4], "little") == len(text)
    assert data[4:].decode() == text