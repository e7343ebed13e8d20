import json

from sm_mock.errors import INTERNAL_ERROR, INVALID_PAYLOAD
from sm_mock.models import Offering
from sm_mock.responses import error_envelope, list_envelope, respond, respond_error


def test_list_envelope_counts_items():
    env = list_envelope(iter([{"id": "a"}, {"id": "b"}, {"id": "c"}]))

    assert env["total_items"] == 3
    assert len(env["items"]) == 3


def test_list_envelope_empty():
    assert list_envelope([]) == {"items": [], "total_items": 0}


def test_error_envelope_shape():
    assert error_envelope(INVALID_PAYLOAD, description="bad") == {
        "error": "Invalid request payload",
        "description": "bad",
    }
    assert error_envelope(INTERNAL_ERROR)["description"] == INTERNAL_ERROR.default_description


def test_respond_serializes_records_inside_envelopes():
    resp = respond(list_envelope([Offering(id="x", name="n")]))

    body = json.loads(resp.body)
    assert resp.status_code == 200
    assert resp.media_type == "application/json"
    assert body["items"][0]["id"] == "x"
    assert body["items"][0]["created_at"] is None


def test_respond_unserializable_body_becomes_500():
    resp = respond({"value": object()}, status_code=201)

    assert resp.status_code == 500
    assert json.loads(resp.body) == error_envelope(INTERNAL_ERROR)


def test_respond_nan_becomes_500():
    resp = respond({"value": float("nan")})

    assert resp.status_code == 500
    assert "nan" not in resp.body.decode().lower()


def test_respond_error_status():
    resp = respond_error(INVALID_PAYLOAD, 400, description="boom")

    assert resp.status_code == 400
    assert json.loads(resp.body)["description"] == "boom"
