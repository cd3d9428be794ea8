"""Tests for telemetry capture."""

import time
from types import SimpleNamespace

from starlette.datastructures import Headers

from typeauth.auth import build_telemetry

from helpers import make_request


def test_captures_request_snapshot():
    request = make_request(
        headers={"Authorization": "Bearer t", "CF-Connecting-IP": "203.0.113.7"},
        url="https://app.example.com/items?page=2",
        method="POST",
    )

    before = int(time.time() * 1000)
    telemetry = build_telemetry(request)
    after = int(time.time() * 1000)

    assert telemetry.url == "https://app.example.com/items?page=2"
    assert telemetry.method == "POST"
    assert telemetry.headers["authorization"] == "Bearer t"
    assert telemetry.headers["cf-connecting-ip"] == "203.0.113.7"
    assert telemetry.ipaddress == "203.0.113.7"
    assert before <= telemetry.timestamp <= after


def test_missing_client_ip_is_empty_string():
    telemetry = build_telemetry(make_request(headers={"Accept": "*/*"}))

    assert telemetry.ipaddress == ""
    assert telemetry.headers["accept"] == "*/*"


def test_wire_field_names():
    telemetry = build_telemetry(make_request())

    assert set(telemetry.model_dump()) == {"url", "method", "headers", "ipaddress", "timestamp"}


def test_starlette_headers_keep_latin1_values_and_join_repeats():
    headers = Headers(
        raw=[
            (b"x-name", "Jos\xc3\xa9".encode("latin-1")),
            (b"accept", b"text/html"),
            (b"accept", b"application/json"),
            (b"cf-connecting-ip", b"192.0.2.10"),
        ]
    )
    request = SimpleNamespace(method="GET", url="http://testserver/items", headers=headers)

    telemetry = build_telemetry(request)

    assert telemetry.headers["x-name"] == "Jos\xc3\xa9"
    assert telemetry.headers["accept"] == "text/html, application/json"
    assert telemetry.ipaddress == "192.0.2.10"
