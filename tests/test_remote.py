from __future__ import annotations

import json

import pytest
import requests

from src.app.data.remote import (
    HttpFunctionClient,
    InvocationResponse,
    build_envelope,
    decode_body,
    validate_invocation_response,
)
from src.app.errors import BadUpstreamDataError, TransientUpstreamError


class _Response:
    def __init__(self, status_code: int, content: bytes) -> None:
        self.status_code = status_code
        self.content = content


class _Session:
    def __init__(self, response: _Response | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.posts: list[dict] = []

    def post(self, url: str, **kwargs) -> _Response:
        self.posts.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def _payload(status: int, body: object) -> str:
    return json.dumps({"statusCode": status, "body": body})


def test_build_envelope_only_includes_given_parts() -> None:
    assert build_envelope("GET", "/defects/") == {"httpMethod": "GET", "path": "/defects/"}
    envelope = build_envelope("GET", "/v1/trailers/X", path_parameters={"proxy": "/v1/trailers"}, query={"make": "M"})
    assert envelope["pathParameters"] == {"proxy": "/v1/trailers"}
    assert envelope["queryStringParameters"] == {"make": "M"}


def test_validate_invocation_response_success() -> None:
    response = InvocationResponse(200, _payload(200, json.dumps({"trn": "X"})))

    validated = validate_invocation_response(response)

    assert validated["statusCode"] == 200
    assert decode_body(validated) == {"trn": "X"}


def test_validate_invocation_response_rejects_transport_errors() -> None:
    with pytest.raises(TransientUpstreamError, match="Lambda invocation returned error: 502 with empty payload."):
        validate_invocation_response(InvocationResponse(502, b"oops"))
    with pytest.raises(TransientUpstreamError):
        validate_invocation_response(InvocationResponse(200, None))


def test_validate_invocation_response_rejects_function_errors() -> None:
    with pytest.raises(TransientUpstreamError, match="404"):
        validate_invocation_response(InvocationResponse(200, _payload(404, "missing")))


def test_validate_invocation_response_requires_body() -> None:
    with pytest.raises(BadUpstreamDataError):
        validate_invocation_response(InvocationResponse(200, json.dumps({"statusCode": 200})))


def test_validate_invocation_response_rejects_non_json() -> None:
    with pytest.raises(BadUpstreamDataError):
        validate_invocation_response(InvocationResponse(200, "not json"))


def test_decode_body_rejects_missing_body() -> None:
    with pytest.raises(BadUpstreamDataError):
        decode_body({"statusCode": 200})


def test_http_client_posts_envelope() -> None:
    session = _Session(_Response(200, _payload(200, "[]").encode("utf-8")))
    client = HttpFunctionClient("http://lambda.local/", timeout=5, session=session)

    response = client.invoke("cvs-svc-defects", build_envelope("GET", "/defects/"))

    assert response.status_code == 200
    assert json.loads(response.text())["body"] == "[]"
    post = session.posts[0]
    assert post["url"] == "http://lambda.local/2015-03-31/functions/cvs-svc-defects/invocations"
    assert json.loads(post["data"]) == {"httpMethod": "GET", "path": "/defects/"}
    assert post["timeout"] == 5


def test_http_client_maps_timeouts_to_transient_errors() -> None:
    client = HttpFunctionClient("http://lambda.local", session=_Session(error=requests.Timeout("slow")))

    with pytest.raises(TransientUpstreamError, match="timeout"):
        client.invoke("cvs-svc-defects", build_envelope("GET", "/defects/"))


def test_http_client_maps_connection_errors_to_transient_errors() -> None:
    client = HttpFunctionClient("http://lambda.local", session=_Session(error=requests.ConnectionError("refused")))

    with pytest.raises(TransientUpstreamError, match="refused"):
        client.invoke("cvs-svc-defects", build_envelope("GET", "/defects/"))
