"""
Remote function invocation.

All reads of upstream services (defects, test stations, trailers, test
results, technical records) go through a :class:`RemoteFunctionClient`.
The envelope sent to a function mimics an API-gateway proxy event; the
function answers with ``{"statusCode": ..., "body": "<json string>"}``.

Testability: pass a fake client implementing ``invoke`` to the repositories,
or a mock ``session`` to :class:`HttpFunctionClient`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

import requests

from src.app.errors import BadUpstreamDataError, TransientUpstreamError

logger = logging.getLogger(__name__)

_INVOKE_PATH = "/2015-03-31/functions/{name}/invocations"
_DEFAULT_TIMEOUT = 30

INVOCATION_ERROR = "Lambda invocation returned error:"
EMPTY_PAYLOAD = "with empty payload."
INVOCATION_BAD_DATA = "Lambda invocation returned bad data:"


@dataclass(slots=True, frozen=True)
class InvocationResponse:
    """Raw answer of a function invocation."""

    status_code: int
    payload: bytes | str | None = None

    def text(self) -> str:
        if self.payload is None:
            return ""
        if isinstance(self.payload, bytes):
            return self.payload.decode("utf-8")
        return self.payload


class RemoteFunctionClient(Protocol):
    def invoke(self, function_name: str, envelope: Mapping[str, Any]) -> InvocationResponse:
        ...


def build_envelope(
    method: str,
    path: str,
    *,
    path_parameters: Mapping[str, Any] | None = None,
    query: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return the proxy-style event sent to a function."""

    envelope: dict[str, Any] = {"httpMethod": method, "path": path}
    if path_parameters is not None:
        envelope["pathParameters"] = dict(path_parameters)
    if query is not None:
        envelope["queryStringParameters"] = dict(query)
    return envelope


def encode_envelope(envelope: Mapping[str, Any]) -> bytes:
    return json.dumps(envelope).encode("utf-8")


def parse_payload(response: InvocationResponse) -> dict[str, Any]:
    """Decode the JSON payload, raising when it is missing or not an object."""

    raw = response.text()
    if not raw:
        raise TransientUpstreamError(f"{INVOCATION_ERROR} {response.status_code} {EMPTY_PAYLOAD}")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise BadUpstreamDataError(f"{INVOCATION_BAD_DATA} {raw}.") from exc
    if not isinstance(payload, dict):
        raise BadUpstreamDataError(f"{INVOCATION_BAD_DATA} {raw}.")
    return payload


def validate_invocation_response(response: InvocationResponse) -> dict[str, Any]:
    """Return ``{"statusCode", "body"}`` of a successful invocation.

    Raises:
        TransientUpstreamError: the transport failed, the payload is empty or
            the function answered with a status code of 400 or more.
        BadUpstreamDataError: the function answered without a body.
    """

    if response.status_code >= 400 or not response.text():
        raise TransientUpstreamError(f"{INVOCATION_ERROR} {response.status_code} {EMPTY_PAYLOAD}")

    payload = parse_payload(response)
    status = int(payload.get("statusCode") or 0)
    if status >= 400:
        raise TransientUpstreamError(f"{INVOCATION_ERROR} {status} {payload.get('body')}")

    if not payload.get("body"):
        raise BadUpstreamDataError(f"{INVOCATION_BAD_DATA} {json.dumps(payload)}.")

    return {"statusCode": status, "body": payload["body"]}


def decode_body(payload: Mapping[str, Any]) -> Any:
    """Parse the JSON string carried in a validated payload's ``body``."""

    body = payload.get("body")
    if body is None:
        raise BadUpstreamDataError(f"{INVOCATION_BAD_DATA} {json.dumps(dict(payload))}.")
    if isinstance(body, (str, bytes)):
        try:
            return json.loads(body)
        except json.JSONDecodeError as exc:
            raise BadUpstreamDataError(f"{INVOCATION_BAD_DATA} {body!r}.") from exc
    return body


class HttpFunctionClient:
    """Invoke functions over HTTP through a ``requests.Session``.

    Pass a custom ``session`` in tests to intercept calls without making
    real network requests.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = _DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self._session: requests.Session | None = session

    @property
    def session(self) -> requests.Session:
        """Return (or lazily create) the requests.Session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def invoke(self, function_name: str, envelope: Mapping[str, Any]) -> InvocationResponse:
        url = self.endpoint + _INVOKE_PATH.format(name=function_name)
        try:
            resp = self.session.post(
                url,
                data=encode_envelope(envelope),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            logger.warning("Function invocation timed out function=%s path=%s", function_name, envelope.get("path"))
            raise TransientUpstreamError(f"{INVOCATION_ERROR} timeout calling {function_name}") from exc
        except requests.RequestException as exc:
            logger.warning(
                "Function invocation network error function=%s path=%s error=%s",
                function_name,
                envelope.get("path"),
                exc,
            )
            raise TransientUpstreamError(f"{INVOCATION_ERROR} {exc}") from exc

        logger.debug("Invoked function=%s path=%s status=%d", function_name, envelope.get("path"), resp.status_code)
        return InvocationResponse(status_code=resp.status_code, payload=resp.content)


__all__ = [
    "InvocationResponse",
    "RemoteFunctionClient",
    "HttpFunctionClient",
    "build_envelope",
    "encode_envelope",
    "parse_payload",
    "validate_invocation_response",
    "decode_body",
]
