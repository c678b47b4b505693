"""Shared plumbing for repositories backed by remote functions."""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from src.app.data.remote import INVOCATION_BAD_DATA, RemoteFunctionClient, decode_body, validate_invocation_response
from src.app.data.retry import RetryPolicy
from src.app.errors import BadUpstreamDataError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_model(model: type[ModelT], body: Any) -> ModelT:
    """Validate one upstream object, reporting malformed data as ``BadUpstreamDataError``."""

    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise BadUpstreamDataError(
            f"{INVOCATION_BAD_DATA} {model.__name__}: {exc.error_count()} invalid field(s)."
        ) from exc


def parse_models(model: type[ModelT], body: Any) -> list[ModelT]:
    """Validate a list of upstream objects; anything but a list is bad data."""

    if not isinstance(body, list):
        raise BadUpstreamDataError(
            f"{INVOCATION_BAD_DATA} expected a list of {model.__name__}, got {type(body).__name__}."
        )
    return [parse_model(model, item) for item in body]


class FunctionRepository:
    """Invoke one named function and decode the JSON body it returns."""

    def __init__(
        self,
        client: RemoteFunctionClient,
        function_name: str,
        *,
        retry: RetryPolicy | None = None,
    ) -> None:
        self.client = client
        self.function_name = function_name
        self.retry = retry or RetryPolicy()

    def fetch(self, envelope: Mapping[str, Any]) -> Any:
        logger.debug(
            "Invoking %s %s",
            envelope.get("httpMethod"),
            envelope.get("path"),
            extra={"function_name": self.function_name},
        )
        response = self.client.invoke(self.function_name, envelope)
        return decode_body(validate_invocation_response(response))


__all__ = ["FunctionRepository", "parse_model", "parse_models"]
