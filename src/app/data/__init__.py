"""Data access layer: remote function client, retry policy, object storage."""

from .remote import (
    HttpFunctionClient,
    InvocationResponse,
    RemoteFunctionClient,
    build_envelope,
    validate_invocation_response,
)
from .retry import RetryPolicy
from .storage import FileSystemObjectStore, ObjectStore

__all__ = [
    "HttpFunctionClient",
    "InvocationResponse",
    "RemoteFunctionClient",
    "build_envelope",
    "validate_invocation_response",
    "RetryPolicy",
    "FileSystemObjectStore",
    "ObjectStore",
]
