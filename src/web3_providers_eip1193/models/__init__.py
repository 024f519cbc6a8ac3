"""Web3 EIP-1193 models - request, response, event and error descriptions."""

from .rpc import (
    ErrorDefinition,
    JsonRpcError,
    JsonRpcResponse,
    PackageInfo,
    # Events
    ProviderEvent,
    # Request/response
    RequestArguments,
)

__all__ = [
    "ProviderEvent",
    "RequestArguments",
    "JsonRpcResponse",
    "JsonRpcError",
    "PackageInfo",
    "ErrorDefinition",
]
