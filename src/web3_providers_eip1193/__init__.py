"""Web3 Providers EIP-1193 - validating adapter for EIP-1193 clients.

Wraps any object exposing an async ``request`` method and an ``on`` event
registration method, checks that shape up front, passes requests through
unchanged and re-delivers client events as a single list argument.

Installation extras:
  - cli: Command-line interface
  - test: Test dependencies
"""

# Core models
from .models import (
    ErrorDefinition,
    JsonRpcError,
    JsonRpcResponse,
    PackageInfo,
    ProviderEvent,
    RequestArguments,
)

# Adapter and errors
from .provider import (
    PACKAGE_ERRORS,
    Eip1193Client,
    ProviderConfig,
    ProviderEventListener,
    Web3CoreLogger,
    Web3Error,
    Web3ProvidersEip1193,
    is_eip1193_client,
)

__version__ = "1.0.0a0"

__all__ = [
    "__version__",
    # Core data models
    "ErrorDefinition",
    "JsonRpcError",
    "JsonRpcResponse",
    "PackageInfo",
    "ProviderEvent",
    "RequestArguments",
    # Adapter
    "Eip1193Client",
    "ProviderConfig",
    "ProviderEventListener",
    "Web3ProvidersEip1193",
    "is_eip1193_client",
    # Errors
    "PACKAGE_ERRORS",
    "Web3CoreLogger",
    "Web3Error",
]

# Package metadata
__title__ = "web3-providers-eip1193"
__description__ = "Validating adapter exposing EIP-1193 clients behind one interface"
__license__ = "LGPL-3.0"
