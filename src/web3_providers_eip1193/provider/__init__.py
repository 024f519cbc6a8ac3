"""Provider adapter components for wrapping EIP-1193 clients."""

from .config import ProviderConfig
from .eip1193 import (
    Eip1193Client,
    ProviderEventListener,
    Web3ProvidersEip1193,
    is_eip1193_client,
)
from .errors import PACKAGE_ERRORS, Web3CoreLogger, Web3Error

__all__ = [
    # Adapter
    "Web3ProvidersEip1193",
    "Eip1193Client",
    "ProviderEventListener",
    "is_eip1193_client",
    "ProviderConfig",
    # Errors
    "Web3Error",
    "Web3CoreLogger",
    "PACKAGE_ERRORS",
]
