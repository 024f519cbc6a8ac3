"""Utility functions and helpers for the web3 EIP-1193 provider."""

from .logging import setup_logging
from .validation import validate_config, validate_request

__all__ = ["setup_logging", "validate_request", "validate_config"]
