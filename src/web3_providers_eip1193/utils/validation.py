"""Validation utilities for the web3 EIP-1193 provider."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_config(config: dict[str, Any], config_class: type[ModelT]) -> ModelT:
    """Validate configuration data against a Pydantic model.

    Args:
        config: Configuration dictionary to validate
        config_class: Pydantic model class to validate against

    Returns:
        Validated configuration instance

    Raises:
        ValueError: If validation fails
    """
    try:
        return config_class.model_validate(config)
    except ValidationError as e:
        raise ValueError(f"Configuration validation failed: {e}") from e


def validate_request(
    request: dict[str, Any], request_class: type[ModelT]
) -> ModelT:
    """Validate request data against a Pydantic model.

    Args:
        request: Request dictionary to validate
        request_class: Pydantic model class to validate against

    Returns:
        Validated request instance

    Raises:
        ValueError: If validation fails
    """
    try:
        return request_class.model_validate(request)
    except ValidationError as e:
        raise ValueError(f"Request validation failed: {e}") from e
