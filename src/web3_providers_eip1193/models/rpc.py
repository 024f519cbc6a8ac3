"""Core RPC and event models shared by EIP-1193 providers."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ProviderEvent(str, Enum):
    """Event names a provider may emit."""

    CONNECT = "connect"
    DISCONNECT = "disconnect"
    CHAIN_CHANGED = "chainChanged"
    ACCOUNTS_CHANGED = "accountsChanged"
    MESSAGE = "message"


class RequestArguments(BaseModel):
    """Arguments of a single provider request."""

    model_config = ConfigDict(extra="allow")

    method: str = Field(..., description="JSON-RPC method name (e.g., 'eth_chainId')")
    params: list[Any] | dict[str, Any] | None = Field(
        default=None, description="Positional or named method parameters"
    )

    @field_validator("method")
    @classmethod
    def validate_method(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Method name cannot be empty")
        return v


class JsonRpcError(BaseModel):
    """Error member of a JSON-RPC response."""

    code: int = Field(..., description="JSON-RPC error code")
    message: str = Field(..., description="Short error description")
    data: Any = Field(default=None, description="Additional error information")


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response record."""

    id: int | str | None = Field(..., description="Identifier of the request")
    jsonrpc: Literal["2.0"] = Field(default="2.0", description="Protocol version")
    result: Any = Field(default=None, description="Result on success")
    error: JsonRpcError | None = Field(default=None, description="Error on failure")

    @model_validator(mode="after")
    def validate_result_or_error(self) -> "JsonRpcResponse":
        if self.error is not None and self.result is not None:
            raise ValueError("Response cannot carry both a result and an error")
        return self

    @property
    def is_error(self) -> bool:
        return self.error is not None


class PackageInfo(BaseModel):
    """Identity stamped on every error raised by a package."""

    package_name: str = Field(
        default="web3-providers-eip1193", description="Name of the reporting package"
    )
    package_version: str = Field(
        default="1.0.0-alpha.0", description="Version of the reporting package"
    )
    logger_version: str = Field(
        default="1.0.0-alpha.0", description="Version of the error logger contract"
    )


class ErrorDefinition(BaseModel):
    """A catalogued error: numeric code plus human-readable message."""

    code: int = Field(..., description="Numeric error code")
    msg: str = Field(..., description="Human-readable error message")
