"""Structured errors raised by the provider package."""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from ..models.rpc import ErrorDefinition, PackageInfo

logger = logging.getLogger(__name__)

INVALID_CLIENT = "invalidClient"

PACKAGE_ERRORS: dict[str, ErrorDefinition] = {
    INVALID_CLIENT: ErrorDefinition(
        code=1, msg="Provided web3Client is an invalid EIP-1193 client"
    ),
}


class Web3Error(Exception):
    """Error carrying the identity of the package that raised it.

    The string form lists every field on its own line so the error can be
    matched verbatim by callers and log scrapers.
    """

    def __init__(
        self,
        package: PackageInfo,
        code: int,
        name: str,
        msg: str,
        params: dict[str, Any] | None = None,
    ) -> None:
        self.logger_version = package.logger_version
        self.package_name = package.package_name
        self.package_version = package.package_version
        self.code = code
        self.name = name
        self.msg = msg
        self.params = params or {}
        super().__init__(self.format())

    def __reduce__(self) -> tuple[Any, ...]:
        package = PackageInfo(
            package_name=self.package_name,
            package_version=self.package_version,
            logger_version=self.logger_version,
        )
        return (
            self.__class__,
            (package, self.code, self.name, self.msg, self.params),
        )

    def format(self) -> str:
        """Render the error as newline separated ``key: value`` lines."""
        return "\n".join(
            [
                f"loggerVersion: {self.logger_version}",
                f"packageName: {self.package_name}",
                f"packageVersion: {self.package_version}",
                f"code: {self.code}",
                f"name: {self.name}",
                f"msg: {self.msg}",
                f"params: {serialize_params(self.params)}",
            ]
        )


CIRCULAR = "[Circular]"


def _to_json_compatible(value: Any, ancestors: frozenset[int] = frozenset()) -> Any:
    # Callables are dropped from objects and become null in sequences.
    # A container already on the current path is rendered as CIRCULAR.
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, type):
        return repr(value)
    if id(value) in ancestors:
        return CIRCULAR

    path = ancestors | {id(value)}
    if isinstance(value, Mapping):
        return {
            str(key): _to_json_compatible(item, path)
            for key, item in value.items()
            if not callable(item)
        }
    if isinstance(value, list | tuple | set | frozenset):
        return [
            None if callable(item) else _to_json_compatible(item, path)
            for item in value
        ]
    if hasattr(value, "__dict__"):
        return {
            key: _to_json_compatible(item, path)
            for key, item in vars(value).items()
            if not key.startswith("_") and not callable(item)
        }
    return repr(value)


def serialize_params(params: dict[str, Any]) -> str:
    """Serialize error params to compact JSON.

    Arbitrary objects are reduced to their public, non-callable attributes and
    back-references are replaced by ``"[Circular]"``. Params that still cannot
    be rendered fall back to a JSON string holding their ``repr``.
    """
    try:
        return json.dumps(_to_json_compatible(params), separators=(",", ":"))
    except Exception as e:
        logger.debug(f"Falling back to repr for error params: {e}")
        return json.dumps(repr(params))


class Web3CoreLogger:
    """Builds :class:`Web3Error` instances from a catalogue of known errors."""

    def __init__(
        self,
        package_errors: Mapping[str, ErrorDefinition],
        package: PackageInfo | None = None,
    ) -> None:
        self.package_errors = dict(package_errors)
        self.package = package or PackageInfo()

    def make_error(self, name: str, params: dict[str, Any] | None = None) -> Web3Error:
        """Create the error registered under ``name``.

        Args:
            name: Symbolic error name (e.g., "invalidClient")
            params: Values describing what caused the error

        Returns:
            Web3Error: The error, ready to be raised

        Raises:
            KeyError: If ``name`` is not in the error catalogue
        """
        try:
            definition = self.package_errors[name]
        except KeyError:
            raise KeyError(
                f"Unknown error name for {self.package.package_name}: {name}"
            ) from None

        return Web3Error(
            self.package,
            code=definition.code,
            name=name,
            msg=definition.msg,
            params=params,
        )
