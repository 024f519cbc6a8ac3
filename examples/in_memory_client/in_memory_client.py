"""In-memory EIP-1193 client for the web3 EIP-1193 provider adapter.

This client answers a handful of read-only methods from local state and emits
the standard provider events when that state changes. It is handy for trying
the adapter and the CLI without a node:

    web3-eip1193 request in_memory_client:create_in_memory_client eth_chainId
"""

import asyncio
import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

from web3_providers_eip1193 import ProviderEvent, Web3ProvidersEip1193

logger = logging.getLogger(__name__)


class InMemoryClient:
    """EIP-1193 client backed by a small in-memory chain state."""

    def __init__(self, chain_id: int = 1, accounts: list[str] | None = None) -> None:
        self.chain_id = chain_id
        self.accounts = accounts or []
        self.block_number = 0
        self._listeners: dict[str, list[Callable[..., Any]]] = defaultdict(list)
        self._request_id = 0

    async def request(self, args: dict[str, Any]) -> dict[str, Any]:
        self._request_id += 1
        handlers: dict[str, Callable[[], Any]] = {
            "eth_chainId": lambda: hex(self.chain_id),
            "eth_accounts": lambda: list(self.accounts),
            "eth_blockNumber": lambda: hex(self.block_number),
        }

        method = args["method"]
        if method not in handlers:
            return {
                "id": self._request_id,
                "jsonrpc": "2.0",
                "error": {"code": -32601, "message": f"Method not found: {method}"},
            }

        await asyncio.sleep(0)
        return {"id": self._request_id, "jsonrpc": "2.0", "result": handlers[method]()}

    def on(self, event_name: str, listener: Callable[..., Any]) -> "InMemoryClient":
        self._listeners[event_name].append(listener)
        return self

    def remove_listener(
        self, event_name: str, listener: Callable[..., Any]
    ) -> "InMemoryClient":
        if listener in self._listeners[event_name]:
            self._listeners[event_name].remove(listener)
        return self

    def emit(self, event_name: str, *args: Any) -> bool:
        listeners = list(self._listeners[event_name])
        for listener in listeners:
            listener(*args)
        return bool(listeners)

    # State changes

    def switch_chain(self, chain_id: int) -> None:
        self.chain_id = chain_id
        self.emit(ProviderEvent.CHAIN_CHANGED.value, hex(chain_id))

    def set_accounts(self, accounts: list[str]) -> None:
        self.accounts = list(accounts)
        self.emit(ProviderEvent.ACCOUNTS_CHANGED.value, list(accounts))

    def mine(self) -> None:
        self.block_number += 1
        self.emit(
            ProviderEvent.MESSAGE.value,
            "eth_subscription",
            {"blockNumber": hex(self.block_number)},
        )


def create_in_memory_client() -> InMemoryClient:
    """Factory used by the CLI."""
    return InMemoryClient(chain_id=1, accounts=["0x" + "ab" * 20])


async def main() -> None:
    logging.basicConfig(level=logging.INFO)

    client = create_in_memory_client()
    provider = Web3ProvidersEip1193(client)

    provider.on(
        ProviderEvent.CHAIN_CHANGED, lambda values: logger.info(f"chain {values}")
    )
    provider.on(ProviderEvent.MESSAGE, lambda values: logger.info(f"message {values}"))

    logger.info(await provider.request({"method": "eth_chainId"}))
    client.switch_chain(5)
    client.mine()
    logger.info(await provider.request({"method": "eth_blockNumber"}))


if __name__ == "__main__":
    asyncio.run(main())
