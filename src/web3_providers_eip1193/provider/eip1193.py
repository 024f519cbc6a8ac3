"""Adapter wrapping any EIP-1193 client behind a validated, normalized surface."""

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from ..models.rpc import PackageInfo, ProviderEvent, RequestArguments
from .config import ProviderConfig
from .errors import INVALID_CLIENT, PACKAGE_ERRORS, Web3CoreLogger

logger = logging.getLogger(__name__)

ProviderEventListener = Callable[[list[Any]], Any]
RequestArgs = RequestArguments | Mapping[str, Any]

REQUIRED_CAPABILITIES = ("request", "on")

# Tried in order when detaching forwarders from a replaced client
DETACH_METHODS = ("remove_listener", "removeListener", "off")


class Eip1193Client(Protocol):
    """Structural type of an EIP-1193 client.

    Any object with a callable ``request`` and a callable ``on`` qualifies;
    no base class is required. Mappings holding those two callables under the
    same keys are accepted too.
    """

    def request(self, args: Any) -> Any:
        ...

    def on(self, event_name: str, listener: Callable[..., Any]) -> Any:
        ...


def get_capability(candidate: Any, name: str) -> Any:
    """Look up a member of a client by key for mappings, else by attribute.

    Mapping subclasses that define the member as a method are found through
    the attribute lookup when no key of that name exists.
    """
    if isinstance(candidate, Mapping) and name in candidate:
        return candidate[name]
    return getattr(candidate, name, None)


def is_eip1193_client(candidate: Any) -> bool:
    """Return True if ``candidate`` exposes callable ``request`` and ``on``."""
    if candidate is None or isinstance(candidate, type):
        return False
    return all(
        callable(get_capability(candidate, name)) for name in REQUIRED_CAPABILITIES
    )


@dataclass
class _Registration:
    listener: ProviderEventListener
    once: bool = False


class Web3ProvidersEip1193:
    """Validating adapter around an EIP-1193 client.

    Requests are passed through to the installed client untouched. Events
    emitted by the client are re-delivered to listeners registered here, with
    all emitted values collapsed into a single list argument.
    """

    def __init__(
        self, web3_client: Eip1193Client, config: ProviderConfig | None = None
    ) -> None:
        """Initialize the adapter.

        Args:
            web3_client: Object implementing ``request`` and ``on``
            config: Adapter configuration (defaults to ProviderConfig())

        Raises:
            Web3Error: If web3_client is not a valid EIP-1193 client
        """
        self.config = config or ProviderConfig()
        self._listeners: dict[ProviderEvent, list[_Registration]] = {
            event: [] for event in ProviderEvent
        }

        self.validate_client(web3_client, self.config.package)
        self._forwarders: dict[ProviderEvent, Callable[..., None]] = {}
        self._forwarders = self._attach_event_listeners(web3_client)
        self._web3_client: Eip1193Client = web3_client

        logger.debug(f"Installed web3 client {type(web3_client).__name__}")

    @staticmethod
    def validate_client(web3_client: Any, package: PackageInfo | None = None) -> bool:
        """Check that an object can be used as an EIP-1193 client.

        Args:
            web3_client: Candidate client
            package: Identity to report in the error (defaults to PackageInfo())

        Returns:
            bool: True when the candidate is valid

        Raises:
            Web3Error: invalidClient, if the candidate is missing ``request`` or ``on``
        """
        if is_eip1193_client(web3_client):
            return True

        logger.warning(
            f"Rejected invalid EIP-1193 client of type {type(web3_client).__name__}"
        )
        raise Web3CoreLogger(PACKAGE_ERRORS, package).make_error(
            INVALID_CLIENT, {"web3Client": web3_client}
        )

    @property
    def web3_client(self) -> Eip1193Client:
        """The currently installed client."""
        return self._web3_client

    def set_web3_client(self, web3_client: Eip1193Client) -> None:
        """Replace the installed client.

        The new client receives fresh event forwarders before it is installed.
        If validation or attachment fails the previous client stays installed
        with its forwarding intact.

        Forwarders are removed from the previous client only when it offers
        ``remove_listener``, ``removeListener`` or ``off``. Otherwise they stay
        registered on it, inactive, and every reinstall of such a client adds
        another set of five; this is logged at INFO.

        Raises:
            Web3Error: If web3_client is not a valid EIP-1193 client
        """
        self.validate_client(web3_client, self.config.package)

        previous_client = self._web3_client
        previous_forwarders = self._forwarders

        forwarders = self._attach_event_listeners(web3_client)
        self._web3_client = web3_client
        self._forwarders = forwarders

        self._detach_event_listeners(previous_client, previous_forwarders)
        logger.info(
            f"Replaced web3 client {type(previous_client).__name__} "
            f"with {type(web3_client).__name__}"
        )

    async def request(self, args: RequestArgs) -> Any:
        """Send a request through the installed client.

        Args:
            args: Request arguments, passed to the client unmodified

        Returns:
            Whatever the client's ``request`` returns or resolves to
        """
        response = get_capability(self._web3_client, "request")(args)
        if inspect.isawaitable(response):
            return await response
        return response

    # Listener registration

    def on(
        self, event_name: ProviderEvent | str, listener: ProviderEventListener
    ) -> "Web3ProvidersEip1193":
        """Register a listener called with the list of values the client emits.

        Raises:
            ValueError: If event_name is not a known provider event
            TypeError: If listener is not callable
        """
        self._add_listener(event_name, listener, once=False)
        return self

    def once(
        self, event_name: ProviderEvent | str, listener: ProviderEventListener
    ) -> "Web3ProvidersEip1193":
        """Register a listener that is removed after its first call."""
        self._add_listener(event_name, listener, once=True)
        return self

    def remove_listener(
        self, event_name: ProviderEvent | str, listener: ProviderEventListener
    ) -> "Web3ProvidersEip1193":
        """Remove the most recent registration of ``listener`` for an event."""
        registrations = self._listeners[ProviderEvent(event_name)]
        for index in range(len(registrations) - 1, -1, -1):
            if registrations[index].listener == listener:
                del registrations[index]
                break
        return self

    off = remove_listener

    def remove_all_listeners(
        self, event_name: ProviderEvent | str | None = None
    ) -> "Web3ProvidersEip1193":
        if event_name is None:
            for registrations in self._listeners.values():
                registrations.clear()
        else:
            self._listeners[ProviderEvent(event_name)].clear()
        return self

    def listeners(self, event_name: ProviderEvent | str) -> list[ProviderEventListener]:
        return [r.listener for r in self._listeners[ProviderEvent(event_name)]]

    def listener_count(self, event_name: ProviderEvent | str) -> int:
        return len(self._listeners[ProviderEvent(event_name)])

    def _add_listener(
        self,
        event_name: ProviderEvent | str,
        listener: ProviderEventListener,
        once: bool,
    ) -> None:
        event = ProviderEvent(event_name)
        if not callable(listener):
            raise TypeError(f"Listener for '{event.value}' must be callable")
        self._listeners[event].append(_Registration(listener, once))

    def _emit(self, event: ProviderEvent, payload: list[Any]) -> None:
        registrations = self._listeners[event]
        for registration in list(registrations):
            if registration.once and registration in registrations:
                registrations.remove(registration)
            registration.listener(list(payload))

    # Event forwarding from the installed client

    def _make_forwarder(self, event: ProviderEvent) -> Callable[..., None]:
        def forward(*args: Any) -> None:
            # Forwarders of a replaced client stay registered when it cannot
            # detach them; only the installed set delivers.
            if self._forwarders.get(event) is not forward:
                return
            self._emit(event, list(args))

        return forward

    def _attach_event_listeners(
        self, web3_client: Eip1193Client
    ) -> dict[ProviderEvent, Callable[..., None]]:
        on = get_capability(web3_client, "on")
        forwarders: dict[ProviderEvent, Callable[..., None]] = {}

        try:
            for event in ProviderEvent:
                forward = self._make_forwarder(event)
                on(event.value, forward)
                forwarders[event] = forward
        except Exception:
            logger.error(
                f"Failed to attach event listeners to {type(web3_client).__name__}"
            )
            self._detach_event_listeners(web3_client, forwarders)
            raise

        return forwarders

    def _detach_event_listeners(
        self,
        web3_client: Eip1193Client,
        forwarders: dict[ProviderEvent, Callable[..., None]],
    ) -> None:
        if not forwarders:
            return

        for method_name in DETACH_METHODS:
            remove = get_capability(web3_client, method_name)
            if callable(remove):
                break
        else:
            logger.info(
                f"{type(web3_client).__name__} cannot remove listeners, leaving "
                f"{len(forwarders)} inactive forwarders registered on it"
            )
            return

        for event, forward in forwarders.items():
            try:
                remove(event.value, forward)
            except Exception as e:
                logger.warning(
                    f"Failed to detach '{event.value}' forwarder from "
                    f"{type(web3_client).__name__}: {e}"
                )
