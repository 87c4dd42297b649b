"""Turing Pi 2 BMC client for the /api/bmc HTTP API."""

import json
import logging
from typing import Any, Callable, Dict, Optional, TypeVar, Union

import requests

from .const import (
    AUTHENTICATE_ENDPOINT,
    BMC_ENDPOINT,
    DEFAULT_BASE_URL,
    NODE_MAX,
    NODE_MIN,
    POWER_OFF,
    POWER_ON,
)
from .envelope import parse_object, parse_scalar
from .exceptions import (
    AuthenticationError,
    ConfigError,
    HTTPStatusError,
    ParseError,
    TransportError,
    ValidationError,
)
from .models import AuthType, BasicCredentials, BearerCredentials, OtherInfo


logger = logging.getLogger(__name__)

T = TypeVar("T")
Credentials = Union[BasicCredentials, BearerCredentials]


def _status_line(response: requests.Response) -> str:
    return f"{response.status_code} {response.reason or ''}".strip()


def _validate_node(node: int) -> None:
    if isinstance(node, bool) or not isinstance(node, int) or not NODE_MIN <= node <= NODE_MAX:
        raise ValidationError(f"node number must be between {NODE_MIN} and {NODE_MAX}, got {node!r}")


def _validate_power_state(state: int) -> None:
    if isinstance(state, bool) or not isinstance(state, int) or state not in (POWER_OFF, POWER_ON):
        raise ValidationError(f"power state must be {POWER_OFF} (off) or {POWER_ON} (on), got {state!r}")


class BMCClient:
    """Client for communicating with the Turing Pi 2 BMC."""

    def __init__(
        self,
        base_url: str,
        auth_type: Union[str, AuthType],
        username: str,
        password: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the client and authenticate against the BMC.

        Args:
            base_url: BMC base URL; empty selects DEFAULT_BASE_URL
            auth_type: 'basic' or 'bearer'
            username: BMC username
            password: BMC password
            session: Transport to use for every call. A caller-supplied
                session is never closed by the client; configure TLS
                verification and timeouts on it.

        Raises:
            ConfigError: If auth_type is not supported (no request is made)
            AuthenticationError: If the BMC rejects the credentials
            TransportError: If the handshake request fails
            ParseError: If the bearer handshake response is not valid JSON
        """
        try:
            self.auth_type = AuthType(auth_type)
        except ValueError:
            raise ConfigError(f"invalid auth type: {auth_type}") from None

        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

        if self.auth_type is AuthType.BEARER:
            self._credentials: Credentials = self._authenticate_bearer(username, password)
        else:
            self._credentials = self._authenticate_basic(username, password)

        logger.debug(f"Authenticated to {self.base_url} using {self.auth_type.value} auth")

    @property
    def credentials(self) -> Credentials:
        """Resolved credentials for the active auth mode."""
        return self._credentials

    def _authenticate_bearer(self, username: str, password: str) -> BearerCredentials:
        url = f"{self.base_url}{AUTHENTICATE_ENDPOINT}"
        try:
            # The BMC expects the credentials as a JSON body on a GET
            response = self.session.get(
                url,
                headers={"Content-Type": "application/json"},
                json={"username": username, "password": password},
            )
            body = response.content
        except requests.RequestException as err:
            raise TransportError(f"error making authentication request: {err}") from err

        if response.status_code != 200:
            raise AuthenticationError(
                f"error authenticating: {_status_line(response)}",
                status_code=response.status_code,
            )

        try:
            payload = json.loads(body)
        except ValueError as err:
            raise ParseError(f"error parsing JSON in authentication response: {err}") from err

        credentials = BearerCredentials.from_response(payload)
        if not credentials.token:
            raise AuthenticationError(
                "authentication response does not contain an auth token",
                status_code=response.status_code,
            )
        return credentials

    def _authenticate_basic(self, username: str, password: str) -> BasicCredentials:
        credentials = BasicCredentials(username, password)
        url = f"{self.base_url}{BMC_ENDPOINT}?opt=get&type=info"
        try:
            response = self.session.get(url, **credentials.request_kwargs())
        except requests.RequestException as err:
            raise TransportError(f"error making authentication test request: {err}") from err

        if response.status_code != 200:
            raise AuthenticationError(
                f"error from authentication test: {_status_line(response)}",
                status_code=response.status_code,
            )
        return credentials

    def _call(self, endpoint: str, action: str) -> bytes:
        """
        Make an authenticated GET request to the BMC.

        Args:
            endpoint: Path and query, e.g. '/api/bmc?opt=get&type=power'
            action: Operation name used in error messages

        Returns:
            Raw response body

        Raises:
            TransportError: On connection errors or an unreadable body
            HTTPStatusError: On any status other than 200
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, **self._credentials.request_kwargs())
            body = response.content
        except requests.RequestException as err:
            raise TransportError(f"error during {action} call: {err}") from err

        logger.debug(f"{url} returned {_status_line(response)}")
        if response.status_code != 200:
            raise HTTPStatusError(
                f"error during {action} call: http error in response: {_status_line(response)}",
                status_code=response.status_code,
                reason=response.reason or "",
            )
        return body

    def _query(self, endpoint: str, action: str, parse: Callable[[bytes], T]) -> T:
        body = self._call(endpoint, action)
        try:
            return parse(body)
        except ParseError as err:
            raise ParseError(f"error parsing {action} response: {err}") from err

    def get_other(self) -> OtherInfo:
        """Get firmware, build and network details of the BMC."""
        result = self._query(f"{BMC_ENDPOINT}?opt=get&type=other", "get other", parse_object)
        return OtherInfo.from_result(result)

    def usb_boot(self, node: int) -> str:
        """Set the USB boot option for a node (0-3)."""
        _validate_node(node)
        return self._query(
            f"{BMC_ENDPOINT}?opt=set&type=usb_boot&node={node}", "USB boot", parse_scalar
        )

    def clear_usb_boot(self, node: int) -> str:
        """Clear the USB boot option for a node (0-3)."""
        _validate_node(node)
        return self._query(
            f"{BMC_ENDPOINT}?opt=set&type=clear_usb_boot&node={node}", "clear USB boot", parse_scalar
        )

    def reset_network(self) -> str:
        """Reset the onboard network switch."""
        return self._query(f"{BMC_ENDPOINT}?opt=set&type=network", "reset network", parse_scalar)

    def node_to_msd(self, node: int) -> str:
        """Reboot a node (0-3) into USB mass storage device mode."""
        _validate_node(node)
        return self._query(
            f"{BMC_ENDPOINT}?opt=set&type=node_to_msd&node={node}", "node to MSD", parse_scalar
        )

    def set_power(self, node: int, state: int) -> str:
        """
        Set the power state of a node.

        Args:
            node: Node number (0-3)
            state: 0 for off, 1 for on

        Returns:
            Result string reported by the BMC
        """
        _validate_node(node)
        _validate_power_state(state)
        # The BMC expects node<N>=<state> with no separator between "node" and N
        return self._query(
            f"{BMC_ENDPOINT}?opt=power&type=set&node{node}={int(state)}", "set power", parse_scalar
        )

    def get_power(self) -> Dict[str, str]:
        """
        Get the power state of all nodes.

        Returns:
            Mapping of node name to state, e.g. {"node1": "1", "node2": "0", ...}
        """
        return self._query(f"{BMC_ENDPOINT}?opt=get&type=power", "get power", parse_object)

    def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "BMCClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
