"""
Turing Pi BMC Data Models

Data classes for credentials and the records returned by the BMC.
"""

from dataclasses import asdict, dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Mapping

from requests.auth import HTTPBasicAuth

from .exceptions import ParseError


class AuthType(str, Enum):
    """Authentication schemes supported by the BMC."""
    BASIC = "basic"
    BEARER = "bearer"


class PowerState(IntEnum):
    """Node power states accepted by set_power."""
    OFF = 0
    ON = 1


@dataclass(frozen=True)
class BasicCredentials:
    """Username and password sent as HTTP basic auth on every call."""
    username: str
    password: str

    def request_kwargs(self) -> Dict[str, Any]:
        return {"auth": HTTPBasicAuth(self.username, self.password)}

    def __repr__(self) -> str:
        return f"BasicCredentials(username={self.username!r})"


@dataclass(frozen=True)
class BearerCredentials:
    """Session token issued by the authenticate endpoint."""
    token: str
    name: str = ""
    description: str = ""

    @classmethod
    def from_response(cls, payload: Any) -> "BearerCredentials":
        """
        Build credentials from a decoded authenticate response.

        The token is carried in the ``id`` key. A missing key yields an
        empty token; the caller decides whether that is an error.

        Raises:
            ParseError: If the payload is not an object of strings
        """
        if not isinstance(payload, dict):
            raise ParseError("authentication response is not a JSON object")

        fields = {}
        for key, attr in (("id", "token"), ("name", "name"), ("description", "description")):
            value = payload.get(key, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ParseError(f"authentication response field '{key}' is not a string")
            fields[attr] = value

        return cls(**fields)

    def request_kwargs(self) -> Dict[str, Any]:
        return {
            "headers": {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.token}",
            }
        }

    def __repr__(self) -> str:
        return f"BearerCredentials(name={self.name!r}, description={self.description!r})"


@dataclass(frozen=True)
class OtherInfo:
    """Firmware and network details reported by ``opt=get&type=other``."""
    api: str
    build_version: str
    buildroot: str
    buildtime: str
    ip: str
    mac: str
    version: str

    @classmethod
    def from_result(cls, result: Mapping[str, str]) -> "OtherInfo":
        return cls(
            api=result.get("api", ""),
            build_version=result.get("build_version", ""),
            buildroot=result.get("buildroot", ""),
            buildtime=result.get("buildtime", ""),
            ip=result.get("ip", ""),
            mac=result.get("mac", ""),
            version=result.get("version", ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
