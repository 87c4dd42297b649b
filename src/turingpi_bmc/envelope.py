"""
Decoding of the BMC response envelope.

Every response is wrapped as ``{"response":[{"result": <R>}]}``. Command
endpoints put a bare string in ``<R>``; informational endpoints put a list
holding a single object. The two shapes are decoded by separate schemas.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List

from .exceptions import ParseError


def _decode(body: bytes) -> List[Any]:
    """Decode JSON and return the outer ``response`` list."""
    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as err:
        raise ParseError(f"invalid JSON in response: {err}") from err

    if not isinstance(payload, dict):
        raise ParseError("response body is not a JSON object")

    response = payload.get("response")
    if not isinstance(response, list):
        raise ParseError("'response' field is missing or not a list")
    if not response:
        raise ParseError("no data in response")
    if not isinstance(response[0], dict):
        raise ParseError("'response' entry is not an object")
    return response


@dataclass(frozen=True)
class ScalarEnvelope:
    """``{"response":[{"result":"<result>"}]}``"""
    result: str

    @classmethod
    def from_json(cls, body: bytes) -> "ScalarEnvelope":
        entry = _decode(body)[0]
        result = entry.get("result", "")
        if not isinstance(result, str):
            raise ParseError("'result' field is not a string")
        return cls(result=result)


@dataclass(frozen=True)
class ObjectEnvelope:
    """``{"response":[{"result":[{<object>}]}]}``"""
    result: Dict[str, str]

    @classmethod
    def from_json(cls, body: bytes) -> "ObjectEnvelope":
        entry = _decode(body)[0]
        results = entry.get("result")
        if not isinstance(results, list):
            raise ParseError("'result' field is missing or not a list")
        if not results:
            raise ParseError("no data in response")
        if not isinstance(results[0], dict):
            raise ParseError("'result' entry is not an object")

        mapping = {}
        for key, value in results[0].items():
            if isinstance(value, str):
                mapping[key] = value
            elif isinstance(value, (int, float)) and not isinstance(value, bool):
                # power states come back as numbers on some firmware
                mapping[key] = str(value)
            else:
                raise ParseError(f"value for '{key}' is not a string")
        return cls(result=mapping)


def parse_scalar(body: bytes) -> str:
    """
    Parse a scalar envelope.

    Args:
        body: Raw response body

    Returns:
        The ``result`` string

    Raises:
        ParseError: On malformed JSON, a wrong shape, or an empty result
    """
    result = ScalarEnvelope.from_json(body).result
    if result == "":
        raise ParseError("result field in API response is empty")
    return result


def parse_object(body: bytes) -> Dict[str, str]:
    """
    Parse an object envelope.

    Args:
        body: Raw response body

    Returns:
        The single result object as a string-keyed mapping

    Raises:
        ParseError: On malformed JSON, a wrong shape, or empty lists
    """
    return ObjectEnvelope.from_json(body).result
