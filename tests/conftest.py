"""Shared fixtures for BMC client tests."""

import json
from unittest.mock import Mock

import pytest
import requests

from turingpi_bmc.client import BMCClient


OTHER_BODY = (
    '{"response":[{"result":[{"api":"1.1","build_version":"2024.05.1",'
    '"buildroot":"\\"Buildroot 2024.05.1\\"","buildtime":"2025-01-17 17:12:52-00:00",'
    '"ip":"Unknown","mac":"Unknown","version":"2.3.4"}]}]}'
)


def make_response(status_code=200, body=b"", reason="OK"):
    """Build a real requests.Response with a canned body."""
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = body
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def basic_client(session):
    """Client authenticated with basic auth; later calls are queued on session.get."""
    session.get.return_value = make_response(body={"response": [{"result": [{}]}]})
    client = BMCClient("http://mock", "basic", "root", "turing", session=session)
    session.get.reset_mock()
    return client


@pytest.fixture
def bearer_client(session):
    session.get.return_value = make_response(
        body={"id": "abc123", "name": "root", "description": "session"}
    )
    client = BMCClient("http://mock", "bearer", "root", "turing", session=session)
    session.get.reset_mock()
    return client
