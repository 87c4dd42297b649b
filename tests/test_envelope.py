"""Tests for envelope parsing."""

import pytest

from turingpi_bmc.envelope import ObjectEnvelope, ScalarEnvelope, parse_object, parse_scalar
from turingpi_bmc.exceptions import ParseError


def test_parse_scalar_returns_result():
    assert parse_scalar(b'{"response":[{"result":"ok"}]}') == "ok"


def test_parse_scalar_empty_result_fails():
    with pytest.raises(ParseError, match="empty"):
        parse_scalar(b'{"response":[{"result":""}]}')


def test_parse_scalar_missing_result_fails():
    with pytest.raises(ParseError):
        parse_scalar(b'{"response":[{}]}')


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b"[]",
        b'{"response":[]}',
        b'{"response":"ok"}',
        b'{"response":[{"result":["ok"]}]}',
    ],
)
def test_parse_scalar_rejects_bad_envelopes(body):
    with pytest.raises(ParseError):
        parse_scalar(body)


def test_scalar_envelope_keeps_empty_result():
    """The schema itself decodes an empty result; parse_scalar rejects it."""
    assert ScalarEnvelope.from_json(b'{"response":[{"result":""}]}').result == ""


def test_parse_object_returns_exact_mapping():
    body = b'{"response":[{"result":[{"node1":"1","node2":"0","node3":"1","node4":"0"}]}]}'

    assert parse_object(body) == {"node1": "1", "node2": "0", "node3": "1", "node4": "0"}


def test_parse_object_uses_first_result_only():
    body = b'{"response":[{"result":[{"a":"1"},{"b":"2"}]}]}'

    assert parse_object(body) == {"a": "1"}


def test_parse_object_stringifies_numbers():
    body = b'{"response":[{"result":[{"node1":1,"node2":0}]}]}'

    assert ObjectEnvelope.from_json(body).result == {"node1": "1", "node2": "0"}


@pytest.mark.parametrize(
    "body",
    [
        b'{"response":[{"result":[]}]}',
        b'{"response":[]}',
        b'{"response":[{"result":"ok"}]}',
        b'{"response":[{"result":[{"nested":{"a":"b"}}]}]}',
        b'{"response":[{"result":[{"flag":true}]}]}',
        b'{"response":[{"result":["x"]}]}',
        b"{broken",
    ],
)
def test_parse_object_rejects_bad_envelopes(body):
    with pytest.raises(ParseError):
        parse_object(body)
