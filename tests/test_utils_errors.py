"""Tests for utils/errors.py: error taxonomy, codes and hints."""
import json

import pytest

from trip_journal.utils.errors import (
    BadResponse,
    FailedToDecodeResponse,
    InvalidTarget,
    NetworkError,
    StoreError,
    _get_hint,
    handle_error,
)


# ── Taxonomy ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("error_type", [InvalidTarget, BadResponse, FailedToDecodeResponse])
def test_network_errors_share_base(error_type):
    assert issubclass(error_type, NetworkError)
    assert issubclass(error_type, RuntimeError)


def test_store_error_is_not_network_error():
    assert not issubclass(StoreError, NetworkError)


# ── _get_hint ─────────────────────────────────────────────────────────

def test_hint_bad_response():
    assert "log in" in _get_hint(BadResponse("x")).lower()


def test_hint_invalid_target():
    assert "servers.yaml" in _get_hint(InvalidTarget("x"))


def test_hint_decode():
    assert _get_hint(FailedToDecodeResponse("x")) is not None


def test_hint_store():
    assert "TRIP_JOURNAL_CREDENTIAL_PATH" in _get_hint(StoreError("x"))


def test_hint_no_match():
    assert _get_hint(RuntimeError("some random error")) is None


# ── handle_error JSON output ──────────────────────────────────────────

def test_handle_error_bad_response(capsys):
    handle_error(BadResponse("Bad response from GET http://localhost:8000/trips"))
    data = json.loads(capsys.readouterr().out)
    assert data["error"] is True
    assert data["code"] == "BAD_RESPONSE"
    assert "hint" in data


def test_handle_error_codes(capsys):
    handle_error(FailedToDecodeResponse("bad body"))
    assert json.loads(capsys.readouterr().out)["code"] == "DECODE_ERROR"
    handle_error(InvalidTarget("bad url"))
    assert json.loads(capsys.readouterr().out)["code"] == "INVALID_TARGET"


def test_handle_error_empty_message(capsys):
    handle_error(BadResponse())
    assert json.loads(capsys.readouterr().out)["message"] == "BadResponse"


def test_handle_error_generic_code(capsys):
    handle_error(RuntimeError("something went wrong"))
    data = json.loads(capsys.readouterr().out)
    assert data["code"] == "RUNTIME_ERROR"
    assert "hint" not in data
