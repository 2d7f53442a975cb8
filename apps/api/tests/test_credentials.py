"""Tests for LiveKit token issuance."""
from __future__ import annotations

import logging

import pytest

from conference.core.errors import ConfigurationError
from conference.services.credentials import CredentialIssuer

TEST_API_KEY = "APItestkey123"
TEST_API_SECRET = "test-secret-0123456789abcdefghijklmnopqrstuv"


def test_issued_token_grants_room_join(issuer: CredentialIssuer) -> None:
    token = issuer.issue("standup", "alice")

    claims = issuer.decode(token)

    assert claims.identity == "alice"
    assert claims.name == "alice"
    assert claims.video is not None
    assert claims.video.room == "standup"
    assert claims.video.room_join is True


def test_each_issue_is_bound_to_its_participant(issuer: CredentialIssuer) -> None:
    first = issuer.decode(issuer.issue("standup", "alice"))
    second = issuer.decode(issuer.issue("retro", "bob"))

    assert (first.identity, first.video.room) == ("alice", "standup")
    assert (second.identity, second.video.room) == ("bob", "retro")


@pytest.mark.parametrize(
    ("api_key", "api_secret"),
    [("", TEST_API_SECRET), (TEST_API_KEY, ""), ("", ""), ("   ", TEST_API_SECRET)],
)
def test_issue_requires_key_and_secret(api_key: str, api_secret: str) -> None:
    issuer = CredentialIssuer(api_key, api_secret)

    assert not issuer.configured
    with pytest.raises(ConfigurationError):
        issuer.issue("standup", "alice")


def test_issue_rejects_key_without_expected_prefix() -> None:
    issuer = CredentialIssuer("devkey", TEST_API_SECRET)

    assert issuer.configured
    with pytest.raises(ConfigurationError, match="must start with"):
        issuer.issue("standup", "alice")


def test_custom_key_prefix_is_honoured() -> None:
    issuer = CredentialIssuer("devkey", TEST_API_SECRET, key_prefix="dev")

    claims = issuer.decode(issuer.issue("standup", "alice"))

    assert claims.video.room == "standup"


def test_tokens_are_not_logged_by_default(issuer: CredentialIssuer, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="conference.services.credentials")

    token = issuer.issue("standup", "alice")

    assert token not in caplog.text


def test_token_logging_can_be_enabled(caplog) -> None:
    issuer = CredentialIssuer(TEST_API_KEY, TEST_API_SECRET, log_tokens=True)
    caplog.set_level(logging.DEBUG, logger="conference.services.credentials")

    token = issuer.issue("standup", "alice")

    assert token in caplog.text
    assert TEST_API_SECRET not in caplog.text
