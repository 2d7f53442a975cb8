"""LiveKit access token issuance.

Tokens are signed in-process with the shared API key/secret pair. The media server
validates them; nothing here keeps track of what was issued."""
from __future__ import annotations

import logging
from functools import lru_cache

from livekit import api
from livekit.api.access_token import Claims

from ..core.config import settings
from ..core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class CredentialIssuer:
    """Sign room-join tokens for participants."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        key_prefix: str = "API",
        log_tokens: bool = False,
    ) -> None:
        self._api_key = api_key.strip()
        self._api_secret = api_secret.strip()
        self._key_prefix = key_prefix
        self._log_tokens = log_tokens

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._api_secret)

    def validate(self) -> None:
        """Raise ``ConfigurationError`` unless a usable key pair is loaded."""

        if not self.configured:
            raise ConfigurationError("LiveKit API key and secret are required")
        if not self._api_key.startswith(self._key_prefix):
            raise ConfigurationError(f"LiveKit API key must start with {self._key_prefix!r}")

    def issue(self, room_id: str, participant_name: str) -> str:
        """Return a JWT granting ``participant_name`` permission to join ``room_id``."""

        self.validate()
        token = (
            api.AccessToken(self._api_key, self._api_secret)
            .with_identity(participant_name)
            .with_name(participant_name)
            .with_grants(api.VideoGrants(room_join=True, room=room_id))
            .to_jwt()
        )

        if self._log_tokens:
            logger.debug("Generated LiveKit token: %s", token)
            logger.debug("Generated LiveKit token claims: %s", self.decode(token))

        return token

    def decode(self, token: str) -> Claims:
        """Verify ``token`` against the loaded secret and return its claims."""

        self.validate()
        return api.TokenVerifier(self._api_key, self._api_secret).verify(token)


@lru_cache
def get_issuer() -> CredentialIssuer:
    """Return the process-wide issuer built from settings."""

    return CredentialIssuer(
        settings.livekit_api_key,
        settings.livekit_api_secret,
        key_prefix=settings.livekit_api_key_prefix,
        log_tokens=settings.livekit_log_tokens,
    )
