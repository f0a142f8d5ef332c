"""HMAC-SHA256 authentication for private/presence channels."""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
from collections.abc import Mapping
from typing import Any

from .channels import classify_channel, requires_auth
from .exceptions import AuthenticationError, NotConnectedError
from .types import ChannelType, ConnectionState
from .validation import validate_user_data

logger = logging.getLogger(__name__)


def encode_user_data(user_data: Mapping[str, Any] | None) -> str:
    """
    Serialize member data to the JSON form that gets signed.

    Keys are sorted and separators compact, so a given mapping always encodes
    to the same string. Nested mappings are encoded as objects; NaN and
    infinity are refused since standard JSON has no literal for them.

    Raises:
        AuthenticationError: If the data is not JSON serializable
    """
    try:
        return json.dumps(
            dict(user_data or {}),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_mapping,
        )
    except (TypeError, ValueError) as e:
        raise AuthenticationError(f"Member data is not JSON serializable: {e}") from e


def _encode_mapping(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class Authenticator:
    """
    Handles HMAC-SHA256 authentication for private/presence channels.

    The credential is "<app_key>:<hex digest>" where the digest is computed as:
        HMAC-SHA256(app_secret, f"{socket_id}:{channel_name}:{user_data_json}")

    Public channels need no credential and get ``None``.
    """

    def __init__(self, app_key: str, app_secret: str) -> None:
        self.app_key = app_key
        self.app_secret = app_secret

    @classmethod
    def from_state(cls, state: ConnectionState) -> Authenticator:
        """Create an authenticator from connection state credentials."""
        return cls(state.app_key, state.app_secret)

    @staticmethod
    def string_to_sign(socket_id: str, channel_name: str, channel_data: str) -> str:
        """Canonical string covered by the signature."""
        return f"{socket_id}:{channel_name}:{channel_data}"

    def authenticate(
        self,
        socket_id: str | None,
        channel_name: str,
        user_data: Mapping[str, Any] | None = None,
    ) -> str | None:
        """
        Generate the auth credential for a channel subscription.

        Presence member data is signed as given; validate it first with
        ``validate_user_data``.

        Args:
            socket_id: The socket ID from connection established event
            channel_name: The channel to authenticate for
            user_data: Member data, signed verbatim (``{}`` when omitted)

        Returns:
            "app_key:hex_digest", or None for public channels

        Raises:
            NotConnectedError: If no socket ID has been assigned yet
        """
        if not requires_auth(classify_channel(channel_name)):
            return None
        return self._credential(socket_id, channel_name, encode_user_data(user_data))

    def subscription_data(
        self,
        socket_id: str | None,
        channel_name: str,
        user_data: Mapping[str, Any] | None = None,
    ) -> dict[str, str]:
        """
        Build the data payload of a subscribe request.

        Args:
            socket_id: The socket ID from connection established event
            channel_name: The channel to subscribe to
            user_data: Member data (required for presence channels)

        Returns:
            Dict with 'channel', plus 'auth' for private/presence channels
            and 'channel_data' (the exact signed JSON) for presence channels
            and for private channels given member data

        Raises:
            InvalidUserDataError: If presence member data has no usable user_id
            NotConnectedError: If no socket ID has been assigned yet
        """
        channel_type = classify_channel(channel_name)
        data = {"channel": channel_name}

        if channel_type is ChannelType.PRESENCE:
            validate_user_data(user_data).unwrap()
            channel_data = encode_user_data(user_data)
            data["auth"] = self._credential(socket_id, channel_name, channel_data)
            data["channel_data"] = channel_data
        elif channel_type is ChannelType.PRIVATE:
            channel_data = encode_user_data(user_data)
            data["auth"] = self._credential(socket_id, channel_name, channel_data)
            # Server rebuilds the signed string from channel_data
            if user_data:
                data["channel_data"] = channel_data

        return data

    def _credential(self, socket_id: str | None, channel_name: str, channel_data: str) -> str:
        if not socket_id:
            raise NotConnectedError(f"Cannot authenticate '{channel_name}': not connected")

        credential = self._sign(self.string_to_sign(socket_id, channel_name, channel_data))
        logger.debug(f"Signed auth for channel '{channel_name}' (socket {socket_id})")
        return credential

    def _sign(self, message: str) -> str:
        """
        Generate HMAC-SHA256 signature.

        Returns:
            String in format "app_key:hex_digest"
        """
        signature = hmac.new(
            self.app_secret.encode("utf-8"),
            message.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
        return f"{self.app_key}:{signature}"


def auth(
    state: ConnectionState,
    channel_name: str,
    user_data: Mapping[str, Any] | None = None,
) -> str | None:
    """
    Auth credential for subscribing to ``channel_name`` on the current connection.

    Returns None for public channels. Raises NotConnectedError before a socket
    ID is assigned.
    """
    return Authenticator.from_state(state).authenticate(state.socket_id, channel_name, user_data)
