"""
Pushest - channel authentication and endpoint construction for Pusher clients.

Example:
    from pushest import PushestConfig, auth

    config = PushestConfig(app_key="my-key", app_secret="my-secret", cluster="eu")
    endpoint = config.endpoint()
    # ... connect to endpoint.url, wait for the socket ID ...
    credential = auth(config.connection_state(socket_id), "private-orders")
"""

from pushest.auth import Authenticator, auth, encode_user_data
from pushest.channels import classify_channel, requires_auth
from pushest.config import ClientInfo, PushestConfig
from pushest.exceptions import (
    AuthenticationError,
    InvalidUserDataError,
    NotConnectedError,
    PushestError,
)
from pushest.types import ChannelType, ConnectionState, UserData
from pushest.url import EndpointDescriptor, build_endpoint, build_url
from pushest.validation import UserDataValidation, validate_user_data

from pushest.version import __version__

__all__ = [
    # Authentication
    "Authenticator",
    "auth",
    "encode_user_data",
    # Channels
    "ChannelType",
    "classify_channel",
    "requires_auth",
    # Configuration
    "PushestConfig",
    "ClientInfo",
    "ConnectionState",
    # Endpoint
    "EndpointDescriptor",
    "build_url",
    "build_endpoint",
    # Member data
    "UserData",
    "UserDataValidation",
    "validate_user_data",
    # Exceptions
    "PushestError",
    "AuthenticationError",
    "NotConnectedError",
    "InvalidUserDataError",
]
