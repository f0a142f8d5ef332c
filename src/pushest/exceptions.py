"""Custom exceptions for Pushest."""

from __future__ import annotations

from typing import Any, Mapping


class PushestError(Exception):
    """Base exception for all Pushest errors."""

    pass


class AuthenticationError(PushestError):
    """Channel auth credential could not be produced."""

    pass


class NotConnectedError(AuthenticationError):
    """Signing was attempted before the server assigned a socket ID."""

    pass


class InvalidUserDataError(PushestError):
    """Presence channel member data lacks a usable user_id."""

    def __init__(self, message: str, user_data: Mapping[str, Any] | Any = None) -> None:
        super().__init__(message)
        self.user_data = user_data
