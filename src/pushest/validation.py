"""Validation of presence channel member data."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import InvalidUserDataError

logger = logging.getLogger(__name__)

USER_ID_KEY = "user_id"

_MISSING = object()


@dataclass(frozen=True)
class UserDataValidation:
    """Outcome of validating member data. ``user_data`` is always the input, unchanged."""

    ok: bool
    user_data: Mapping[str, Any]
    reason: str | None = None

    def unwrap(self) -> Mapping[str, Any]:
        """Return the member data, or raise InvalidUserDataError if it was rejected."""
        if not self.ok:
            raise InvalidUserDataError(f"Invalid member data: {self.reason}", self.user_data)
        return self.user_data


def validate_user_data(user_data: Mapping[str, Any]) -> UserDataValidation:
    """
    Check that presence channel member data carries a usable ``user_id``.

    Rules, first match wins:
        1. empty mapping -> rejected
        2. ``user_id`` key absent -> rejected
        3. ``user_id`` is None -> rejected
        4. ``user_id`` is an empty string -> rejected
        5. any other value, numeric ids included -> accepted

    Args:
        user_data: Member metadata supplied for the subscription

    Returns:
        UserDataValidation tagged ok/rejected, holding the input unchanged

    Raises:
        InvalidUserDataError: If ``user_data`` is not a mapping at all
    """
    if not isinstance(user_data, Mapping):
        raise InvalidUserDataError(
            f"Member data must be a mapping, got {type(user_data).__name__}", user_data
        )

    if not user_data:
        return _reject(user_data, "member data is empty")

    user_id = user_data.get(USER_ID_KEY, _MISSING)
    if user_id is _MISSING:
        return _reject(user_data, f"'{USER_ID_KEY}' is missing")
    if user_id is None:
        return _reject(user_data, f"'{USER_ID_KEY}' is null")
    if user_id == "":
        return _reject(user_data, f"'{USER_ID_KEY}' is empty")

    return UserDataValidation(ok=True, user_data=user_data)


def _reject(user_data: Mapping[str, Any], reason: str) -> UserDataValidation:
    logger.debug(f"Rejected member data: {reason}")
    return UserDataValidation(ok=False, user_data=user_data, reason=reason)
