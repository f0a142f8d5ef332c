"""Type definitions for Pushest."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, TypeAlias

# Member metadata supplied for presence channel subscriptions
UserData: TypeAlias = Mapping[str, Any]


class ChannelType(Enum):
    """Access-control class of a channel, derived from its name prefix."""

    PUBLIC = "public"
    PRIVATE = "private"
    PRESENCE = "presence"


@dataclass(frozen=True)
class ConnectionState:
    """
    Credentials plus the socket ID of the current connection.

    Owned by the connection layer; read-only here. ``socket_id`` stays
    ``None`` until the server sends ``pusher:connection_established``.
    """

    app_key: str
    app_secret: str = field(repr=False)
    socket_id: str | None = None

    @property
    def is_connected(self) -> bool:
        """Whether a socket ID has been assigned."""
        return bool(self.socket_id)
