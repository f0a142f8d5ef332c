"""Channel classification by name prefix."""

from __future__ import annotations

from .types import ChannelType

PRIVATE_PREFIX = "private-"
PRESENCE_PREFIX = "presence-"


def classify_channel(name: str) -> ChannelType:
    """
    Determine the channel type from its name.

    Channel types:
        - "presence-channel-name" -> ChannelType.PRESENCE
        - "private-channel-name" -> ChannelType.PRIVATE
        - anything else -> ChannelType.PUBLIC
    """
    if name.startswith(PRESENCE_PREFIX):
        return ChannelType.PRESENCE
    elif name.startswith(PRIVATE_PREFIX):
        return ChannelType.PRIVATE
    else:
        return ChannelType.PUBLIC


def requires_auth(channel_type: ChannelType) -> bool:
    """Whether subscribing to this channel type needs a signed credential."""
    return channel_type is not ChannelType.PUBLIC
