"""Connection endpoint construction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .config import ClientInfo

if TYPE_CHECKING:
    from .config import PushestConfig

logger = logging.getLogger(__name__)

TLS_PORT = 443
PLAIN_PORT = 80


@dataclass(frozen=True)
class EndpointDescriptor:
    """Host, path and port the transport layer dials."""

    domain: str
    path: str
    port: int

    @property
    def scheme(self) -> str:
        """WebSocket scheme matching the port."""
        return "wss" if self.port == TLS_PORT else "ws"

    @property
    def url(self) -> str:
        """Full WebSocket URL."""
        return f"{self.scheme}://{self.domain}:{self.port}{self.path}"


def build_url(
    key: str,
    cluster: str,
    encrypted: bool,
    client: ClientInfo | None = None,
) -> EndpointDescriptor:
    """
    Build the endpoint for an application key and cluster.

    Key and cluster are not validated; a malformed value yields an endpoint
    the transport will fail to reach.

    Args:
        key: Pusher application key
        cluster: Cluster name, e.g. "mt1" or "eu"
        encrypted: Whether to connect over TLS
        client: Protocol/client identification (defaults to this library)

    Returns:
        EndpointDescriptor with domain, path and port
    """
    client = client or ClientInfo()
    domain = f"ws-{cluster}.pusher.com"
    # flash=false is always sent for legacy fallback transports
    path = (
        f"/app/{key}"
        f"?protocol={client.protocol_version}"
        f"&client={client.client_name}"
        f"&version={client.client_version}"
        f"&flash=false"
    )
    port = TLS_PORT if encrypted else PLAIN_PORT

    logger.debug(f"Built endpoint {domain}:{port} for cluster '{cluster}'")
    return EndpointDescriptor(domain=domain, path=path, port=port)


def build_endpoint(config: PushestConfig) -> EndpointDescriptor:
    """Build the endpoint from a loaded configuration."""
    return build_url(config.app_key, config.cluster, config.encrypted, client=config.client)
