#!/usr/bin/env python3
"""
Private and presence channel example for Pushest.

Builds the endpoint to dial and the subscribe payloads a transport would send
once the server has assigned a socket ID.

Environment variables required:
    PUSHEST_APP_KEY: Your Pusher application key
    PUSHEST_APP_SECRET: Your Pusher application secret
    PUSHEST_CLUSTER: Pusher cluster (default: mt1)
"""

import json
import logging
import sys

from pushest import Authenticator, PushestConfig, validate_user_data

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    config = PushestConfig()
    config.configure_logging()

    endpoint = config.endpoint()
    print(f"Dial: {endpoint.url}")

    # Normally taken from pusher:connection_established
    socket_id = sys.argv[1] if len(sys.argv) > 1 else "123456.7890123"

    authenticator = Authenticator(config.app_key, config.app_secret.get_secret_value())

    private = authenticator.subscription_data(socket_id, "private-user.123")
    print(json.dumps({"event": "pusher:subscribe", "data": private}))

    user_data = {"user_id": "123", "user_info": {"name": "Alice"}}
    result = validate_user_data(user_data)
    if not result.ok:
        logger.error(f"Cannot join presence channel: {result.reason}")
        return

    presence = authenticator.subscription_data(socket_id, "presence-chat.room1", user_data)
    print(json.dumps({"event": "pusher:subscribe", "data": presence}))


if __name__ == "__main__":
    main()
