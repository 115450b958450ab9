"""Protocol-level socket settings."""

from dataclasses import dataclass


@dataclass
class Settings:
    """Tunable limits and timeouts for protocol sockets."""

    send_high_water: int = 100
    receive_high_water: int = 100
    message_size_limit: int = 0
    handshake_seconds: int = 30
    ping_seconds: int = 0
    inactivity_seconds: int = 0
    reconnect_seconds: int = 1
    send_milliseconds: int = 0