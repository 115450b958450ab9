"""Authorities, endpoints, Z85 keys, CURVE certificates, restartable ZeroMQ contexts and protocol settings."""

__version__ = "0.1.0"

__all__ = [
    "authority",
    "certificate",
    "context",
    "endpoint",
    "errors",
    "settings",
    "sodium",
]