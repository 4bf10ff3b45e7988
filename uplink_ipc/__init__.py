"""In-process publish/subscribe transport for messages with fixed-layout payloads."""

__version__ = "0.1.0"
__all__ = ["message", "transmission_data", "custom_header", "transport"]