"""Error types raised by colorls."""

from __future__ import annotations


class ConfigError(ValueError):
    """Icon or color configuration cannot be used for a listing."""
