"""Errors raised while building a game session"""


class ConfigError(ValueError):
    """The configuration cannot describe a playable board."""
