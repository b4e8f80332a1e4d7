"""Exceptions raised by the autoplayer and its configuration."""


class AutotetrisError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(AutotetrisError):
    """Invalid autoplay configuration value."""


class InvalidContextError(AutotetrisError):
    """Autoplay was enabled against a game it cannot drive."""
