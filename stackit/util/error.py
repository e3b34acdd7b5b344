"""Utility layer errors.

Raised while wiring the application together (settings, DI container),
before any request is served.
"""


class UtilError(Exception):
    """Base error for application wiring failures."""

    pass


class ConfigurationError(UtilError):
    """Settings are missing or unsafe for the current environment."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass
