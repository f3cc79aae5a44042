from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when there is a problem loading or reading configuration."""

class ConfigSourceError(ConfigurationError):
    """Raised when a source cannot be read or decoded into a mapping."""

class ValueNotSetError(ConfigurationError):
    """Raised by the must_* accessors when the value was not set."""

class ValueTypeError(ConfigurationError):
    """Raised by the must_* accessors when the value has another type."""
