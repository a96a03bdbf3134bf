"""Exceptions raised by oneliners library code."""


class OnelinersError(Exception):
    """Base class for all oneliners errors."""


class HomeDirectoryError(OnelinersError):
    """The user's home directory could not be determined."""


class StoreWriteError(OnelinersError):
    """The store file could not be opened or written for append."""


class ConfigError(OnelinersError):
    """config.toml could not be parsed or failed validation."""
