"""Custom exceptions for the YAML environment config loader.

Each failure while resolving or materializing a configuration document maps to
one exception class, so callers can tell a corrupt deployment payload from a
missing config file or a YAML syntax mistake.

Exception Classes:
    ConfigLoaderError: Base exception for all project-specific errors
    ConfigNotLoadedError: An accessor was called before ``load``
    TransportDecodeError: The environment variable payload could not be decoded
    ConfigFileError: The selected YAML file could not be read
    ConfigParseError: The raw document is not valid YAML

Example:
    >>> from yaml_env_config.exceptions import ConfigFileError
    >>> raise ConfigFileError("Config file not found", details={"path": "config/default.yml"})
"""

from typing import Any, Optional


class ConfigLoaderError(Exception):
    """Base exception class for the config loader.

    Args:
        message: Human-readable error description
        details: Additional error context or debugging information
        original_exception: Original exception that caused this error (if any)

    Attributes:
        message: The error message
        details: Additional error context
        original_exception: Original exception (if wrapped)
        stage: Name of the pipeline stage that failed
    """

    stage: str = "unknown"

    def __init__(
        self,
        message: str,
        details: Optional[Any] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.details = details
        self.original_exception = original_exception

        error_parts = [message]
        if details:
            error_parts.append(f"Details: {details}")
        if original_exception:
            error_parts.append(f"Caused by: {original_exception}")

        super().__init__(" | ".join(error_parts))


class ConfigNotLoadedError(ConfigLoaderError):
    """Raised when a loader accessor is used before ``load`` succeeded.

    This is a programmer error, not a data error.

    Example:
        >>> raise ConfigNotLoadedError("Call load() first to load YAML into memory.")
    """

    stage = "usage"


class TransportDecodeError(ConfigLoaderError):
    """Raised when a transport string cannot be turned back into a document.

    The ``stage`` attribute is ``"decode"`` when the base64 step failed and
    ``"decompress"`` when the inflate step failed.

    Example:
        >>> raise TransportDecodeError("Invalid base64", stage="decode")
    """

    def __init__(
        self,
        message: str,
        stage: str = "decode",
        details: Optional[Any] = None,
        original_exception: Optional[Exception] = None
    ):
        self.stage = stage
        super().__init__(message, details=details, original_exception=original_exception)


class ConfigFileError(ConfigLoaderError):
    """Raised when the resolved YAML file cannot be read.

    Raised when:
    - The fallback ``default.yml`` does not exist
    - The selected path is a directory
    - The selected file is not readable

    Example:
        >>> raise ConfigFileError("Config file not found", details={"path": "default.yml"})
    """

    stage = "read"


class ConfigParseError(ConfigLoaderError):
    """Raised when the raw document is not valid YAML."""

    stage = "parse"
