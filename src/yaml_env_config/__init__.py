"""YAML environment config loader.

Loads a single configuration document either from an environment variable
holding ``base64(deflate(yaml))`` or from a YAML file picked by environment
label, and serializes it back into that environment-variable form.
"""

__version__ = "1.0.0"

from .config import (
    DEFAULT_ENV_NAME,
    ConfigLoader,
    RawDocument,
    as_env_assignment,
    as_env_value,
    as_hash,
    resolve,
    resolve_config_path,
)
from .codec import decode_transport, encode_transport
from .exceptions import (
    ConfigLoaderError,
    ConfigNotLoadedError,
    TransportDecodeError,
    ConfigFileError,
    ConfigParseError,
)

__all__ = [
    "ConfigLoader",
    "DEFAULT_ENV_NAME",
    "RawDocument",
    "as_env_assignment",
    "as_env_value",
    "as_hash",
    "resolve",
    "resolve_config_path",
    "decode_transport",
    "encode_transport",
    "ConfigLoaderError",
    "ConfigNotLoadedError",
    "TransportDecodeError",
    "ConfigFileError",
    "ConfigParseError",
]
