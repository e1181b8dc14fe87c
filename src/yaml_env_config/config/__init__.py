"""Config document resolution and loading.

Two ways to use it:

- the functional API: :func:`resolve` returns a :class:`RawDocument`, and
  :func:`as_hash`, :func:`as_env_value` and :func:`as_env_assignment` take
  that document explicitly;
- :class:`ConfigLoader`, which keeps the document after ``load()`` and
  offers the same views as methods.

Example:
    >>> from yaml_env_config.config import ConfigLoader
    >>> settings = ConfigLoader("config").load("production").as_hash()
"""

from .loader import ConfigLoader
from .resolver import (
    DEFAULT_ENV_NAME,
    RawDocument,
    as_env_assignment,
    as_env_value,
    as_hash,
    resolve,
    resolve_config_path,
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
]
