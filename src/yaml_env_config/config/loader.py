"""Stateful config loader with a chaining API."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from . import resolver
from .resolver import DEFAULT_ENV_NAME, RawDocument
from ..exceptions import ConfigNotLoadedError


class ConfigLoader:
    """Loads a config document from an environment variable or YAML files.

    Call :meth:`load` first, then one of :meth:`as_hash`, :meth:`as_env_value`
    or :meth:`as_env_assignment`::

        ConfigLoader("config").load("production").as_hash()

    If the environment variable ``env_name`` is set, it is decoded as the
    document. Otherwise ``<directory>/<environment>.yml`` is read, or
    ``<directory>/default.yml`` when no environment is given or its file
    does not exist.

    A single instance must not be loaded from several threads at once.
    """

    def __init__(
        self,
        directory: Union[str, Path] = ".",
        env_name: str = DEFAULT_ENV_NAME
    ):
        """Initialize the loader.

        Args:
            directory: Directory containing the config YAML files.
            env_name: Name of the environment variable to read and produce.
        """
        self.logger = logging.getLogger(__name__)

        self._directory = Path(directory)
        self._env_name = env_name
        self._document: Optional[RawDocument] = None

        self.logger.debug(f"ConfigLoader created for {self._directory} (env var {env_name})")

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def env_name(self) -> str:
        return self._env_name

    @property
    def raw_document(self) -> Optional[RawDocument]:
        """Document stored by the last successful :meth:`load`, if any."""
        return self._document

    def load(self, environment: Optional[str] = None) -> "ConfigLoader":
        """Resolve the config document and keep it in memory.

        Every call resolves from scratch; the environment variable is always
        checked first. A failed call leaves the previous document in place.

        Args:
            environment: Application environment label (e.g. production/test).

        Returns:
            The loader itself, for chaining.
        """
        self._document = resolver.resolve(
            self._directory,
            environment=environment,
            env_name=self._env_name
        )
        return self

    def as_hash(self) -> Dict[str, Any]:
        """Return the config document parsed as YAML."""
        return resolver.as_hash(self._ensure_loaded())

    def as_env_value(self) -> str:
        """Return the document serialized for passing as an environment variable."""
        return resolver.as_env_value(self._ensure_loaded())

    def as_env_assignment(self) -> str:
        """Return :meth:`as_env_value` as a ``NAME=VALUE`` assignment to ``env_name``."""
        return resolver.as_env_assignment(self._ensure_loaded(), self._env_name)

    def _ensure_loaded(self) -> RawDocument:
        if self._document is None:
            raise ConfigNotLoadedError(
                "Call load() first to load YAML into memory.",
                details={"env_name": self._env_name, "directory": str(self._directory)}
            )
        return self._document
