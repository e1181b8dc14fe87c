"""Resolution of the raw config document and the views derived from it."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..codec.transport import decode_transport, encode_transport
from ..exceptions import ConfigFileError, ConfigParseError

logger = logging.getLogger(__name__)

DEFAULT_ENV_NAME = "APP_CONFIG"
DEFAULT_FILE_STEM = "default"
CONFIG_SUFFIX = ".yml"


@dataclass(frozen=True)
class RawDocument:
    """Config document exactly as it was read, before YAML parsing.

    Attributes:
        data: Document bytes, unmodified.
        source: Where the bytes came from (env var name or file path).
    """

    data: bytes
    source: str

    @property
    def text(self) -> str:
        return self.data.decode("utf-8")


def resolve_config_path(
    directory: Union[str, Path],
    environment: Optional[str] = None
) -> Path:
    """Pick the YAML file for an environment label.

    ``<directory>/<environment>.yml`` is used when it exists on disk right now,
    otherwise ``<directory>/default.yml``.
    """
    directory = Path(directory)

    if environment:
        env_path = directory / f"{environment}{CONFIG_SUFFIX}"
        if env_path.exists():
            logger.debug(f"Using environment config file {env_path}")
            return env_path
        logger.debug(f"No config file for environment '{environment}', falling back to default")

    return directory / f"{DEFAULT_FILE_STEM}{CONFIG_SUFFIX}"


def _read_config_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        logger.error(f"Failed to read config file {path}: {e}")
        raise ConfigFileError(
            "Failed to read configuration file",
            details={"path": str(path)},
            original_exception=e
        ) from e


def resolve(
    directory: Union[str, Path],
    environment: Optional[str] = None,
    env_name: str = DEFAULT_ENV_NAME,
    environ: Optional[Mapping[str, str]] = None
) -> RawDocument:
    """Resolve the raw config document.

    The environment variable ``env_name`` always wins when it is present, even
    if its value is empty. Otherwise the document is read from the YAML file
    chosen by :func:`resolve_config_path`.

    Args:
        directory: Directory holding ``default.yml`` and ``<environment>.yml`` files.
        environment: Optional environment label, e.g. ``"production"``.
        env_name: Name of the environment variable carrying a transport string.
        environ: Environment mapping to read. Defaults to ``os.environ``.

    Returns:
        The resolved raw document.

    Raises:
        TransportDecodeError: If the environment variable holds a malformed payload.
        ConfigFileError: If the selected file cannot be read.
    """
    if environ is None:
        environ = os.environ

    if env_name in environ:
        data = decode_transport(environ[env_name])
        logger.info(f"Loaded config from environment variable {env_name} ({len(data)} bytes)")
        return RawDocument(data=data, source=env_name)

    path = resolve_config_path(directory, environment)
    data = _read_config_file(path)
    logger.info(f"Loaded config from {path} ({len(data)} bytes)")
    return RawDocument(data=data, source=str(path))


def as_hash(document: RawDocument) -> Dict[str, Any]:
    """Parse the document as YAML.

    Raises:
        ConfigParseError: If the document is not valid YAML.
    """
    try:
        parsed = yaml.safe_load(document.data)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML from {document.source}: {e}")
        raise ConfigParseError(
            "Failed to parse YAML configuration",
            details={"source": document.source},
            original_exception=e
        ) from e

    return parsed if parsed is not None else {}


def as_env_value(document: RawDocument) -> str:
    """Serialize the document into a transport string for an environment variable."""
    return encode_transport(document.data)


def as_env_assignment(document: RawDocument, env_name: str = DEFAULT_ENV_NAME) -> str:
    """Return a ready-to-export ``NAME=VALUE`` line."""
    return f"{env_name}={as_env_value(document)}"
