"""Transport encoding for passing a whole config document through one env var."""

import base64
import binascii
import logging
import zlib
from typing import Union

from ..exceptions import TransportDecodeError

logger = logging.getLogger(__name__)


def encode_transport(data: Union[bytes, str]) -> str:
    """Compress and base64-encode a raw document.

    Args:
        data: Raw document bytes. Text is encoded as UTF-8 first.

    Returns:
        Strict base64 (standard alphabet, padded, unwrapped) of the
        zlib-deflated bytes.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    compressed = zlib.compress(data)
    return base64.b64encode(compressed).decode("ascii")


def decode_transport(value: str) -> bytes:
    """Inverse of :func:`encode_transport`.

    Args:
        value: Transport string, usually read from an environment variable.

    Returns:
        The original raw document bytes.

    Raises:
        TransportDecodeError: If the value is not strict base64 (stage
            ``"decode"``) or not a valid zlib stream (stage ``"decompress"``).
    """
    try:
        compressed = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.error(f"Transport string is not valid base64: {e}")
        raise TransportDecodeError(
            "Failed to base64-decode transport string",
            stage="decode",
            details={"length": len(value)},
            original_exception=e
        ) from e

    try:
        return zlib.decompress(compressed)
    except zlib.error as e:
        logger.error(f"Transport payload is not a valid zlib stream: {e}")
        raise TransportDecodeError(
            "Failed to decompress transport payload",
            stage="decompress",
            details={"compressed_bytes": len(compressed)},
            original_exception=e
        ) from e
