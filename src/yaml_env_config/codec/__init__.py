"""Transport codec for config documents.

A config document travels through a single environment variable as
``base64(deflate(yaml_bytes))``. The codec is symmetric: decoding an encoded
document gives back the exact input bytes.

Example:
    >>> from yaml_env_config.codec import decode_transport, encode_transport
    >>> decode_transport(encode_transport(b"key: value\\n"))
    b'key: value\\n'
"""

from .transport import decode_transport, encode_transport

__all__ = ["decode_transport", "encode_transport"]
