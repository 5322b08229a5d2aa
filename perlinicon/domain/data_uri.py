"""Base64 data URIs for embedding encoded images."""

import base64

DATA_URI_PREFIX = "data:{media_type};base64,"


def to_data_uri(payload: bytes, media_type: str = "image/png") -> str:
    """Wrap encoded image bytes as an embeddable base64 data URI."""
    encoded = base64.b64encode(payload).decode("ascii")
    return DATA_URI_PREFIX.format(media_type=media_type) + encoded


def decode_data_uri(data_uri: str) -> bytes:
    """Extract the raw bytes from a base64 data URI."""
    _, _, payload = data_uri.partition(";base64,")
    return base64.b64decode(payload)
