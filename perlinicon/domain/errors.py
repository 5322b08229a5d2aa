"""Domain errors."""


class EncodingFailure(Exception):
    """Raised when a pixel buffer cannot be serialized to a compressed image."""
