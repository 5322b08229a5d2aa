"""Image encoder port - serialization of raw pixel buffers."""

from typing import Protocol

from ..values.channel_layout import ChannelLayout


class ImageEncoder(Protocol):
    """Protocol for compressed image encoders.

    Implementations raise ``EncodingFailure`` when the buffer cannot be
    serialized.
    """

    @property
    def media_type(self) -> str:
        """Media type of the produced bytes (e.g. ``image/png``)."""
        ...

    def encode(
        self,
        data: bytes,
        width: int,
        height: int,
        layout: ChannelLayout = ChannelLayout.RGBA,
    ) -> bytes:
        """Encode a flat row-major pixel buffer."""
        ...
