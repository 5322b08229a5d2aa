"""Pixel buffer entity for synthesized rasters."""

from dataclasses import dataclass, field

from ..values.channel_layout import ChannelLayout

OPAQUE = 255


@dataclass
class PixelBuffer:
    """Flat grayscale pixel buffer, row-major, top-to-bottom, left-to-right.

    Pixels are appended one at a time; the buffer is complete once it
    holds ``width * height`` pixels.
    """

    width: int
    height: int
    layout: ChannelLayout = ChannelLayout.RGBA
    _data: bytearray = field(default_factory=bytearray)

    @property
    def expected_length(self) -> int:
        """Length in bytes of a fully populated buffer."""
        return self.width * self.height * self.layout.channels

    @property
    def is_complete(self) -> bool:
        return len(self._data) == self.expected_length

    def add_gray(self, value: int) -> None:
        """Append one grayscale pixel in the buffer's channel layout.

        L stores the value once, RGB repeats it per channel and RGBA adds
        an opaque alpha.
        """
        gray = (value,) * min(self.layout.channels, 3)
        if self.layout is ChannelLayout.RGBA:
            gray += (OPAQUE,)
        self._data.extend(gray)

    def pixel(self, x: int, y: int) -> tuple[int, ...]:
        """Return the channel values of the pixel at (x, y)."""
        channels = self.layout.channels
        start = (y * self.width + x) * channels
        return tuple(self._data[start : start + channels])

    def to_bytes(self) -> bytes:
        """Get the buffer contents as immutable bytes."""
        return bytes(self._data)

    def __len__(self) -> int:
        """Return number of bytes in buffer."""
        return len(self._data)
