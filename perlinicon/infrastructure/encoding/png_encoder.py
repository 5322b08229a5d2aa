"""PNG encoder backed by Pillow."""

import io

from PIL import Image

from perlinicon.domain import ChannelLayout, EncodingFailure


class PillowPNGEncoder:
    """Encode raw pixel buffers as PNG using Pillow."""

    media_type = "image/png"

    def __init__(self, optimize: bool = False) -> None:
        self._optimize = optimize

    def encode(
        self,
        data: bytes,
        width: int,
        height: int,
        layout: ChannelLayout = ChannelLayout.RGBA,
    ) -> bytes:
        """Encode a flat row-major buffer as PNG bytes.

        Raises:
            EncodingFailure: On bad dimensions, a buffer of the wrong
                length, or a Pillow error while writing.
        """
        if width <= 0 or height <= 0:
            raise EncodingFailure(f"Unsupported dimensions {width}x{height}")

        try:
            layout = ChannelLayout(layout)
        except ValueError as e:
            raise EncodingFailure(f"Unsupported channel layout: {layout}") from e

        expected = width * height * layout.channels
        if len(data) != expected:
            raise EncodingFailure(
                f"Buffer length {len(data)} does not match {width}x{height} "
                f"{layout.value} ({expected} bytes)"
            )

        try:
            image = Image.frombytes(layout.value, (width, height), bytes(data))
            out = io.BytesIO()
            image.save(out, format="PNG", optimize=self._optimize)
        except (ValueError, OSError) as e:
            raise EncodingFailure(str(e)) from e

        return out.getvalue()
