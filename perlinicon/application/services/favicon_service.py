"""Favicon service - generation, encoding and installation."""

import logging

from perlinicon.domain import (
    EncodingFailure,
    FaviconSettings,
    FaviconSynthesizer,
    IconSink,
    ImageEncoder,
    RandomSource,
    to_data_uri,
)

logger = logging.getLogger(__name__)


class FaviconService:
    """Service for producing favicons.

    EncodingFailure never escapes this service: generation returns an
    empty string instead, and ``refresh`` leaves the installed icon alone.
    """

    def __init__(
        self,
        encoder: ImageEncoder,
        random_source: RandomSource,
        settings: FaviconSettings | None = None,
    ) -> None:
        self._encoder = encoder
        self._synthesizer = FaviconSynthesizer(random_source)
        self._settings = settings or FaviconSettings.default()

    @property
    def settings(self) -> FaviconSettings:
        return self._settings

    def generate_png(self) -> bytes:
        """Synthesize and encode a favicon.

        Raises:
            EncodingFailure: If the encoder rejects the buffer.
        """
        buffer = self._synthesizer.synthesize(self._settings)
        logger.debug(
            "Favicon synthesized size=%d octaves=%d bytes=%d",
            self._settings.size,
            self._settings.octaves,
            len(buffer),
        )
        return self._encoder.encode(buffer.to_bytes(), buffer.width, buffer.height, buffer.layout)

    def generate_data_uri(self) -> str:
        """Generate a favicon as a data URI.

        Returns:
            ``data:image/png;base64,...`` or an empty string on failure.
        """
        try:
            payload = self.generate_png()
        except EncodingFailure as e:
            logger.warning("Favicon encoding failed size=%d: %s", self._settings.size, e)
            return ""
        return to_data_uri(payload, self._encoder.media_type)

    def refresh(self, sink: IconSink) -> bool:
        """Generate a new favicon and install it.

        Returns:
            True if an icon was installed, False if generation failed and
            the sink was left untouched.
        """
        data_uri = self.generate_data_uri()
        if not data_uri:
            return False

        sink.install(data_uri)
        logger.info("Favicon installed size=%d", self._settings.size)
        return True
