"""In-memory icon slot holding the currently installed favicon."""

import threading

from perlinicon.domain import decode_data_uri


class InMemoryIconSlot:
    """Holds at most one installed icon.

    Installing replaces the previous icon in a single step under a lock,
    so readers never observe zero or two icons mid-swap.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data_uri: str | None = None
        self._png: bytes | None = None
        self._installs = 0

    def install(self, data_uri: str) -> None:
        """Replace the installed icon."""
        png = decode_data_uri(data_uri)
        with self._lock:
            self._data_uri = data_uri
            self._png = png
            self._installs += 1

    @property
    def data_uri(self) -> str | None:
        """Installed icon as a data URI, or None."""
        with self._lock:
            return self._data_uri

    @property
    def png(self) -> bytes | None:
        """Installed icon as raw image bytes, or None."""
        with self._lock:
            return self._png

    @property
    def install_count(self) -> int:
        with self._lock:
            return self._installs

    @property
    def is_empty(self) -> bool:
        return self.data_uri is None
