"""Icon sink port - where a generated icon gets installed."""

from typing import Protocol


class IconSink(Protocol):
    """Protocol for whatever displays the icon.

    ``install`` must replace any previously installed icon, so at most one
    icon is live at a time.
    """

    def install(self, data_uri: str) -> None:
        """Install an icon given as a data URI."""
        ...
