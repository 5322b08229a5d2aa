"""Shared test fixtures and configuration."""

import pytest

from perlinicon.domain import (
    ChannelLayout,
    EncodingFailure,
    FaviconSettings,
    PermutationTable,
)
from perlinicon.infrastructure.encoding import PillowPNGEncoder
from perlinicon.infrastructure.randomness import SeededRandomSource

# ============= Fake Random Sources =============


class FixedRandomSource:
    """Returns the same draw every time and counts the draws."""

    def __init__(self, value: float = 0.5):
        self._value = value
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return self._value


class SequenceRandomSource:
    """Returns draws from a list, then repeats the last one."""

    def __init__(self, values: list[float]):
        self._values = list(values)
        self._index = 0

    def random(self) -> float:
        value = self._values[min(self._index, len(self._values) - 1)]
        self._index += 1
        return value


@pytest.fixture
def fixed_random():
    """Random source that always draws 0.5."""
    return FixedRandomSource(0.5)


@pytest.fixture
def seeded_random():
    """Reproducible pseudo-random source."""
    return SeededRandomSource(1234)


# RGBA bytes of the 4x4, single-octave canvas with every draw at 0.5, row by row
FIXED_DRAW_RGBA = bytes.fromhex(
    "acacacff 8e8e8eff 656565ff 8e8e8eff"
    "7c7c7cff a2a2a2ff 707070ff 828282ff"
    "ccccccff 797979ff 000000ff 8a8a8aff"
    "7c7c7cff 878787ff 595959ff 838383ff"
)


# ============= Domain Fixtures =============


@pytest.fixture
def default_settings():
    """Default 32x32 settings."""
    return FaviconSettings.default()


@pytest.fixture
def tiny_settings():
    """4x4 canvas with a single octave."""
    return FaviconSettings(size=4, octaves=1)


@pytest.fixture
def identity_table():
    """Unshuffled permutation table."""
    return PermutationTable.identity()


@pytest.fixture
def shuffled_table(seeded_random):
    """Permutation table shuffled by a seeded source."""
    return PermutationTable.shuffled(seeded_random)


# ============= Encoder Fixtures =============


class FailingEncoder:
    """Encoder that always fails."""

    media_type = "image/png"

    def __init__(self):
        self.calls = 0

    def encode(self, data, width, height, layout=ChannelLayout.RGBA):
        self.calls += 1
        raise EncodingFailure("encoder unavailable")


class TruncatingEncoder:
    """Drops the last byte before handing the buffer to the real encoder."""

    media_type = "image/png"

    def __init__(self):
        self._inner = PillowPNGEncoder()

    def encode(self, data, width, height, layout=ChannelLayout.RGBA):
        return self._inner.encode(data[:-1], width, height, layout)


@pytest.fixture
def png_encoder():
    """Real Pillow-backed PNG encoder."""
    return PillowPNGEncoder()


@pytest.fixture
def failing_encoder():
    """Encoder that raises EncodingFailure."""
    return FailingEncoder()


# ============= Icon Sink Fixtures =============


class RecordingIconSink:
    """Icon sink that records every install."""

    def __init__(self):
        self.installed: list[str] = []

    def install(self, data_uri: str) -> None:
        self.installed.append(data_uri)

    @property
    def current(self) -> str | None:
        return self.installed[-1] if self.installed else None


@pytest.fixture
def recording_sink():
    """Empty recording icon sink."""
    return RecordingIconSink()


@pytest.fixture
def missing_config(tmp_path):
    """Path to a config file that does not exist."""
    return tmp_path / "missing.yaml"
