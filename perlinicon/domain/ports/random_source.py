"""Random source port - uniform draws for noise seeding and grain."""

from typing import Protocol


class RandomSource(Protocol):
    """Source of uniform random floats in [0, 1)."""

    def random(self) -> float:
        """Draw a uniform float in [0, 1)."""
        ...
