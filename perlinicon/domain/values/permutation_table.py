"""Permutation table value object for gradient noise."""

from dataclasses import dataclass

from ..ports.random_source import RandomSource

TABLE_SIZE = 256


@dataclass(frozen=True, slots=True)
class PermutationTable:
    """Shuffled 0..255 sequence followed by a copy of itself.

    The doubled layout lets corner hashing index ``values[values[x] + y + 1]``
    without wrap-around checks.
    """

    values: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.values) != TABLE_SIZE * 2:
            raise ValueError(f"Permutation table must have {TABLE_SIZE * 2} entries")
        first, second = self.values[:TABLE_SIZE], self.values[TABLE_SIZE:]
        if sorted(first) != list(range(TABLE_SIZE)):
            raise ValueError("First half must be a permutation of 0..255")
        if first != second:
            raise ValueError("Second half must duplicate the first half")

    @classmethod
    def shuffled(cls, random_source: RandomSource) -> "PermutationTable":
        """Build a table with a Fisher-Yates shuffle driven by ``random_source``."""
        perm = list(range(TABLE_SIZE))
        for i in range(TABLE_SIZE - 1, 0, -1):
            j = int(random_source.random() * (i + 1))
            perm[i], perm[j] = perm[j], perm[i]
        return cls(tuple(perm * 2))

    @classmethod
    def identity(cls) -> "PermutationTable":
        """Unshuffled table, mostly useful for tests."""
        return cls(tuple(range(TABLE_SIZE)) * 2)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)
