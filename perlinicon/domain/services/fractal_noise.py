"""Fractal Brownian motion built from layered gradient noise."""

from ..values.permutation_table import PermutationTable
from .gradient_noise import perlin_noise

LACUNARITY = 2.0


def octave_noise(
    x: float,
    y: float,
    octaves: int,
    persistence: float,
    perm: PermutationTable,
) -> float:
    """Sum ``octaves`` layers of noise, doubling frequency each layer.

    Each layer is weighted by ``persistence ** octave`` and the total is
    divided by the sum of the weights, so the result stays in roughly [-1, 1].
    """
    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    max_value = 0.0

    for _ in range(octaves):
        total += perlin_noise(x * frequency, y * frequency, perm) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= LACUNARITY

    return total / max_value
