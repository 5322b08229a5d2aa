"""2D gradient (Perlin) noise over a permutation table."""

import math

from ..values.permutation_table import PermutationTable


def fade(t: float) -> float:
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(a: float, b: float, t: float) -> float:
    "Linear interpolation."
    return a + t * (b - a)


def grad(hash_value: int, x: float, y: float) -> float:
    """Dot product of the gradient picked by the low 2 bits of the hash with (x, y).

    Gradients: 0 -> (1, 1), 1 -> (-1, 1), 2 -> (1, -1), 3 -> (-1, -1).
    """
    h = hash_value & 3
    if h == 0:
        return x + y
    if h == 1:
        return -x + y
    if h == 2:
        return x - y
    return -x - y


def perlin_noise(x: float, y: float, perm: PermutationTable) -> float:
    """Evaluate 2D Perlin noise at (x, y).

    Args:
        x, y: Continuous coordinates; the lattice wraps every 256 units.
        perm: Doubled permutation table.

    Returns:
        Noise sample in roughly [-1, 1]; exactly 0 on lattice points.
    """
    x_floor = math.floor(x)
    y_floor = math.floor(y)

    # Unit grid cell
    xi = x_floor & 255
    yi = y_floor & 255

    # Position within the cell
    xf = x - x_floor
    yf = y - y_floor

    u = fade(xf)
    v = fade(yf)

    # Corner hashes
    aa = perm[perm[xi] + yi]
    ab = perm[perm[xi] + yi + 1]
    ba = perm[perm[xi + 1] + yi]
    bb = perm[perm[xi + 1] + yi + 1]

    x1 = lerp(grad(aa, xf, yf), grad(ba, xf - 1.0, yf), u)
    x2 = lerp(grad(ab, xf, yf - 1.0), grad(bb, xf - 1.0, yf - 1.0), u)

    return lerp(x1, x2, v)
