"""Normally distributed annual returns via the Box-Muller transform."""

import math
import random
from typing import Optional


def _open_unit(rng: random.Random) -> float:
    """Uniform draw from (0, 1); random() can return exactly 0."""
    u = rng.random()
    while u <= 0.0:
        u = rng.random()
    return u


def normal_return(mean: float, std_dev: float, rng: Optional[random.Random] = None) -> float:
    """Draw one return from N(mean, std_dev) using two fresh uniforms."""
    rng = rng or random.Random()
    u1 = _open_unit(rng)
    u2 = _open_unit(rng)
    z = math.sqrt(-2 * math.log(u1)) * math.cos(2 * math.pi * u2)
    return mean + z * std_dev
