"""
Numeric helpers shared by the vehicle models.

Provides:
- Clamping to a closed interval
- Linear interpolation (used as per-tick exponential smoothing)
- Exponential moving average
"""

import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp a value to the closed interval [lo, hi].

    Args:
        x: Value to clamp
        lo: Lower bound
        hi: Upper bound

    Returns:
        Clamped value as a Python float
    """
    return float(np.clip(x, lo, hi))


def lerp(a: float, b: float, t: float) -> float:
    """Move ``a`` towards ``b`` by fraction ``t``.

    Applied once per tick this is exponential smoothing towards a target.
    """
    return a + (b - a) * t


def ema(value: float, previous: float, alpha: float) -> float:
    """Exponential moving average step: ``alpha * value + (1 - alpha) * previous``."""
    return alpha * value + (1.0 - alpha) * previous
