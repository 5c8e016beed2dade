# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit


@njit
def _gamma2_kernel(accumulated, scale, output):
    height, width = accumulated.shape[0], accumulated.shape[1]
    for y in range(height):
        for x in range(width):
            for c in range(3):
                value = accumulated[y, x, c] * scale
                # NaN samples come out black
                if value != value or value < 0.0:
                    value = 0.0
                value = math.sqrt(value)
                if value > 1.0:
                    value = 1.0
                output[y, x, c] = np.uint8(int(value * 255.0))
            output[y, x, 3] = 255


def to_rgba8(accumulated, samples_per_pixel: int) -> np.ndarray:
    """
    Convert summed linear radiance (``height x width x 3``) to RGBA bytes:
    average over the samples, gamma-2 correct, clamp to [0, 1], scale by 255.
    Alpha is opaque.
    """
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    if accumulated.ndim != 3 or accumulated.shape[2] != 3:
        raise ValueError(f"Expected a height x width x 3 array, got shape {accumulated.shape}")
    output = np.empty((accumulated.shape[0], accumulated.shape[1], 4), dtype=np.uint8)
    _gamma2_kernel(accumulated, 1.0 / samples_per_pixel, output)
    return output
