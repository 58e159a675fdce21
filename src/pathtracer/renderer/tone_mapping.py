# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit


@njit
def _gamma_kernel(linear, output, inv_gamma, use_sqrt):
    height, width, channels = linear.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = linear[y, x, c]
                # Negative and NaN components both fail this test
                if not v > 0.0:
                    v = 0.0
                elif use_sqrt:
                    v = math.sqrt(v)
                else:
                    v = v ** inv_gamma
                output[y, x, c] = min(v, 1.0)


@njit
def _quantize_kernel(image, output):
    height, width, channels = image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = image[y, x, c]
                if not v > 0.0:
                    v = 0.0
                elif v > 0.999:
                    v = 0.999
                output[y, x, c] = int(256.0 * v)


def gamma_correct(linear: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Apply gamma correction to a (height, width, 3) linear image and clamp the
    result to [0, 1]. gamma=2 is an exact square root.
    """
    if gamma <= 0:
        raise ValueError(f"gamma must be positive, got {gamma}")
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    output = np.empty_like(linear)
    _gamma_kernel(linear, output, 1.0 / gamma, gamma == 2.0)
    return output


def quantize(image: np.ndarray) -> np.ndarray:
    """
    Convert a [0, 1] float image to 8-bit channels.
    """
    image = np.ascontiguousarray(image, dtype=np.float64)
    output = np.empty(image.shape, dtype=np.uint8)
    _quantize_kernel(image, output)
    return output
