# materials/textures.py
import math
from typing import Optional

import numpy as np

from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Vector3
from pathtracer.materials.perlin import Perlin

# Shown wherever an image texture has no pixel data.
MISSING_TEXTURE_COLOR = Color(1.0, 0.0, 1.0)


class Texture:
    """Base class for all textures."""
    def value(self, uv: UV, p: Vector3) -> Color:
        """Color of the surface at texture coordinate uv and world point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, uv: UV, p: Vector3) -> Color:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern. The parity of sin(f·x)·sin(f·y)·sin(f·z) picks
    the sub-texture, so the pattern does not depend on the surface's UVs.
    """
    def __init__(self, even, odd, frequency: float = 10.0):
        self.even = even if isinstance(even, Texture) else SolidTexture(even)
        self.odd = odd if isinstance(odd, Texture) else SolidTexture(odd)
        self.frequency = frequency

    def value(self, uv: UV, p: Vector3) -> Color:
        f = self.frequency
        sines = math.sin(f * p.x) * math.sin(f * p.y) * math.sin(f * p.z)
        if sines < 0:
            return self.odd.value(uv, p)
        return self.even.value(uv, p)


class NoiseTexture(Texture):
    """
    Grayscale procedural texture driven by Perlin noise.

    Modes:
        "noise"      - smooth noise remapped to [0, 1]
        "turbulence" - summed octaves of absolute noise
        "marble"     - sine bands along z phase-shifted by turbulence
    """
    MODES = ("noise", "turbulence", "marble")

    def __init__(self, scale: float = 1.0, mode: str = "marble",
                 turbulence: float = 10.0, depth: int = 7, seed: int = 0,
                 color: Color = None):
        if mode not in self.MODES:
            raise ValueError(f"Unknown noise mode {mode!r}; expected one of {self.MODES}")
        self.scale = scale
        self.mode = mode
        self.turbulence = turbulence
        self.depth = depth
        self.color = color if color is not None else Color(1.0, 1.0, 1.0)
        self.noise = Perlin(seed)

    def intensity(self, p: Vector3) -> float:
        if self.mode == "noise":
            return 0.5 * (1.0 + self.noise.noise(p * self.scale))
        if self.mode == "turbulence":
            return self.noise.turb(p * self.scale, self.depth)
        return 0.5 * (1.0 + math.sin(self.scale * p.z
                                     + self.turbulence * self.noise.turb(p, self.depth)))

    def value(self, uv: UV, p: Vector3) -> Color:
        g = min(max(self.intensity(p), 0.0), 1.0)
        return self.color * g


class ImageTexture(Texture):
    """
    Nearest-texel lookup into a decoded RGB buffer of shape (height, width, 3)
    with 8-bit channels. UVs are clamped to [0, 1] and v=1 is the top row.
    Without data the texture evaluates to MISSING_TEXTURE_COLOR.
    """
    def __init__(self, data: Optional[np.ndarray] = None):
        if data is not None:
            data = np.asarray(data)
            if data.ndim != 3 or data.shape[2] < 3 or data.shape[0] == 0 or data.shape[1] == 0:
                raise ValueError(f"Image texture data must have shape (height, width, 3), got {data.shape}")
            # Normalize to [0,1] once so lookups are plain indexing
            data = np.ascontiguousarray(data[:, :, :3], dtype=np.float64) / 255.0
        self.data = data

    @property
    def width(self) -> int:
        return 0 if self.data is None else self.data.shape[1]

    @property
    def height(self) -> int:
        return 0 if self.data is None else self.data.shape[0]

    def value(self, uv: UV, p: Vector3) -> Color:
        if self.data is None:
            return MISSING_TEXTURE_COLOR

        uv = uv.clamped()
        u = uv.u
        v = 1.0 - uv.v  # Flip V so that v=1 is the first row

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Color(float(color[0]), float(color[1]), float(color[2]))
