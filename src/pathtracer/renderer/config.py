# renderer/config.py
from dataclasses import dataclass, replace
from typing import Optional

# Shadow-acne offset: new rays ignore hits closer than this.
DEFAULT_T_MIN = 0.001

QUALITY_LEVELS = {
    "interactive": {"samples_per_pixel": 1, "max_depth": 2},
    "balanced": {"samples_per_pixel": 16, "max_depth": 4},
    "high_quality": {"samples_per_pixel": 100, "max_depth": 50},
}


@dataclass(frozen=True)
class RenderSettings:
    """
    Render invocation parameters.

    width may be left as None to derive it from the camera aspect ratio.
    workers=None uses one worker process per CPU; workers=1 renders in the
    calling process. seed fixes every random decision of the render.
    """
    height: int = 108
    width: Optional[int] = None
    samples_per_pixel: int = 50
    max_depth: int = 8
    workers: Optional[int] = 1
    seed: int = 0
    t_min: float = DEFAULT_T_MIN

    def __post_init__(self):
        _require_positive_int("height", self.height)
        if self.width is not None:
            _require_positive_int("width", self.width)
        _require_positive_int("samples_per_pixel", self.samples_per_pixel)
        _require_positive_int("max_depth", self.max_depth)
        if self.workers is not None:
            _require_positive_int("workers", self.workers)
        if not isinstance(self.seed, int):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if not self.t_min > 0:
            raise ValueError(f"t_min must be positive, got {self.t_min}")

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        """Settings for a named entry of QUALITY_LEVELS, with overrides applied."""
        if name not in QUALITY_LEVELS:
            raise KeyError(f"Unknown quality level {name!r}; known levels: {sorted(QUALITY_LEVELS)}")
        params = dict(QUALITY_LEVELS[name])
        params.update(overrides)
        return cls(**params)

    def with_overrides(self, **overrides) -> "RenderSettings":
        return replace(self, **overrides)

    def resolved_width(self, aspect_ratio: float) -> int:
        if self.width is not None:
            return self.width
        return max(1, round(self.height * aspect_ratio))


def _require_positive_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
