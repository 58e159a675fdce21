# renderer/background.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color


class SkyGradient:
    """
    Vertical blend from horizon color (direction pointing straight down)
    to zenith color (straight up), driven by the y of the unit direction.
    """
    def __init__(self, horizon: Color = None, zenith: Color = None):
        self.horizon = horizon if horizon is not None else Color(1.0, 1.0, 1.0)
        self.zenith = zenith if zenith is not None else Color(0.5, 0.7, 1.0)

    def __call__(self, ray: Ray) -> Color:
        unit = ray.direction.normalize()
        t = 0.5 * (unit.y + 1.0)
        return self.horizon * (1.0 - t) + self.zenith * t

    def __repr__(self) -> str:
        return f"SkyGradient({self.horizon!r}, {self.zenith!r})"


class SolidBackground:
    """Same color for every escaping ray."""
    def __init__(self, color: Color):
        self.color = color

    def __call__(self, ray: Ray) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidBackground({self.color!r})"
