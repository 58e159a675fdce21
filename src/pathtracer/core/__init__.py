from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Point3, Vector3

__all__ = ["AABB", "Ray", "UV", "Vector3", "Color", "Point3"]
