from .ray import Ray
from .vec3 import Vec3

__all__ = ["Ray", "Vec3"]
