from dataclasses import dataclass

from .vec3 import Vec3


# frozen so a ray cannot be re-pointed once built, equality is written out
# below so it stays exact per component like Vec3
@dataclass(frozen=True, eq=False)
class Ray:
    """A ray from origin along dir, dir does not have to be unit length."""

    origin: Vec3
    dir: Vec3

    def __post_init__(self):
        # Vec3 is mutable so take our own copies, otherwise the caller's
        # vectors are shared with the ray
        object.__setattr__(self, "origin", self.origin.copy())
        object.__setattr__(self, "dir", self.dir.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.dir == other.dir

    # holds mutable vectors, so not hashable
    __hash__ = None

    def point_at(self, t: float) -> Vec3:
        """
        Return the point along the ray at parameter t.

        Args:
            t (float): The ray parameter, any value is allowed.

        Returns:
            Vec3: origin + dir * t
        """
        return self.origin + self.dir * t
