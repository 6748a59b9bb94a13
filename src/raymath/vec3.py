import math
from numbers import Real
from typing import Iterator, List, Tuple

import numpy as np


def _reciprocal(divisor: float) -> float:
    """
    Compute 1 / divisor with IEEE-754 semantics.

    Plain Python division raises ZeroDivisionError, numpy float64 gives
    inf or nan instead, which is what the vector maths relies on.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(1.0) / np.float64(divisor))


class Vec3:
    """
    A 3D double precision vector used for both points and directions.

    Equality is exact, there is no tolerance. Division multiplies by the
    reciprocal of the divisor, so a zero divisor gives inf / nan components
    rather than raising.
    """

    def __init__(self, x: float, y: float, z: float) -> None:
        """
        Initialize a Vec3 instance.

        Args:
            x (float): The x component.
            y (float): The y component.
            z (float): The z component.
        """
        self.x: float = float(x)
        self.y: float = float(y)
        self.z: float = float(z)

    def __repr__(self) -> str:
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def __str__(self) -> str:
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def __eq__(self, other: object) -> bool:
        """
        Check if two Vec3 instances have exactly the same components.

        Args:
            other (object): The object to compare.

        Returns:
            bool: True if equal, False otherwise.
        """
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    # mutable through the in-place operators, so not hashable
    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_list(self) -> List[float]:
        return [self.x, self.y, self.z]

    def to_numpy(self) -> np.ndarray:
        """Return the components as a float64 numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def copy(self) -> "Vec3":
        return Vec3(self.x, self.y, self.z)

    __copy__ = copy

    def __add__(self, other: "Vec3") -> "Vec3":
        """
        Component-wise sum of two vectors, neither operand is modified.

        Args:
            other (Vec3): The vector to add.

        Returns:
            Vec3: The result of vector addition.
        """
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: "Vec3") -> "Vec3":
        """
        Component-wise difference of two vectors, neither operand is modified.

        Args:
            other (Vec3): The vector to subtract.

        Returns:
            Vec3: The result of vector subtraction.
        """
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __isub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mul__(self, scalar: float) -> "Vec3":
        """
        Scale the vector by a scalar, returning a new vector.

        The scalar is converted to a plain float first so numpy scalars do
        not leak into the components.

        Args:
            scalar (float): The scalar value.

        Returns:
            Vec3: The result of scalar multiplication.
        """
        if not isinstance(scalar, Real):
            return NotImplemented
        scalar = float(scalar)
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vec3":
        """
        Multiply the vector by a scalar (right-hand side).

        Args:
            scalar (float): The scalar value.

        Returns:
            Vec3: The result of scalar multiplication.
        """
        return self.__mul__(scalar)

    def __imul__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, Real):
            return NotImplemented
        scalar = float(scalar)
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __truediv__(self, divisor: float) -> "Vec3":
        """
        Divide the vector by a scalar.

        The reciprocal is computed once and each component multiplied by it,
        so results round like ``v * (1 / d)`` and not like ``v.x / d``.

        Args:
            divisor (float): The scalar divisor, zero gives inf / nan.

        Returns:
            Vec3: The scaled vector.
        """
        if not isinstance(divisor, Real):
            return NotImplemented
        d = _reciprocal(divisor)
        return Vec3(self.x * d, self.y * d, self.z * d)

    def __itruediv__(self, divisor: float) -> "Vec3":
        if not isinstance(divisor, Real):
            return NotImplemented
        d = _reciprocal(divisor)
        self.x *= d
        self.y *= d
        self.z *= d
        return self

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vec3":
        """
        Return a unit length copy of the vector.

        A zero vector is not special cased, its components come back as nan.

        Returns:
            Vec3: The normalized vector.
        """
        return self / math.sqrt(self.length_squared())

    def dot(self, other: "Vec3") -> float:
        """
        Compute the dot product of two vectors.

        inf and nan components propagate into the result, nothing is checked.

        Args:
            other (Vec3): The other vector.

        Returns:
            float: The dot product.

        Raises:
            TypeError: If other is not a Vec3.
        """
        if not isinstance(other, Vec3):
            raise TypeError(f"unsupported operand type for dot: 'Vec3' and '{type(other).__name__}'")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        """
        Compute the right-handed cross product of two vectors.

        The result is perpendicular to both inputs and flips sign when the
        operands are swapped. Non-finite components propagate unchecked.

        Args:
            other (Vec3): The other vector.

        Returns:
            Vec3: The cross product vector.

        Raises:
            TypeError: If other is not a Vec3.
        """
        if not isinstance(other, Vec3):
            raise TypeError(f"unsupported operand type for cross: 'Vec3' and '{type(other).__name__}'")
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )
