import numbers
import numpy as np
from typing import Iterator, Union
from pysphericalvoronoi.sphere_utils import EPSILON, is_almost_equal, quantize


class CartesianVector:
    """
    An immutable point / direction in three-dimensional Cartesian space.

    Axes follow the screen convention of the package: ``x`` runs left to
    right, ``y`` bottom to top (the polar axis) and ``z`` far to near.

    Parameters
    ----------
    x : float
        Position on the horizontal axis.
    y : float
        Position on the vertical axis.
    z : float
        Position on the depth axis.

    Notes
    -----
    Equality is tolerant: two vectors are equal when every pair of components
    differs by less than :data:`~pysphericalvoronoi.sphere_utils.EPSILON`.
    The hash is computed from the components quantized to the same tolerance
    grid.

    :attr:`length` and :attr:`as_unit_vector` are undefined for the zero
    vector; normalizing it yields NaN components and numpy's RuntimeWarning.
    """

    __slots__ = ("_xyz",)
    # numpy scalars defer to __rmul__ instead of broadcasting over the object
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float):
        xyz = np.array([x, y, z], dtype=float)
        xyz.flags.writeable = False
        object.__setattr__(self, "_xyz", xyz)

    def __setattr__(self, name, value):
        raise AttributeError("CartesianVector is immutable")

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "CartesianVector":
        """Create a vector from any length-3 array-like."""
        arr = np.asarray(arr, dtype=float)
        if arr.shape != (3,):
            raise ValueError("Input must be an array of shape (3,).")
        return cls(arr[0], arr[1], arr[2])

    def to_array(self) -> np.ndarray:
        """Return a writable copy of the components as a (3,) array."""
        return self._xyz.copy()

    @property
    def x(self) -> float:
        return float(self._xyz[0])

    @property
    def y(self) -> float:
        return float(self._xyz[1])

    @property
    def z(self) -> float:
        return float(self._xyz[2])

    @property
    def length(self) -> float:
        """Euclidean norm of the vector."""
        return float(np.linalg.norm(self._xyz))

    @property
    def as_unit_vector(self) -> "CartesianVector":
        """The vector scaled to length 1."""
        return CartesianVector.from_array(self._xyz / np.linalg.norm(self._xyz))

    def cross_product(self, other: "CartesianVector") -> "CartesianVector":
        """
        Cross product ``self x other``.

        Parameters
        ----------
        other : CartesianVector
            Right-hand operand.

        Returns
        -------
        CartesianVector
            A vector perpendicular to both operands.
        """
        return CartesianVector.from_array(np.cross(self._xyz, other._xyz))

    def dot_product(self, other: "CartesianVector") -> float:
        return float(np.dot(self._xyz, other._xyz))

    def __neg__(self) -> "CartesianVector":
        return CartesianVector.from_array(-self._xyz)

    def __add__(self, other: "CartesianVector") -> "CartesianVector":
        if not isinstance(other, CartesianVector):
            return NotImplemented
        return CartesianVector.from_array(self._xyz + other._xyz)

    def __sub__(self, other: "CartesianVector") -> "CartesianVector":
        if not isinstance(other, CartesianVector):
            return NotImplemented
        return CartesianVector.from_array(self._xyz - other._xyz)

    def __mul__(self, scalar: Union[int, float]) -> "CartesianVector":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return CartesianVector.from_array(self._xyz * float(scalar))

    def __rmul__(self, scalar: Union[int, float]) -> "CartesianVector":
        return self.__mul__(scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CartesianVector):
            return NotImplemented
        return all(
            is_almost_equal(a, b) for a, b in zip(self._xyz, other._xyz)
        )

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(tuple(quantize(float(c), EPSILON) for c in self._xyz))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"Cartesian: {self.x}/{self.y}/{self.z}"

    def __repr__(self) -> str:
        return f"CartesianVector(x={self.x!r}, y={self.y!r}, z={self.z!r})"
