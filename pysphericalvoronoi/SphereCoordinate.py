import numpy as np
from typing import Tuple, Union
from pysphericalvoronoi.CartesianVector import CartesianVector
from pysphericalvoronoi.sphere_utils import (
    sphere_to_cartesian,
    cartesian_to_sphere,
    latlon_to_sphere_coordinates,
    sphere_coordinates_to_latlon,
)


class SphereCoordinate:
    """
    An immutable angular position on the unit sphere.

    Parameters
    ----------
    theta : float
        Colatitude in radians, ``0`` at the ``+y`` pole and ``pi`` at ``-y``.
    phi : float
        Longitude in radians around the ``+y`` axis, ``0`` at ``+z`` and
        ``pi / 2`` at ``+x``.

    Notes
    -----
    Two coordinates are equal when they denote the same point, i.e. when
    their Cartesian forms are equal within the shared tolerance. This keeps
    equality meaningful at the poles, where ``phi`` is arbitrary, and across
    the ``0 / 2 pi`` longitude seam.
    """

    __slots__ = ("_theta", "_phi")

    RADIUS = 1.0

    def __init__(self, theta: float, phi: float):
        object.__setattr__(self, "_theta", float(theta))
        object.__setattr__(self, "_phi", float(phi))

    def __setattr__(self, name, value):
        raise AttributeError("SphereCoordinate is immutable")

    @property
    def theta(self) -> float:
        return self._theta

    @property
    def phi(self) -> float:
        return self._phi

    def to_cartesian(self) -> CartesianVector:
        """Return the point as a Cartesian unit vector."""
        return CartesianVector.from_array(
            self.RADIUS * sphere_to_cartesian(self._theta, self._phi)
        )

    @classmethod
    def from_cartesian(cls, vector: CartesianVector) -> "SphereCoordinate":
        """
        Return the coordinate of the direction of ``vector``.

        The vector is normalized first, so its length is irrelevant. The
        zero vector has no direction and yields NaN angles.

        Parameters
        ----------
        vector : CartesianVector
            Any nonzero vector.

        Returns
        -------
        SphereCoordinate
            ``theta`` in ``[0, pi]`` and ``phi`` in ``[0, 2 pi)``.
        """
        theta, phi = cartesian_to_sphere(vector.to_array())
        return cls(theta, phi)

    @classmethod
    def from_latlon(cls, lat: float, lon: float) -> "SphereCoordinate":
        """Create a coordinate from latitude / longitude in degrees."""
        theta, phi = latlon_to_sphere_coordinates(np.array([lat, lon]))
        return cls(theta, phi)

    def to_latlon(self) -> Tuple[float, float]:
        """Return ``(lat, lon)`` in degrees, longitude in ``[-180, 180)``."""
        lat, lon = sphere_coordinates_to_latlon(np.array([self._theta, self._phi]))
        return float(lat), float(lon)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SphereCoordinate):
            return NotImplemented
        return self.to_cartesian() == other.to_cartesian()

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.to_cartesian())

    def __str__(self) -> str:
        return f"Spherical: {self._theta}/{self._phi}"

    def __repr__(self) -> str:
        return f"SphereCoordinate(theta={self._theta!r}, phi={self._phi!r})"


def to_unit_vector(point: Union[SphereCoordinate, CartesianVector]) -> CartesianVector:
    """
    Return ``point`` as a Cartesian unit vector.

    Coordinates are converted with :meth:`SphereCoordinate.to_cartesian`;
    vectors are normalized with :attr:`CartesianVector.as_unit_vector`.
    """
    if isinstance(point, SphereCoordinate):
        return point.to_cartesian()
    if isinstance(point, CartesianVector):
        return point.as_unit_vector
    raise TypeError(
        f"Expected SphereCoordinate or CartesianVector, got {type(point).__name__}"
    )
