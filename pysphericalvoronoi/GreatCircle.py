"""
Great circle module
===================

A *great circle* is the intersection of the sphere with a plane through its
centre, the spherical analogue of a straight line. It is represented here by
the unit normal of that plane, which is the normalized cross product of any
two distinct, non-antipodal points on the circle.

Every pair of distinct great circles meets in exactly two antipodal points.
:meth:`GreatCircle.intersection` returns one of them; the other is its
negation. Identical circles (parallel or anti-parallel normals) have no
unique intersection and yield ``None``.
"""

import logging
import numpy as np
from typing import Optional, Union
from pysphericalvoronoi.CartesianVector import CartesianVector
from pysphericalvoronoi.SphereCoordinate import SphereCoordinate, to_unit_vector
from pysphericalvoronoi.sphere_utils import EPSILON, is_almost_equal

Point = Union[SphereCoordinate, CartesianVector]


class GreatCircle:
    """
    The great circle through two points of the unit sphere.

    Parameters
    ----------
    start : SphereCoordinate or CartesianVector
        A point on the circle.
    end : SphereCoordinate or CartesianVector
        Another point on the circle, neither equal nor antipodal to ``start``.

    Notes
    -----
    For identical or antipodal points the plane is not determined. The circle
    is still constructed, a warning is logged, and its normal has NaN
    components, so every later query on it is undefined.
    """

    __slots__ = ("_normal",)

    def __init__(self, start: Point, end: Point):
        a = to_unit_vector(start)
        b = to_unit_vector(end)
        normal = a.cross_product(b)
        if is_almost_equal(normal.length, 0.0):
            logging.warning(
                "Degenerate great circle: %s and %s are identical or antipodal.",
                start, end
            )
        object.__setattr__(self, "_normal", normal.as_unit_vector)

    def __setattr__(self, name, value):
        raise AttributeError("GreatCircle is immutable")

    @classmethod
    def from_normal(cls, normal: CartesianVector) -> "GreatCircle":
        """Create the great circle whose plane has the given (nonzero) normal."""
        circle = cls.__new__(cls)
        object.__setattr__(circle, "_normal", normal.as_unit_vector)
        return circle

    @property
    def normal(self) -> CartesianVector:
        """Unit normal of the circle's plane."""
        return self._normal

    def is_on_circle(self, point: Point, tol: float = EPSILON) -> bool:
        """
        Check whether ``point`` lies on this great circle.

        Parameters
        ----------
        point : SphereCoordinate or CartesianVector
            The point to test. Vectors are normalized first.
        tol : float
            Absolute tolerance on the dot product with the plane normal.

        Returns
        -------
        bool
            True if ``point . normal`` is within ``tol`` of zero.
        """
        return is_almost_equal(to_unit_vector(point).dot_product(self._normal), 0.0, tol)

    def tangent_at(
        self,
        point: Point,
        direction: Optional[CartesianVector] = None
    ) -> CartesianVector:
        """
        Unit tangent of the circle at ``point``.

        There are two opposite tangents at every point. Without ``direction``
        the one returned is ``normal x point``. With ``direction`` the one
        whose dot product with ``direction`` is non-negative is returned.

        Parameters
        ----------
        point : SphereCoordinate or CartesianVector
            A point on this circle.
        direction : CartesianVector, optional
            Preferred direction of travel.

        Returns
        -------
        CartesianVector
            A unit vector perpendicular to both ``point`` and the normal.
        """
        tangent = self._normal.cross_product(to_unit_vector(point)).as_unit_vector
        if direction is not None and tangent.dot_product(direction) < 0:
            return -tangent
        return tangent

    def intersection(self, other: "GreatCircle", tol: float = EPSILON) -> Optional[CartesianVector]:
        """
        One of the two antipodal intersection points with ``other``.

        Parameters
        ----------
        other : GreatCircle
            The circle to intersect with.
        tol : float
            Circles whose normals' cross product is shorter than ``tol`` are
            treated as identical.

        Returns
        -------
        CartesianVector or None
            A unit vector on both circles (its negation is the other
            intersection), or None if the circles coincide.
        """
        direction = self._normal.cross_product(other._normal)
        if is_almost_equal(direction.length, 0.0, tol) or not np.isfinite(direction.length):
            return None
        return direction.as_unit_vector

    def intersects(self, other: "GreatCircle", tol: float = EPSILON) -> bool:
        return self.intersection(other, tol) is not None

    def __eq__(self, other) -> bool:
        if not isinstance(other, GreatCircle):
            return NotImplemented
        return self._normal == other._normal or self._normal == -other._normal

    def __hash__(self) -> int:
        # a circle and its reversed orientation are the same set of points
        return hash(frozenset((self._normal, -self._normal)))

    def __repr__(self) -> str:
        return f"GreatCircle(normal={self._normal!r})"
