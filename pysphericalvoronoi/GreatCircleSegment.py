import numpy as np
from typing import Optional, Union
from pysphericalvoronoi.CartesianVector import CartesianVector
from pysphericalvoronoi.GreatCircle import GreatCircle
from pysphericalvoronoi.SphereCoordinate import SphereCoordinate, to_unit_vector
from pysphericalvoronoi.sphere_utils import EPSILON, is_almost_equal

Point = Union[SphereCoordinate, CartesianVector]


def _as_coordinate(point: Point) -> SphereCoordinate:
    if isinstance(point, SphereCoordinate):
        return point
    return SphereCoordinate.from_cartesian(point)


class GreatCircleSegment:
    """
    A geodesic arc: the shorter part of a great circle between two points.

    Parameters
    ----------
    start : SphereCoordinate or CartesianVector
        First end point of the arc.
    end : SphereCoordinate or CartesianVector
        Second end point of the arc.
    base_circle : GreatCircle, optional
        The great circle the arc belongs to. Derived from ``start`` and
        ``end`` when omitted; when given, both end points must lie on it.

    Raises
    ------
    ValueError
        If ``base_circle`` is given and ``start`` or ``end`` is not on it.
    """

    __slots__ = ("_base_circle", "_start", "_end", "_length")

    def __init__(
        self,
        start: Point,
        end: Point,
        base_circle: Optional[GreatCircle] = None
    ):
        if base_circle is None:
            base_circle = GreatCircle(start, end)
        elif not base_circle.is_on_circle(start) or not base_circle.is_on_circle(end):
            raise ValueError("start and end have to be on the base circle.")

        object.__setattr__(self, "_base_circle", base_circle)
        object.__setattr__(self, "_start", _as_coordinate(start))
        object.__setattr__(self, "_end", _as_coordinate(end))
        object.__setattr__(self, "_length", self.calculate_arc_length(start, end))

    def __setattr__(self, name, value):
        raise AttributeError("GreatCircleSegment is immutable")

    @property
    def base_circle(self) -> GreatCircle:
        return self._base_circle

    @property
    def start(self) -> SphereCoordinate:
        return self._start

    @property
    def end(self) -> SphereCoordinate:
        return self._end

    @property
    def length(self) -> float:
        """Angular length of the arc in radians (equal to its length on the unit sphere)."""
        return self._length

    @staticmethod
    def calculate_arc_length(start: Point, end: Point) -> float:
        """
        Great-circle distance between two points of the unit sphere.

        Parameters
        ----------
        start : SphereCoordinate or CartesianVector
            One point of the arc.
        end : SphereCoordinate or CartesianVector
            The other point of the arc.

        Returns
        -------
        float
            ``2 asin(chord / 2)`` in radians, where ``chord`` is the straight
            line distance between the two points.
        """
        chord = (to_unit_vector(start) - to_unit_vector(end)).length
        return float(2 * np.arcsin(np.clip(chord / 2, 0.0, 1.0)))

    @property
    def midpoint(self) -> CartesianVector:
        """
        The point of the arc at equal distance from both end points.

        The normalized sum of the end points and its antipode are both on
        the base circle; the one that lies on the arc is returned.
        """
        a = self._start.to_cartesian()
        b = self._end.to_cartesian()
        chord_sum = a + b
        if is_almost_equal(chord_sum.length, 0.0):
            # antipodal end points: every half of the circle is a shortest arc
            candidate = self._base_circle.tangent_at(a)
        else:
            candidate = chord_sum.as_unit_vector

        if self.is_on_arc(candidate):
            return candidate
        return -candidate

    def is_on_arc(self, point: Point, tol: float = EPSILON) -> bool:
        """
        Check whether ``point`` lies on this arc.

        The point is on the arc when its distances to both end points add up
        to the arc length; points on the base circle outside the arc give a
        strictly larger sum.

        Parameters
        ----------
        point : SphereCoordinate or CartesianVector
            The point to test. Vectors are normalized first.
        tol : float
            Absolute tolerance in radians.

        Returns
        -------
        bool
            True if the point is on the arc.
        """
        start_to_point = self.calculate_arc_length(self._start, point)
        end_to_point = self.calculate_arc_length(self._end, point)
        return is_almost_equal(self._length - start_to_point - end_to_point, 0.0, tol)

    def tangent_at(
        self,
        point: Point,
        direction: Optional[CartesianVector] = None
    ) -> CartesianVector:
        """Tangent of the base circle at ``point``; see :meth:`GreatCircle.tangent_at`."""
        return self._base_circle.tangent_at(point, direction)

    def intersection(
        self,
        other: "GreatCircleSegment",
        tol: float = EPSILON
    ) -> Optional[SphereCoordinate]:
        """
        The point where this arc crosses ``other``.

        Parameters
        ----------
        other : GreatCircleSegment
            The arc to test against.
        tol : float
            Absolute tolerance used for the degeneracy and containment tests.

        Returns
        -------
        SphereCoordinate or None
            The crossing point, or None when either arc has zero length, both
            arcs lie on the same great circle, or the arcs do not cross.
        """
        if is_almost_equal(self._length, 0.0, tol) or is_almost_equal(other._length, 0.0, tol):
            return None

        candidate = self._base_circle.intersection(other._base_circle, tol)
        if candidate is None:
            return None

        for point in (candidate, -candidate):
            if self.is_on_arc(point, tol) and other.is_on_arc(point, tol):
                return SphereCoordinate.from_cartesian(point)
        return None

    def intersects(self, other: "GreatCircleSegment", tol: float = EPSILON) -> bool:
        return self.intersection(other, tol) is not None

    def interpolate(self, num_points: int = 100) -> np.ndarray:
        """
        Compute evenly spaced points along the arc from start to end.

        Parameters
        ----------
        num_points : int, optional
            Number of points, end points included, by default 100.

        Returns
        -------
        np.ndarray
            Array of shape (num_points, 3) of unit vectors on the arc.
        """
        A = self._start.to_cartesian().to_array()
        B = self._end.to_cartesian().to_array()
        theta = self._length

        if theta < 1e-6:
            return np.repeat(A[None, :], num_points, axis=0)

        t_vals = np.linspace(0, 1, num_points)
        if is_almost_equal(theta, np.pi):
            # slerp is undefined between antipodes; sweep through the midpoint instead
            M = self.midpoint.to_array()
            angles = t_vals * np.pi
            return np.cos(angles)[:, None] * A + np.sin(angles)[:, None] * M

        sin_theta = np.sin(theta)
        arc_points = (np.sin((1 - t_vals) * theta)[:, None] * A +
                      np.sin(t_vals * theta)[:, None] * B) / sin_theta
        return arc_points

    def __repr__(self) -> str:
        return f"GreatCircleSegment(start={self._start!r}, end={self._end!r})"
