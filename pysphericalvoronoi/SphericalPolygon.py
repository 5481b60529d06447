import logging
import numpy as np
from typing import List, Sequence, Tuple, Union
from pysphericalvoronoi.CartesianVector import CartesianVector
from pysphericalvoronoi.GreatCircle import GreatCircle
from pysphericalvoronoi.GreatCircleSegment import GreatCircleSegment
from pysphericalvoronoi.SphereCoordinate import SphereCoordinate
from pysphericalvoronoi.sphere_utils import is_almost_equal


class SphericalPolygon:
    """
    A closed polygon on the unit sphere with geodesic edges.

    Parameters
    ----------
    vertices : Sequence[SphereCoordinate or CartesianVector]
        At least three distinct vertices, counter-clockwise around the
        enclosed region as seen from outside the sphere. The polygon is
        closed implicitly by the edge from the last vertex back to the
        first; a repeated first vertex at the end and repeated consecutive
        vertices are dropped.

    Raises
    ------
    ValueError
        If fewer than three distinct vertices remain.

    Notes
    -----
    Edges must not cross each other; self-intersecting input is not detected
    and gives a meaningless area.
    """

    def __init__(self, vertices: Sequence[Union[SphereCoordinate, CartesianVector]]):
        coords = [
            v if isinstance(v, SphereCoordinate) else SphereCoordinate.from_cartesian(v)
            for v in vertices
        ]
        if len(coords) >= 4 and coords[0] == coords[-1]:
            coords = coords[:-1]

        # zero-length edges have no direction; collapse repeated vertices
        collapsed: List[SphereCoordinate] = []
        for i, coord in enumerate(coords):
            if collapsed and coord == collapsed[-1]:
                logging.warning(
                    "Degenerate polygon edge: vertex %d repeats the previous vertex; dropped.", i
                )
                continue
            collapsed.append(coord)
        while len(collapsed) > 1 and collapsed[-1] == collapsed[0]:
            logging.warning(
                "Degenerate polygon edge: last vertex repeats the first vertex; dropped."
            )
            collapsed.pop()

        if len(collapsed) < 3:
            raise ValueError("polygon must contain at least three distinct vertices")

        self._vertices: Tuple[SphereCoordinate, ...] = tuple(collapsed)

    @property
    def vertices(self) -> Tuple[SphereCoordinate, ...]:
        return self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    @property
    def edges(self) -> List[GreatCircleSegment]:
        """The geodesic edges in traversal order, closing edge included."""
        n = len(self._vertices)
        return [
            GreatCircleSegment(self._vertices[i], self._vertices[(i + 1) % n])
            for i in range(n)
        ]

    @property
    def perimeter(self) -> float:
        """Total length of the edges in radians."""
        return float(sum(edge.length for edge in self.edges))

    @property
    def interior_angles(self) -> np.ndarray:
        """
        The angle at each vertex between its two incident edges.

        Angles are measured counter-clockwise, as seen from outside the
        sphere, from the outgoing edge to the incoming edge, so they are the
        interior angles (reflex ones included) when the vertices run
        counter-clockwise, and ``2 pi`` minus them when they run clockwise.

        Returns
        -------
        np.ndarray
            One angle in ``[0, 2 pi)`` radians per vertex.
        """
        edges = self.edges
        n = len(self._vertices)
        angles = np.empty(n)
        for i in range(n):
            vertex = self._vertices[i].to_cartesian()
            previous = self._vertices[i - 1].to_cartesian()
            following = self._vertices[(i + 1) % n].to_cartesian()

            to_previous = edges[i - 1].tangent_at(vertex, direction=previous)
            to_following = edges[i].tangent_at(vertex, direction=following)

            angle = np.arctan2(
                vertex.dot_product(to_following.cross_product(to_previous)),
                to_following.dot_product(to_previous)
            )
            if angle < 0:
                angle = 0.0 if is_almost_equal(angle, 0.0) else angle + 2 * np.pi
            angles[i] = angle
        return angles

    def _is_on_one_great_circle(self) -> bool:
        points = [v.to_cartesian() for v in self._vertices]
        first = points[0]
        for other in points[1:]:
            if not is_almost_equal(first.cross_product(other).length, 0.0):
                circle = GreatCircle(first, other)
                return all(circle.is_on_circle(p) for p in points)
        return True

    @property
    def area(self) -> float:
        """
        Enclosed area in steradians (spherical excess times radius squared).

        The enclosed region is the one to the left of the boundary when the
        vertices are traversed as seen from outside the sphere, i.e. the
        vertices run counter-clockwise around it. Reversing the vertex order
        yields the complementary region, ``4 pi`` minus the area. Vertices
        all lying on one great circle enclose no area.
        """
        if self._is_on_one_great_circle():
            logging.debug("All polygon vertices lie on one great circle; area is 0.")
            return 0.0

        n = len(self._vertices)
        excess = float(np.sum(self.interior_angles)) - (n - 2) * np.pi
        return excess * SphereCoordinate.RADIUS ** 2

    def __repr__(self) -> str:
        return f"<SphericalPolygon(n_vertices={len(self._vertices)})>"
