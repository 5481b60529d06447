from pysphericalvoronoi.sphere_utils import (
    EPSILON,
    is_almost_equal,
    sphere_to_cartesian,
    cartesian_to_sphere,
    latlon_to_sphere_coordinates,
    sphere_coordinates_to_latlon,
    spherical_triangle_area
)
from pysphericalvoronoi.CartesianVector import CartesianVector
from pysphericalvoronoi.SphereCoordinate import SphereCoordinate
from pysphericalvoronoi.GreatCircle import GreatCircle
from pysphericalvoronoi.GreatCircleSegment import GreatCircleSegment
from pysphericalvoronoi.SphericalPolygon import SphericalPolygon
from pysphericalvoronoi.plotting import (
    plot_great_circle_segments,
    plot_spherical_polygon,
    show_plot
)

__all__ = [
    "EPSILON",
    "is_almost_equal",
    "sphere_to_cartesian",
    "cartesian_to_sphere",
    "latlon_to_sphere_coordinates",
    "sphere_coordinates_to_latlon",
    "spherical_triangle_area",
    "CartesianVector",
    "SphereCoordinate",
    "GreatCircle",
    "GreatCircleSegment",
    "SphericalPolygon",
    "plot_great_circle_segments",
    "plot_spherical_polygon",
    "show_plot",
]
