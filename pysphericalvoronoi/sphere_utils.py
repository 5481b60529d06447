"""
Sphere utilities
================

Shared numerical helpers for the geometry types of :mod:`pysphericalvoronoi`.

All of the types (:class:`~pysphericalvoronoi.CartesianVector`,
:class:`~pysphericalvoronoi.SphereCoordinate`, great circles, arcs and
polygons) compare floating point values through :func:`is_almost_equal` with
the single absolute tolerance :data:`EPSILON`, and hash through
:func:`quantize` on the same grid, so that numerical behaviour is consistent
across the whole geometry layer.

The array helpers below work on ``(N, 3)`` unit vectors and ``(N, 2)``
angular coordinates and follow the axis convention used throughout the
package: the polar axis is ``+y``, the colatitude ``theta`` is measured from
``+y`` and the longitude ``phi`` is measured around ``+y`` starting at ``+z``
and turning towards ``+x``.
"""

import math
from typing import Union

import numpy as np

EPSILON = 1e-9


def is_almost_equal(a: float, b: float, tol: float = EPSILON) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``tol``."""
    return bool(abs(a - b) < tol)


def quantize(value: float, tol: float = EPSILON) -> int:
    """
    Snap ``value`` onto the tolerance grid and return the grid index.

    Parameters
    ----------
    value : float
        The value to quantize.
    tol : float
        Grid spacing, by default :data:`EPSILON`.

    Returns
    -------
    int
        ``round(value / tol)``; values whose grid index is not finite
        (infinities, NaN, magnitudes beyond ``tol * 1.8e308``) are passed
        through ``hash``.
    """
    scaled = value / tol
    if not math.isfinite(scaled):
        return hash(value)
    return int(round(scaled))


def normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v, axis=-1, keepdims=True)


def sphere_to_cartesian(
    theta: Union[float, np.ndarray],
    phi: Union[float, np.ndarray]
) -> np.ndarray:
    """
    Convert colatitude / longitude (radians) to Cartesian unit vectors.

    Parameters
    ----------
    theta : float or np.ndarray
        Colatitude(s) in radians, measured from the ``+y`` axis.
    phi : float or np.ndarray
        Longitude(s) in radians, measured around ``+y`` from ``+z``.

    Returns
    -------
    np.ndarray
        An array of shape ``broadcast(theta, phi).shape + (3,)``.
    """
    theta = np.asarray(theta, dtype=float)
    phi = np.asarray(phi, dtype=float)
    x = np.sin(theta) * np.sin(phi)
    y = np.cos(theta)
    z = np.sin(theta) * np.cos(phi)
    return np.stack(np.broadcast_arrays(x, y, z), axis=-1)


def cartesian_to_sphere(xyz: np.ndarray) -> np.ndarray:
    """
    Convert Cartesian vectors to colatitude / longitude (radians).

    The vectors are normalized first, so any nonzero vector maps to the
    coordinate of its direction. A zero vector produces NaN.

    Parameters
    ----------
    xyz : np.ndarray
        An array of shape ``(..., 3)``.

    Returns
    -------
    np.ndarray
        An array of shape ``(..., 2)`` holding ``theta`` in ``[0, pi]`` and
        ``phi`` in ``[0, 2 pi)``.
    """
    xyz = np.asarray(xyz, dtype=float)
    if xyz.shape[-1] != 3:
        raise ValueError("Input must be an array of shape (..., 3).")
    unit = normalize(xyz)
    theta = np.arccos(np.clip(unit[..., 1], -1.0, 1.0))
    phi = np.mod(np.arctan2(unit[..., 0], unit[..., 2]), 2 * np.pi)
    # mod can round a tiny negative angle up to exactly 2 pi
    phi = np.where(phi >= 2 * np.pi, 0.0, phi)
    return np.stack([theta, phi], axis=-1)


def latlon_to_sphere_coordinates(latlon: np.ndarray) -> np.ndarray:
    """Convert (N, 2) lat/lon in degrees to (N, 2) colatitude/longitude in radians."""
    latlon = np.asarray(latlon, dtype=float)
    if latlon.shape[-1] != 2:
        raise ValueError("Input must be an array of shape (..., 2) holding lat/lon.")
    theta = np.pi / 2 - np.radians(latlon[..., 0])
    phi = np.mod(np.radians(latlon[..., 1]), 2 * np.pi)
    return np.stack([theta, phi], axis=-1)


def sphere_coordinates_to_latlon(coords: np.ndarray) -> np.ndarray:
    """Convert (N, 2) colatitude/longitude in radians to (N, 2) lat/lon in degrees."""
    coords = np.asarray(coords, dtype=float)
    if coords.shape[-1] != 2:
        raise ValueError("Input must be an array of shape (..., 2) holding theta/phi.")
    lat = np.degrees(np.pi / 2 - coords[..., 0])
    lon = np.degrees(coords[..., 1])
    lon = (lon + 180.0) % 360.0 - 180.0
    return np.stack([lat, lon], axis=-1)


def spherical_triangle_area(a, b, c):
    """
    Area of the spherical triangle ``abc`` on the unit sphere.

    Computed from Girard's theorem as the sum of the three dihedral angles
    minus ``pi``. Inputs are 3D vectors and need not be normalized; the
    result is unsigned, so the vertex order does not matter.

    This formula shares no code with
    :attr:`~pysphericalvoronoi.SphericalPolygon.area`, which makes it an
    independent check of polygon areas.
    """
    corners = normalize(np.array([a, b, c], dtype=float))

    # angle at each corner between the planes of its two incident sides
    angles = []
    for i in range(3):
        corner, nxt, prev = corners[i], corners[(i + 1) % 3], corners[(i + 2) % 3]
        to_next = normalize(np.cross(corner, nxt))
        to_prev = normalize(np.cross(corner, prev))
        angles.append(np.arccos(np.clip(np.dot(to_next, to_prev), -1.0, 1.0)))

    return float(sum(angles) - np.pi)
