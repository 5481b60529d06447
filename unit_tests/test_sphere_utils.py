import numpy as np
import pytest
from pysphericalvoronoi.sphere_utils import (
    EPSILON,
    is_almost_equal,
    quantize,
    normalize,
    sphere_to_cartesian,
    cartesian_to_sphere,
    latlon_to_sphere_coordinates,
    sphere_coordinates_to_latlon,
    spherical_triangle_area
)


def test_is_almost_equal_uses_shared_tolerance():
    assert is_almost_equal(1.0, 1.0 + EPSILON / 10)
    assert not is_almost_equal(1.0, 1.0 + EPSILON * 10)
    assert is_almost_equal(1.0, 1.1, tol=0.2)


def test_quantize_grid():
    assert quantize(3 * EPSILON) == 3
    assert quantize(0.5) == quantize(0.5 + 1e-12)
    assert quantize(-0.0) == quantize(0.0)
    assert quantize(float("inf")) == hash(float("inf"))
    assert quantize(1e300) == hash(1e300)
    assert quantize(-1e305) == hash(-1e305)


def test_normalize_unit_length():
    v = np.array([3.0, 4.0, 0.0])
    v_norm = normalize(v)
    assert np.isclose(np.linalg.norm(v_norm), 1.0)


def test_sphere_to_cartesian_axes():
    assert np.allclose(sphere_to_cartesian(0.0, 0.0), [0.0, 1.0, 0.0])
    assert np.allclose(sphere_to_cartesian(np.pi / 2, 0.0), [0.0, 0.0, 1.0])
    assert np.allclose(sphere_to_cartesian(np.pi / 2, np.pi / 2), [1.0, 0.0, 0.0])
    assert np.allclose(sphere_to_cartesian(np.pi, 0.0), [0.0, -1.0, 0.0])


def test_sphere_to_cartesian_broadcasts():
    theta = np.array([0.5, 1.0, 1.5, 2.0])
    xyz = sphere_to_cartesian(theta, 0.3)
    assert xyz.shape == (4, 3)
    assert np.allclose(np.linalg.norm(xyz, axis=1), 1.0)


def test_sphere_cartesian_round_trip():
    theta, phi = np.meshgrid(
        np.linspace(0.1, np.pi - 0.1, 7),
        np.linspace(0.0, 2 * np.pi, 9, endpoint=False)
    )
    coords = np.stack([theta.ravel(), phi.ravel()], axis=1)
    xyz = sphere_to_cartesian(coords[:, 0], coords[:, 1])
    round_trip = cartesian_to_sphere(xyz)
    assert np.allclose(round_trip, coords, atol=1e-9)


def test_cartesian_to_sphere_normalizes_input():
    theta, phi = cartesian_to_sphere(np.array([0.0, 0.0, 2.0]))
    assert np.isclose(theta, np.pi / 2)
    assert np.isclose(phi, 0.0)


def test_cartesian_to_sphere_phi_range():
    coords = cartesian_to_sphere(np.array([[-1.0, 0.0, 0.0], [-1.0, 0.0, 1.0]]))
    assert np.allclose(coords[:, 1], [1.5 * np.pi, 1.75 * np.pi])
    assert np.all((coords[:, 1] >= 0) & (coords[:, 1] < 2 * np.pi))


def test_shape_validation():
    with pytest.raises(ValueError):
        cartesian_to_sphere(np.zeros((4, 2)))
    with pytest.raises(ValueError):
        latlon_to_sphere_coordinates(np.zeros((4, 3)))
    with pytest.raises(ValueError):
        sphere_coordinates_to_latlon(np.zeros(3))


def test_latlon_round_trip():
    latlon = np.array([[0, 0], [45, 90], [-45, -45], [10, 170]])
    coords = latlon_to_sphere_coordinates(latlon)
    assert np.all((coords[:, 1] >= 0) & (coords[:, 1] < 2 * np.pi))
    assert np.allclose(sphere_coordinates_to_latlon(coords), latlon, atol=1e-9)


def test_spherical_triangle_area_octant():
    a = np.array([1.0, 0.0, 0.0])
    b = np.array([0.0, 1.0, 0.0])
    c = np.array([0.0, 0.0, 1.0])
    assert np.isclose(spherical_triangle_area(a, b, c), np.pi / 2)
    # unnormalized input
    assert np.isclose(spherical_triangle_area(2 * a, b, 3 * c), np.pi / 2)


def test_spherical_triangle_area_ignores_vertex_order():
    a = np.array([1.0, 0.2, 0.1])
    b = np.array([0.1, 1.0, 0.3])
    c = np.array([0.2, 0.1, 1.0])
    area = spherical_triangle_area(a, b, c)
    assert area > 0
    assert np.isclose(spherical_triangle_area(c, b, a), area)
    assert np.isclose(spherical_triangle_area(b, c, a), area)
