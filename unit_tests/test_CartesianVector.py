import numpy as np
import pytest
from pysphericalvoronoi.CartesianVector import CartesianVector


def random_vectors(n, seed=0):
    rng = np.random.default_rng(seed)
    return [CartesianVector.from_array(v) for v in rng.normal(size=(n, 3))]


def test_components_and_length():
    v = CartesianVector(3.0, 4.0, 0.0)
    assert (v.x, v.y, v.z) == (3.0, 4.0, 0.0)
    assert np.isclose(v.length, 5.0)
    assert list(v) == [3.0, 4.0, 0.0]


def test_unit_vector_has_length_one():
    for v in random_vectors(20):
        assert np.isclose(v.as_unit_vector.length, 1.0, atol=1e-12)


def test_zero_vector_normalizes_to_nan():
    with pytest.warns(RuntimeWarning):
        u = CartesianVector(0.0, 0.0, 0.0).as_unit_vector
    assert np.isnan(u.x) and np.isnan(u.y) and np.isnan(u.z)


def test_cross_product_basis():
    x = CartesianVector(1.0, 0.0, 0.0)
    y = CartesianVector(0.0, 1.0, 0.0)
    z = CartesianVector(0.0, 0.0, 1.0)
    assert x.cross_product(y) == z
    assert y.cross_product(z) == x
    assert z.cross_product(x) == y


def test_cross_product_antisymmetric():
    vectors = random_vectors(10, seed=1)
    for a, b in zip(vectors[:-1], vectors[1:]):
        assert a.cross_product(b) == -(b.cross_product(a))


def test_cross_product_is_perpendicular():
    a, b = random_vectors(2, seed=2)
    c = a.cross_product(b)
    assert np.isclose(c.dot_product(a), 0.0)
    assert np.isclose(c.dot_product(b), 0.0)


def test_dot_product():
    a = CartesianVector(1.0, 2.0, 3.0)
    b = CartesianVector(-2.0, 0.5, 4.0)
    assert np.isclose(a.dot_product(b), 11.0)


def test_arithmetic_operators():
    a = CartesianVector(1.0, 2.0, 3.0)
    b = CartesianVector(0.5, -1.0, 2.0)
    assert a + b == CartesianVector(1.5, 1.0, 5.0)
    assert a - b == CartesianVector(0.5, 3.0, 1.0)
    assert -a == CartesianVector(-1.0, -2.0, -3.0)
    assert a * 2 == CartesianVector(2.0, 4.0, 6.0)
    assert 2 * a == a * 2


def test_tolerant_equality():
    a = CartesianVector(0.1, 0.2, 0.3)
    assert a == CartesianVector(0.1 + 1e-11, 0.2, 0.3 - 1e-11)
    assert a != CartesianVector(0.1 + 1e-6, 0.2, 0.3)
    assert not (a == (0.1, 0.2, 0.3))


def test_hash_consistent_with_equality():
    a = CartesianVector(0.5, -0.25, 0.75)
    b = CartesianVector(0.5 + 1e-12, -0.25 - 1e-12, 0.75)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_immutable():
    v = CartesianVector(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0
    arr = v.to_array()
    arr[0] = 10.0
    assert v.x == 1.0


def test_from_array_shape_validation():
    assert CartesianVector.from_array([1, 2, 3]) == CartesianVector(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        CartesianVector.from_array([1.0, 2.0])


def test_string_forms():
    v = CartesianVector(1.0, 2.0, 3.0)
    assert str(v) == "Cartesian: 1.0/2.0/3.0"
    assert repr(v) == "CartesianVector(x=1.0, y=2.0, z=3.0)"


def test_hash_of_huge_components():
    v = CartesianVector(1e300, -1e300, 0.0)
    assert hash(v) == hash(CartesianVector(1e300, -1e300, 0.0))
    assert len({v, CartesianVector(1e300, -1e300, 0.0)}) == 1
    hash(CartesianVector(float("inf"), 0.0, 0.0))


def test_multiplication_by_non_number():
    v = CartesianVector(1.0, 2.0, 3.0)
    assert v.__mul__("2") is NotImplemented
    assert v.__mul__(v) is NotImplemented
    with pytest.raises(TypeError):
        v * None
    with pytest.raises(TypeError):
        None * v
    assert v * np.float64(0.5) == CartesianVector(0.5, 1.0, 1.5)
