
import pytest

from gridrefs.ellipsoid import Ellipsoid, WGS84


def test_wgs84_parameters():
    assert WGS84.a == 6378137.0
    assert WGS84.inverse_flattening == 298.257223563
    assert WGS84.b == pytest.approx(6356752.314245, rel=1e-12)
    assert WGS84.e == pytest.approx(0.0818191908426, rel=1e-10)
    assert WGS84.esq == pytest.approx(0.00669437999014, rel=1e-10)
    assert WGS84.e0sq == pytest.approx(0.00673949674228, rel=1e-10)
    assert WGS84.e0 == pytest.approx(0.0820944379497, rel=1e-10)
    assert WGS84.e1 == pytest.approx(0.00167922038638, rel=1e-9)


def test_eccentricity_consistency():
    assert WGS84.e ** 2 == pytest.approx(WGS84.esq, rel=1e-12)
    assert WGS84.e0 ** 2 == pytest.approx(WGS84.e0sq, rel=1e-12)


def test_sphere_clamps_to_zero():
    sphere = Ellipsoid(6371000., float('inf'))
    assert sphere.b == sphere.a
    assert sphere.e == 0.
    assert sphere.esq == 0.
    assert sphere.e0sq == 0.
    assert sphere.e1 == 0.


def test_ellipsoid_eq():
    assert Ellipsoid(6378137.0, 298.257223563) == WGS84
    assert Ellipsoid(6378137.0, 298.257222101) != WGS84
    assert WGS84 != (6378137.0, 298.257223563)


def test_ellipsoid_hash():
    assert len({WGS84, Ellipsoid(6378137.0, 298.257223563)}) == 1


def test_ellipsoid_repr():
    assert repr(WGS84) == '<Ellipsoid(6378137.0, 298.257223563)>'
