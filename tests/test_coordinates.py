import copy
import pickle

import numpy as np
import pytest

from geoanchor import EcefPoint, GeodeticPoint, LocalPoint
from tests.functions import EXTON, assert_ecef_points_equal, assert_geodetic_points_equal


def test_local_point_init():
    p = LocalPoint(1., 2., 3.)
    assert (p.x, p.y, p.z) == (1., 2., 3.)
    assert all(isinstance(v, np.float32) for v in (p.x, p.y, p.z))

    # Narrowed to single precision
    assert LocalPoint(0.1, 0., 0.).x == np.float32(0.1)
    assert float(LocalPoint(0.1, 0., 0.).x) != 0.1

    assert LocalPoint() == LocalPoint(0., 0., 0.)
    assert LocalPoint('1.5', 2, np.float32(3.)) == LocalPoint(1.5, 2., 3.)


def test_ecef_point_init():
    p = EcefPoint(1, '2.5', np.float64(3.))
    assert p.to_float() == (1.0, 2.5, 3.0)
    assert all(type(v) is float for v in p.to_float())

    with pytest.raises(ValueError):
        EcefPoint('not a number', 0., 0.)


def test_geodetic_point_init():
    p = GeodeticPoint(40., -75.)
    assert p.to_float() == (40., -75., 0.)

    with pytest.raises(ValueError):
        GeodeticPoint(None, 0.)


def test_points_immutable():
    for p, attr in (
        (LocalPoint(1., 2., 3.), 'x'),
        (EcefPoint(1., 2., 3.), 'y'),
        (GeodeticPoint(1., 2., 3.), 'height'),
    ):
        with pytest.raises(AttributeError):
            setattr(p, attr, 5.)

        with pytest.raises(AttributeError):
            delattr(p, attr)


def test_point_eq():
    assert EcefPoint(1., 2., 3.) == EcefPoint(1., 2., 3.)
    assert EcefPoint(1., 2., 3.) != EcefPoint(1., 2., 3.0000000001)
    assert EcefPoint(1., 2., 3.) != (1., 2., 3.)

    assert GeodeticPoint(1., 2., 3.) == GeodeticPoint(1., 2., 3.)
    assert GeodeticPoint(1., 2., 3.) != GeodeticPoint(2., 1., 3.)
    assert GeodeticPoint(1., 2., 3.) != EcefPoint(1., 2., 3.)

    assert LocalPoint(1., 2., 3.) == LocalPoint(1., 2., 3.)
    assert LocalPoint(1., 2., 3.) != LocalPoint(1., 2., 4.)
    assert LocalPoint(1., 2., 3.) != EcefPoint(1., 2., 3.)


def test_point_hash():
    points = [
        EcefPoint(0., 0., 0.),
        EcefPoint(0., 0., 0.),
        EcefPoint(1., 1., 1.),
    ]
    assert len(set(points)) == 2
    assert EcefPoint(1., 1., 1.) in set(points)

    assert len({GeodeticPoint(1., 2.), GeodeticPoint(1., 2., 0.)}) == 1
    assert len({LocalPoint(1., 2., 3.), LocalPoint(1., 2., 3.)}) == 1


def test_point_repr():
    assert repr(EcefPoint(1., 2., 3.)) == '<EcefPoint(1.0, 2.0, 3.0)>'
    assert repr(GeodeticPoint(1., 2., 3.)) == '<GeodeticPoint(1.0, 2.0, 3.0)>'
    assert repr(LocalPoint(1., 2., 3.)) == '<LocalPoint(1.0, 2.0, 3.0)>'


def test_point_str():
    ecef = EcefPoint(1208434.4479614785, -4736406.239884817, 4083631.094232447)
    assert str(ecef) == '(1208434.44796148, -4736406.23988482, 4083631.09423245)'

    geodetic = GeodeticPoint(40.065422212104785, -75.68705576058757, 129.74222580583697)
    assert str(geodetic) == (
        'Latitude: 40.0654222121048 Longitude: -75.6870557605876 Height: 129.742225805837'
    )

    assert str(LocalPoint(0.1, 0., 0.)) == '(0.100000001490116, 0, 0)'


def test_ecef_point_magnitude():
    assert EcefPoint(3., 4., 0.).magnitude == 5.
    assert EcefPoint(0., 0., 0.).magnitude == 0.


def test_point_to_numpy():
    local = LocalPoint(1., 2., 3.).to_numpy()
    assert local.dtype == np.float32
    assert local.tolist() == [1., 2., 3.]

    ecef = EcefPoint(1., 2., 3.).to_numpy()
    assert ecef.dtype == np.float64
    assert ecef.tolist() == [1., 2., 3.]


def test_geodetic_point_to_ecef():
    assert_ecef_points_equal(EXTON['geodetic'].to_ecef(), EXTON['ecef'])


def test_ecef_point_to_geodetic():
    success, point = EXTON['ecef'].to_geodetic()
    assert success
    assert_geodetic_points_equal(point, EXTON['geodetic'])

    assert EcefPoint(0., 0., 0.).to_geodetic() == (False, None)


@pytest.mark.parametrize('point', [
    LocalPoint(0.1, 2., -3.),
    EcefPoint(1208434.4479614785, -4736406.239884817, 4083631.094232447),
    GeodeticPoint(40.065422212104785, -75.68705576058757, 129.74222580583697),
])
def test_point_copy_and_pickle(point):
    for duplicate in (copy.copy(point), copy.deepcopy(point), pickle.loads(pickle.dumps(point))):
        assert duplicate == point
        assert type(duplicate) is type(point)
        assert hash(duplicate) == hash(point)

    assert isinstance(pickle.loads(pickle.dumps(point)).to_float()[0], float)
    assert isinstance(copy.deepcopy(LocalPoint(1., 2., 3.)).x, np.float32)
