
import logging

import pytest

from gridrefs import (
    Coordinate, InvalidMGRSFormatError, MGRSConverter,
    Precision, UnsupportedPolarRegionError, UTMConverter
)
from gridrefs.converters import ConverterBase
from tests.functions import CITIES, ROUND_TRIP_POINTS, assert_coordinates_equal


def test_converter_base_is_abstract():
    with pytest.raises(TypeError):
        ConverterBase()


def test_utm_converter_encode():
    converter = UTMConverter()
    for _, lat, lon, utm, _ in CITIES:
        assert converter.encode(Coordinate(lon, lat)) == utm


def test_utm_converter_decode():
    converter = UTMConverter()
    for _, lat, lon, utm, _ in CITIES:
        assert_coordinates_equal(converter.decode(utm), Coordinate(lon, lat), 1e-4)


def test_utm_converter_encode_coordinates():
    converter = UTMConverter()
    coords = [Coordinate(lon, lat) for lat, lon in ROUND_TRIP_POINTS]

    assert converter.encode_coordinates(coords) == [
        converter.encode(coord) for coord in coords
    ]
    assert converter.encode_coordinates([]) == []


def test_mgrs_converter_encode_coordinates():
    converter = MGRSConverter()
    coords = [Coordinate(lon, lat) for lat, lon in ROUND_TRIP_POINTS]

    assert converter.encode_coordinates(coords) == [
        converter.encode(coord) for coord in coords
    ]
    assert converter.encode_coordinates(
        [Coordinate(lon, lat) for _, lat, lon, _, _ in CITIES]
    ) == [mgrs for *_, mgrs in CITIES]


def test_encode_coordinates_logs(caplog):
    caplog.set_level(logging.DEBUG, logger='gridrefs.converters')
    UTMConverter().encode_coordinates([Coordinate(13.404954, 52.520007)])
    assert 'Projected 1 coordinates' in caplog.text


def test_encode_coordinates_failure():
    converter = UTMConverter()
    coords = [Coordinate(13.404954, 52.520007), Coordinate(0., -85.)]
    with pytest.raises(UnsupportedPolarRegionError):
        converter.encode_coordinates(coords)

    with pytest.raises(UnsupportedPolarRegionError):
        converter.encode(Coordinate(15.6, 78.2))


def test_mgrs_converter_precision():
    converter = MGRSConverter(Precision.TEN_METERS)
    assert converter.precision is Precision.TEN_METERS
    assert converter.encode(Coordinate(13.404954, 52.520007)) == '33UUU 9177 2007'

    converter = MGRSConverter(2)
    assert converter.precision is Precision.ONE_KM
    assert converter.encode(Coordinate(13.404954, 52.520007)) == '33UUU 91 20'

    assert MGRSConverter(Precision.ZONE).encode_coordinates(
        [Coordinate(13.404954, 52.520007), Coordinate(-0.127758, 51.507351)]
    ) == ['33U', '30U']

    with pytest.raises(ValueError):
        MGRSConverter(7)


def test_mgrs_converter_decode_references():
    converter = MGRSConverter()
    decoded = converter.decode_references(mgrs for *_, mgrs in CITIES)
    for coord, (_, lat, lon, _, _) in zip(decoded, CITIES):
        assert_coordinates_equal(coord, Coordinate(lon, lat), 1e-3)

    assert converter.decode_references([]) == []

    with pytest.raises(InvalidMGRSFormatError):
        converter.decode_references(['33UUU 91776 20073', '33UUU 91776 2007'])


def test_converter_repr():
    assert repr(UTMConverter()) == '<UTMConverter>'
    assert repr(MGRSConverter()) == '<MGRSConverter(ONE_METER)>'
    assert repr(MGRSConverter(Precision.TEN_KM)) == '<MGRSConverter(TEN_KM)>'
