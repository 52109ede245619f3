"""
UTM zone geometry: zone and latitude band lookup, plus the forward and inverse
Transverse Mercator series (USGS style, as in Snyder's "Map Projections - A
Working Manual").
"""

__all__ = [
    'GridZoneRect', 'Hemisphere', 'band_letter', 'central_meridian',
    'latitude_band_index', 'meridional_arc', 'project', 'project_many',
    'unproject', 'utm_zone_number',
]

from enum import Enum
import math
from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np

from gridrefs._const import (
    BAND_HEIGHT_DEGREES, FALSE_EASTING, FALSE_NORTHING, GRID_LETTERS,
    NORTHERN_BAND_LIMIT, NORTHERN_POLAR_THRESHOLD, POLAR_BAND_INDEX,
    SOUTHERN_BANDS, SOUTHERN_POLAR_THRESHOLD, UTM_SCALE_FACTOR, ZONE_COUNT,
    ZONE_WIDTH_DEGREES,
)
from gridrefs.coordinates import Coordinate, validate_coordinate
from gridrefs.ellipsoid import Ellipsoid, WGS84
from gridrefs.exceptions import (
    InvalidLatitudeError, InvalidLongitudeError, UnsupportedPolarRegionError
)
from gridrefs.utils.functions import round_half_up
from gridrefs.utils.logging import warn_once

_ARRAY_LIKE = Union[Sequence[float], np.ndarray]


class Hemisphere(Enum):
    """The hemisphere a UTM northing is measured in"""
    NORTH = 'N'
    SOUTH = 'S'

    @classmethod
    def from_band_letter(cls, letter: str) -> 'Hemisphere':
        """Bands C through M lie south of the equator"""
        if len(letter) == 1 and letter.upper() in SOUTHERN_BANDS:
            return cls.SOUTH

        return cls.NORTH


class GridZoneRect(NamedTuple):
    """
    A point projected into its UTM grid zone.

    For use with MGRS, this is further subdivided into 100km squares.
    """
    zone_number: int
    band_index: int
    easting: float
    northing: float

    @property
    def band_letter(self) -> str:
        return band_letter(self.band_index)

    @property
    def hemisphere(self) -> Hemisphere:
        return Hemisphere.from_band_letter(self.band_letter)


def band_letter(band_index: int) -> str:
    """The latitude band letter for a band index, e.g. 18 -> 'U'"""
    return GRID_LETTERS[band_index]


def central_meridian(zone_number):
    """
    The longitude of a zone's central meridian, in degrees. Accepts either a
    single zone number or an array of them.
    """
    return 3 + ZONE_WIDTH_DEGREES * (zone_number - 1) - 180


def utm_zone_number(longitude: float) -> int:
    """
    The UTM zone (1-60) containing a longitude. The antimeridian itself is
    assigned to zone 60.
    """
    zone = 1 + math.floor((longitude + 180) / ZONE_WIDTH_DEGREES)
    return min(zone, ZONE_COUNT)


def latitude_band_index(latitude: float) -> int:
    """
    The index of a latitude's band letter within the 24 letter grid alphabet.

    Args:
        latitude:
            Latitude, in decimal degrees

    Returns:
        int; 2 ('C') through 21 ('X') for the regular 8 degree bands, or 23
        north of 84 degrees

    Raises:
        UnsupportedPolarRegionError for latitudes at or below 80 degrees south,
        or between 72 and 84 degrees north (inclusive)
    """
    if SOUTHERN_POLAR_THRESHOLD < latitude < NORTHERN_BAND_LIMIT:
        return math.floor((latitude + 80) / BAND_HEIGHT_DEGREES) + 2

    if latitude > NORTHERN_POLAR_THRESHOLD:
        return POLAR_BAND_INDEX

    raise UnsupportedPolarRegionError(
        f'Latitude {latitude} has no supported UTM latitude band; '
        'polar regions require UPS, which is not supported.'
    )


def meridional_arc(latitude_radians, ellipsoid: Ellipsoid = WGS84):
    """
    Length of the meridian from the equator to a latitude, in meters.

    Args:
        latitude_radians:
            The latitude (or array of latitudes), in radians

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        float, or np.ndarray if given an array
    """
    esq = ellipsoid.esq
    M = latitude_radians * (1. - esq * (1. / 4. + esq * (3. / 64. + 5. * esq / 256.)))
    M = M - np.sin(2. * latitude_radians) * (esq * (3. / 8. + esq * (3. / 32. + 45. * esq / 1024.)))
    M = M + np.sin(4. * latitude_radians) * (esq * esq * (15. / 256. + esq * 45. / 1024.))
    M = M - np.sin(6. * latitude_radians) * (esq * esq * esq * (35. / 3072.))
    return M * ellipsoid.a


def _forward(latitude, longitude, zone_number, ellipsoid: Ellipsoid):
    """
    Easting and northing of points within their zones. Works elementwise on
    arrays as well as on single values.
    """
    a, e, e0sq = ellipsoid.a, ellipsoid.e, ellipsoid.e0sq
    k0 = UTM_SCALE_FACTOR

    phi = np.radians(latitude)
    sin_phi, cos_phi, tan_phi = np.sin(phi), np.cos(phi), np.tan(phi)

    N = a / np.sqrt(1. - (e * sin_phi) ** 2)
    T = tan_phi ** 2
    C = e0sq * cos_phi ** 2
    A = np.radians(longitude - central_meridian(zone_number)) * cos_phi
    M = meridional_arc(phi, ellipsoid)

    # Easting relative to the central meridian
    x = k0 * N * A * (
        1. + A * A * (
            (1. - T + C) / 6. +
            A * A * (5. - 18. * T + T * T + 72. * C - 58. * e0sq) / 120.
        )
    )
    x = x + FALSE_EASTING

    # Northing from the equator
    y = k0 * (
        M + N * tan_phi * (
            A * A * (
                1. / 2. + A * A * (
                    (5. - T + 9. * C + 4. * C * C) / 24. +
                    A * A * (61. - 58. * T + T * T + 600. * C - 330. * e0sq) / 720.
                )
            )
        )
    )
    y = np.where(y < 0, y + FALSE_NORTHING, y)

    return x, y


def project(latitude: float, longitude: float, ellipsoid: Ellipsoid = WGS84) -> GridZoneRect:
    """
    Projects a latitude/longitude onto the UTM grid.

    Args:
        latitude:
            Latitude, in decimal degrees

        longitude:
            Longitude, in decimal degrees

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        GridZoneRect

    Raises:
        InvalidLatitudeError, InvalidLongitudeError, UnsupportedPolarRegionError
    """
    validate_coordinate(latitude, longitude)
    if longitude == 180:
        warn_once('Longitude 180 lies on the antimeridian and is projected in zone 60.')

    zone = utm_zone_number(longitude)
    band = latitude_band_index(latitude)
    easting, northing = _forward(latitude, longitude, zone, ellipsoid)

    return GridZoneRect(zone, band, float(easting), float(northing))


def project_many(
    latitudes: _ARRAY_LIKE,
    longitudes: _ARRAY_LIKE,
    ellipsoid: Ellipsoid = WGS84
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Projects arrays of latitudes/longitudes onto the UTM grid in a single pass.

    Args:
        latitudes:
            Latitudes, in decimal degrees

        longitudes:
            Longitudes, in decimal degrees; must be the same shape as latitudes

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        Arrays of (zone numbers, band indexes, eastings, northings)

    Raises:
        InvalidLatitudeError, InvalidLongitudeError, UnsupportedPolarRegionError
    """
    lats = np.asarray(latitudes, dtype=float)
    lons = np.asarray(longitudes, dtype=float)
    if lats.shape != lons.shape:
        raise ValueError(
            f'Latitudes and longitudes must be the same shape; got {lats.shape} and {lons.shape}'
        )

    invalid = ~((lats >= -90) & (lats <= 90))
    if np.any(invalid):
        raise InvalidLatitudeError(
            f'Latitude outside of allowable range. Must be between -90 and 90. '
            f'Provided value: {lats[invalid][0]}'
        )

    invalid = ~((lons >= -180) & (lons <= 180))
    if np.any(invalid):
        raise InvalidLongitudeError(
            f'Longitude outside of allowable range. Must be between -180 and 180. '
            f'Provided value: {lons[invalid][0]}'
        )

    regular = (lats > SOUTHERN_POLAR_THRESHOLD) & (lats < NORTHERN_BAND_LIMIT)
    polar = lats > NORTHERN_POLAR_THRESHOLD
    unsupported = ~(regular | polar)
    if np.any(unsupported):
        raise UnsupportedPolarRegionError(
            f'Latitude {lats[unsupported][0]} has no supported UTM latitude band; '
            'polar regions require UPS, which is not supported.'
        )

    if np.any(lons == 180):
        warn_once('Longitude 180 lies on the antimeridian and is projected in zone 60.')

    zones = np.minimum(1 + np.floor((lons + 180) / ZONE_WIDTH_DEGREES), ZONE_COUNT).astype(int)
    bands = np.where(
        polar,
        POLAR_BAND_INDEX,
        np.floor((lats + 80) / BAND_HEIGHT_DEGREES) + 2
    ).astype(int)
    eastings, northings = _forward(lats, lons, zones, ellipsoid)

    return zones, bands, eastings, northings


def unproject(
    zone_number: int,
    hemisphere: Hemisphere,
    easting: float,
    northing: float,
    ellipsoid: Ellipsoid = WGS84
) -> Coordinate:
    """
    Recovers the latitude/longitude of a UTM easting/northing.

    Args:
        zone_number:
            The UTM zone, 1-60

        hemisphere:
            The hemisphere the northing is measured in

        easting:
            Easting, in meters (500,000 on the central meridian)

        northing:
            Northing, in meters, including the false northing in the south

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        Coordinate, rounded to 7 decimal places
    """
    a, e, esq, e0sq, e1 = ellipsoid.a, ellipsoid.e, ellipsoid.esq, ellipsoid.e0sq, ellipsoid.e1
    k0 = UTM_SCALE_FACTOR

    if hemisphere is Hemisphere.NORTH:
        M = northing / k0
    else:
        M = (northing - FALSE_NORTHING) / k0

    mu = M / (a * (1. - esq * (1. / 4. + esq * (3. / 64. + 5. * esq / 256.))))

    # Footprint latitude
    phi1 = (
        mu +
        e1 * (3. / 2. - 27. * e1 * e1 / 32.) * math.sin(2. * mu) +
        e1 * e1 * (21. / 16. - 55. * e1 * e1 / 32.) * math.sin(4. * mu)
    )
    phi1 = phi1 + e1 * e1 * e1 * (
        math.sin(6. * mu) * 151. / 96. + e1 * math.sin(8. * mu) * 1097. / 512.
    )

    C1 = e0sq * math.cos(phi1) ** 2
    T1 = math.tan(phi1) ** 2
    N1 = a / math.sqrt(1. - (e * math.sin(phi1)) ** 2)
    R1 = N1 * (1. - e ** 2) / (1. - (e * math.sin(phi1)) ** 2)
    D = (easting - FALSE_EASTING) / (N1 * k0)

    phi = D * D * (1. / 2. - D * D * (5. + 3. * T1 + 10. * C1 - 4. * C1 * C1 - 9. * e0sq) / 24.)
    phi = phi + D ** 6 * (61. + 90. * T1 + 298. * C1 + 45. * T1 * T1 - 252. * e0sq - 3. * C1 * C1) / 720.
    phi = phi1 - (N1 * math.tan(phi1) / R1) * phi

    lam = D * (
        1. + D * D * (
            (-1. - 2. * T1 - C1) / 6. +
            D * D * (5. - 2. * C1 + 28. * T1 - 3. * C1 * C1 + 8. * e0sq + 24. * T1 * T1) / 120.
        )
    ) / math.cos(phi1)

    latitude = round_half_up(math.degrees(phi), 7)
    longitude = round_half_up(central_meridian(zone_number) + math.degrees(lam), 7)

    # Zone 1 and 60 eastings can spill across the antimeridian
    if longitude > 180:
        longitude -= 360
    elif longitude < -180:
        longitude += 360

    return Coordinate(longitude, latitude)
