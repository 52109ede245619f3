"""
Module for encoding and decoding UTM references, e.g. '33U 391776 5820073'
"""

__all__ = ['decode_utm', 'encode_utm', 'format_utm', 'parse_utm']

import re
from typing import Tuple

from gridrefs._const import GRID_LETTERS, ZONE_COUNT
from gridrefs.coordinates import Coordinate
from gridrefs.exceptions import InvalidUTMFormatError
from gridrefs.utils.functions import round_to_meter
from gridrefs.zones import GridZoneRect, Hemisphere, project, unproject

_UTM_FORMAT = 'Valid UTM string format: <zone><latitude band> <easting> <northing>'

_RE_ZONE = re.compile(r'^[0-9]{1,2}$')
_RE_BAND = re.compile(r'^[A-Z]$')
_RE_ZONE_BAND = re.compile(r'^([0-9]{1,2})([A-Z])$')
_RE_DISTANCE = re.compile(r'^[0-9]+(?:\.[0-9]*)?$')


def format_utm(rect: GridZoneRect) -> str:
    """
    Formats a projected point as a UTM reference, rounding the easting and
    northing to the nearest meter.

    Args:
        rect:
            A GridZoneRect, see gridrefs.zones.project

    Returns:
        str, e.g. '33U 391776 5820073'
    """
    return (
        f'{rect.zone_number}{rect.band_letter} '
        f'{round_to_meter(rect.easting)} {round_to_meter(rect.northing)}'
    )


def parse_utm(reference: str) -> Tuple[int, str, float, float]:
    """
    Splits a UTM reference into its components. The zone and latitude band may
    either be joined ('10S 551129 4181002') or separated by a space
    ('10 S 551129 4181002').

    Args:
        reference:
            A UTM reference (case insensitive)

    Returns:
        (zone number, band letter, easting, northing)

    Raises:
        InvalidUTMFormatError
    """
    tokens = reference.strip().upper().split()

    if len(tokens) == 4:
        zone_str, band, easting_str, northing_str = tokens
        if not (_RE_ZONE.match(zone_str) and _RE_BAND.match(band)):
            raise InvalidUTMFormatError(f'Unrecognized zone/band in {reference!r}. {_UTM_FORMAT}')

    elif len(tokens) == 3:
        match = _RE_ZONE_BAND.match(tokens[0])
        if match is None:
            raise InvalidUTMFormatError(f'Unrecognized zone/band in {reference!r}. {_UTM_FORMAT}')

        zone_str, band = match.groups()
        easting_str, northing_str = tokens[1:]

    else:
        raise InvalidUTMFormatError(_UTM_FORMAT)

    zone = int(zone_str)
    if not 1 <= zone <= ZONE_COUNT:
        raise InvalidUTMFormatError(f'UTM zone must be between 1 and {ZONE_COUNT}; found {zone}')

    if band not in GRID_LETTERS:
        raise InvalidUTMFormatError(f'Invalid latitude band letter {band!r}')

    if not (_RE_DISTANCE.match(easting_str) and _RE_DISTANCE.match(northing_str)):
        raise InvalidUTMFormatError(
            f'Easting and northing must be positive numbers in {reference!r}. {_UTM_FORMAT}'
        )

    return zone, band, float(easting_str), float(northing_str)


def encode_utm(latitude: float, longitude: float) -> str:
    """
    Converts a latitude/longitude to a UTM reference.

    Args:
        latitude:
            Latitude, in decimal degrees

        longitude:
            Longitude, in decimal degrees

    Returns:
        str, e.g. '33U 391776 5820073'

    Raises:
        InvalidLatitudeError, InvalidLongitudeError, UnsupportedPolarRegionError
    """
    return format_utm(project(latitude, longitude))


def decode_utm(reference: str) -> Coordinate:
    """
    Converts a UTM reference to a Coordinate. The hemisphere is taken from the
    latitude band letter.

    Args:
        reference:
            A UTM reference, e.g. '33U 391776 5820073' or '33 U 391776 5820073'

    Returns:
        Coordinate

    Raises:
        InvalidUTMFormatError
    """
    zone, band, easting, northing = parse_utm(reference)
    return unproject(zone, Hemisphere.from_band_letter(band), easting, northing)
