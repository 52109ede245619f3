"""
Module for encoding and decoding Military Grid Reference System (MGRS) references.

An MGRS reference refines a UTM grid zone designator (e.g. '33U') with the
identifier of a 100km square (the digraph, e.g. 'UU') and an equal number of
easting and northing digits locating a point within that square:

    33UUU 91776 20073   (1m)
    33UUU 9177 2007     (10m)
    33UUU               (100km)
"""

__all__ = [
    'Precision', 'calc_digraph', 'decode_mgrs', 'encode_mgrs', 'format_mgrs',
    'is_valid_mgrs', 'mgrs_to_utm',
]

from enum import IntEnum
import math
import re
from typing import Tuple, Union

from gridrefs._const import (
    BAND_MIN_NORTHING, COLUMNS_PER_ZONE, GRID_LETTERS, NORTHING_CYCLE, ROW_LETTERS,
    SET_ORIGIN_COLUMNS, SET_ORIGIN_ROWS, SQUARE_SET_COUNT, SQUARE_SIZE, ZONE_COUNT,
)
from gridrefs.coordinates import Coordinate
from gridrefs.exceptions import (
    InvalidMGRSFormatError, InvalidNorthingLetterError, InvalidSetError,
    InvalidZoneLetterError
)
from gridrefs.utils.functions import round_to_meter
from gridrefs.utils.logging import warn_once
from gridrefs.utm import decode_utm
from gridrefs.zones import GridZoneRect, project

_MGRS_FORMAT = (
    'Valid MGRS string format: <zone><latitude band><column><row> <easting> <northing>'
)

_RE_MGRS = re.compile(r'^([0-9]{1,2})([A-Z])([A-Z])([A-Z])(.*)$')
_RE_GZD = re.compile(r'^[0-9]{1,2}[A-Z]$')
_RE_DIGITS = re.compile(r'^[0-9]*$')


class Precision(IntEnum):
    """
    The size of the grid square an MGRS reference resolves to. Each value is the
    number of digits in both the easting and the northing.
    """

    #: Grid zone designator and 100km square, e.g. '4QFJ'
    ONE_HUNDRED_KM = 0

    #: e.g. '4QFJ 1 6'
    TEN_KM = 1

    #: e.g. '4QFJ 12 67'
    ONE_KM = 2

    #: e.g. '4QFJ 123 678'
    ONE_HUNDRED_METERS = 3

    #: e.g. '4QFJ 1234 6789'
    TEN_METERS = 4

    #: Maximum precision, e.g. '4QFJ 12345 67890'
    ONE_METER = 5

    #: Grid zone designator only (6 by 8 degrees), e.g. '4Q'. Encode only; a
    #: bare grid zone designator has no square to decode to.
    ZONE = 6


def calc_digraph(
    zone_number: int,
    easting: float,
    northing: float,
    precision: Precision = Precision.ONE_METER
) -> str:
    """
    Derives the 100km square identifier (column letter followed by row letter)
    of a projected point.

    Even numbered zones shift their row letters by the precision level. At one
    meter precision this is the five row offset of the even zone lettering
    scheme, so encoding always derives the digraph at Precision.ONE_METER.

    Args:
        zone_number:
            The UTM zone, 1-60

        easting:
            Easting, in meters

        northing:
            Northing, in meters

        precision:
            (Default ONE_METER) The precision level applied to even zone rows

    Returns:
        str, e.g. 'UU'
    """
    column = math.floor((zone_number - 1) * COLUMNS_PER_ZONE + easting / SQUARE_SIZE)
    column_index = ((column % len(GRID_LETTERS)) + 23) % len(GRID_LETTERS)

    row = math.floor(northing / SQUARE_SIZE)
    if zone_number % 2 == 0:
        row += int(precision)

    row_index = row % len(ROW_LETTERS)

    return GRID_LETTERS[column_index] + GRID_LETTERS[row_index]


def _format_digits(value: int, precision: Precision) -> str:
    """
    The offset of a whole meter value within its 100km square, truncated to
    `precision` leading digits.
    """
    digits = f'{value % int(SQUARE_SIZE):05d}'
    return digits[:precision]


def format_mgrs(rect: GridZoneRect, precision: Union[Precision, int] = Precision.ONE_METER) -> str:
    """
    Formats a projected point as an MGRS reference.

    Args:
        rect:
            A GridZoneRect, see gridrefs.zones.project

        precision:
            (Default ONE_METER) The precision of the reference, see Precision

    Returns:
        str, e.g. '33UUU 91776 20073'
    """
    precision = Precision(precision)
    gzd = f'{rect.zone_number}{rect.band_letter}'
    if precision is Precision.ZONE:
        return gzd

    # Letters and digits must describe the same square once rounded
    easting, northing = round_to_meter(rect.easting), round_to_meter(rect.northing)
    digraph = calc_digraph(rect.zone_number, easting, northing)
    if precision is Precision.ONE_HUNDRED_KM:
        return f'{gzd}{digraph}'

    return (
        f'{gzd}{digraph} '
        f'{_format_digits(easting, precision)} {_format_digits(northing, precision)}'
    )


def _square_set(zone_number: int) -> int:
    """The 100km square set (1-6) a zone's lettering is drawn from"""
    return ((zone_number - 1) % SQUARE_SET_COUNT) + 1


def _easting_from_column(letter: str, square_set: int) -> float:
    """
    Recovers the easting of a 100km column letter's western edge by walking the
    column letters from the set's origin, 100km per step.

    Args:
        letter:
            The column letter

        square_set:
            The 100km square set, 1-6

    Returns:
        float, the easting in meters
    """
    if not 1 <= square_set <= SQUARE_SET_COUNT:
        raise InvalidSetError(
            f'Set must be between 1 and {SQUARE_SET_COUNT}. Found: {square_set}'
        )

    if letter not in GRID_LETTERS:
        raise InvalidMGRSFormatError(f'Invalid 100km column letter {letter!r}')

    origin = GRID_LETTERS.index(SET_ORIGIN_COLUMNS[square_set - 1])
    steps = (GRID_LETTERS.index(letter) - origin) % len(GRID_LETTERS)

    # A zone is 8 columns wide; other letters belong to neighbouring zones
    if steps >= COLUMNS_PER_ZONE:
        raise InvalidMGRSFormatError(
            f'Column letter {letter!r} does not occur in 100km square set {square_set}'
        )

    return SQUARE_SIZE * (steps + 1)


def _northing_from_row(letter: str, square_set: int) -> float:
    """
    Recovers the northing of a 100km row letter's southern edge (modulo
    2,000km) by walking the row letters from the set's origin, 100km per step.
    Rows run A through V, wrapping from V back to A in a single step.

    Args:
        letter:
            The row letter

        square_set:
            The 100km square set, 1-6

    Returns:
        float, the northing in meters
    """
    if not 1 <= square_set <= SQUARE_SET_COUNT:
        raise InvalidSetError(
            f'Set must be between 1 and {SQUARE_SET_COUNT}. Found: {square_set}'
        )

    if letter in ('W', 'X', 'Y', 'Z'):
        raise InvalidNorthingLetterError(
            f'Bad row letter; should not include W, X, Y or Z, found: {letter}'
        )

    if letter not in ROW_LETTERS:
        raise InvalidMGRSFormatError(f'Invalid 100km row letter {letter!r}')

    origin = ROW_LETTERS.index(SET_ORIGIN_ROWS[square_set - 1])
    steps = (ROW_LETTERS.index(letter) - origin) % len(ROW_LETTERS)

    return SQUARE_SIZE * steps


def _min_northing(band: str) -> float:
    """The lowest northing found in a latitude band"""
    if band not in BAND_MIN_NORTHING:
        raise InvalidZoneLetterError(f'Invalid zone letter {band!r} provided as argument')

    return BAND_MIN_NORTHING[band]


def _split_digits(remainder: str) -> Tuple[str, str]:
    """
    Splits the numeric part of an MGRS reference into easting and northing
    digits. Accepts either two space separated groups of equal length or a
    single run of digits, which is halved.
    """
    tokens = remainder.split()
    if not tokens:
        return '', ''

    if len(tokens) == 1:
        if len(tokens[0]) % 2:
            raise InvalidMGRSFormatError(
                f'Easting and northing must have the same number of digits. {_MGRS_FORMAT}'
            )
        half = len(tokens[0]) // 2
        easting, northing = tokens[0][:half], tokens[0][half:]

    elif len(tokens) == 2:
        easting, northing = tokens
        if len(easting) != len(northing):
            raise InvalidMGRSFormatError(
                f'Easting and northing must have the same number of digits. {_MGRS_FORMAT}'
            )

    else:
        raise InvalidMGRSFormatError(_MGRS_FORMAT)

    if not (_RE_DIGITS.match(easting) and _RE_DIGITS.match(northing)):
        raise InvalidMGRSFormatError(f'Easting and northing must be numeric. {_MGRS_FORMAT}')

    if len(easting) > Precision.ONE_METER:
        raise InvalidMGRSFormatError(
            f'Easting and northing may have at most {int(Precision.ONE_METER)} digits each'
        )

    return easting, northing


def mgrs_to_utm(reference: str) -> str:
    """
    Converts an MGRS reference to the UTM reference of the south-west corner of
    the grid square it describes.

    Args:
        reference:
            An MGRS reference (case insensitive), e.g. '33UUU 91776 20073'

    Returns:
        str, e.g. '33U 391776 5820073'

    Raises:
        InvalidMGRSFormatError, InvalidNorthingLetterError, InvalidSetError,
        InvalidZoneLetterError
    """
    reference = reference.strip().upper()
    if _RE_GZD.match(reference):
        raise InvalidMGRSFormatError(
            f'{reference!r} is a grid zone designator only and cannot be decoded; '
            'at least a 100km square is required'
        )

    match = _RE_MGRS.match(reference)
    if match is None:
        raise InvalidMGRSFormatError(_MGRS_FORMAT)

    zone_str, band, column, row, remainder = match.groups()
    zone = int(zone_str)
    if not 1 <= zone <= ZONE_COUNT:
        raise InvalidMGRSFormatError(f'UTM zone must be between 1 and {ZONE_COUNT}; found {zone}')

    square_set = _square_set(zone)
    easting = _easting_from_column(column, square_set)
    northing = _northing_from_row(row, square_set)

    min_northing = _min_northing(band)
    while northing < min_northing:
        northing += NORTHING_CYCLE

    easting_digits, northing_digits = _split_digits(remainder)
    if easting_digits:
        scale = SQUARE_SIZE / 10 ** len(easting_digits)
        easting += int(easting_digits) * scale
        northing += int(northing_digits) * scale
    else:
        warn_once(
            'MGRS references without easting/northing digits resolve to the '
            'south-west corner of their 100km square.'
        )

    return f'{zone}{band} {int(easting)} {int(northing)}'


def encode_mgrs(
    latitude: float,
    longitude: float,
    precision: Union[Precision, int] = Precision.ONE_METER
) -> str:
    """
    Converts a latitude/longitude to an MGRS reference.

    Args:
        latitude:
            Latitude, in decimal degrees

        longitude:
            Longitude, in decimal degrees

        precision:
            (Default ONE_METER) The precision of the reference, see Precision

    Returns:
        str, e.g. '33UUU 91776 20073'

    Raises:
        InvalidLatitudeError, InvalidLongitudeError, UnsupportedPolarRegionError
    """
    return format_mgrs(project(latitude, longitude), precision)


def decode_mgrs(reference: str) -> Coordinate:
    """
    Converts an MGRS reference to the Coordinate of the south-west corner of
    the grid square it describes.

    Args:
        reference:
            An MGRS reference, e.g. '33UUU 91776 20073'. The easting and
            northing digits may also be written without spaces, e.g.
            '33UUU9177620073'.

    Returns:
        Coordinate

    Raises:
        InvalidMGRSFormatError, InvalidNorthingLetterError, InvalidSetError,
        InvalidZoneLetterError
    """
    return decode_utm(mgrs_to_utm(reference))


def is_valid_mgrs(reference: str) -> bool:
    """
    Checks that a string looks like a spaced MGRS reference with one to five
    digit easting and northing, e.g. '55HCU 20704 12911'. Decoding does not
    depend on this check.

    Args:
        reference:
            The candidate string

    Returns:
        bool
    """
    components = reference.split()
    if len(components) != 3:
        return False

    if len(components[1]) != len(components[2]):
        return False

    length = len(components[2])
    if not 1 <= length <= Precision.ONE_METER:
        return False

    pattern = rf'^[0-9]{{1,2}}[A-Z]{{3}}[ \t][0-9]{{{length}}}[ \t][0-9]{{{length}}}$'
    return re.match(pattern, reference) is not None
