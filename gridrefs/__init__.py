
from gridrefs._version import __version__  # noqa: F401
from gridrefs.utils.logging import LOGGER
from gridrefs.coordinates import Coordinate
from gridrefs.ellipsoid import Ellipsoid, WGS84
from gridrefs.exceptions import (
    GridReferenceError, InvalidLatitudeError, InvalidLongitudeError,
    InvalidMGRSFormatError, InvalidNorthingLetterError, InvalidSetError,
    InvalidUTMFormatError, InvalidZoneLetterError, UnsupportedPolarRegionError,
)
from gridrefs.zones import GridZoneRect, Hemisphere
from gridrefs.utm import decode_utm, encode_utm
from gridrefs.mgrs import Precision, decode_mgrs, encode_mgrs, is_valid_mgrs, mgrs_to_utm
from gridrefs.converters import MGRSConverter, UTMConverter

__all__ = [
    'Coordinate',
    'Ellipsoid',
    'GridReferenceError',
    'GridZoneRect',
    'Hemisphere',
    'InvalidLatitudeError',
    'InvalidLongitudeError',
    'InvalidMGRSFormatError',
    'InvalidNorthingLetterError',
    'InvalidSetError',
    'InvalidUTMFormatError',
    'InvalidZoneLetterError',
    'MGRSConverter',
    'Precision',
    'UTMConverter',
    'UnsupportedPolarRegionError',
    'WGS84',
    'decode_mgrs',
    'decode_utm',
    'encode_mgrs',
    'encode_utm',
    'is_valid_mgrs',
    'mgrs_to_utm',
    'LOGGER',
]
