"""Errors raised while converting to and from grid references"""

__all__ = [
    'GridReferenceError', 'InvalidLatitudeError', 'InvalidLongitudeError',
    'InvalidMGRSFormatError', 'InvalidNorthingLetterError', 'InvalidSetError',
    'InvalidUTMFormatError', 'InvalidZoneLetterError', 'UnsupportedPolarRegionError',
]


class GridReferenceError(ValueError):
    """Base class for all gridrefs errors"""


class InvalidLatitudeError(GridReferenceError):
    """Latitude outside of [-90, 90]"""


class InvalidLongitudeError(GridReferenceError):
    """Longitude outside of [-180, 180]"""


class InvalidUTMFormatError(GridReferenceError):
    """A UTM reference that doesn't follow <zone><band> <easting> <northing>"""


class InvalidMGRSFormatError(GridReferenceError):
    """A MGRS reference that can't be split into its components"""


class InvalidSetError(GridReferenceError):
    """A 100km square set outside of 1-6"""


class InvalidNorthingLetterError(GridReferenceError):
    """A 100km row letter that can't occur (W, X, Y or Z)"""


class InvalidZoneLetterError(GridReferenceError):
    """A latitude band letter without a known minimum northing"""


class UnsupportedPolarRegionError(GridReferenceError):
    """A latitude covered by UPS rather than UTM"""
