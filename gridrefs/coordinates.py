"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate', 'validate_coordinate']

from typing import Tuple, Union

from gridrefs.exceptions import InvalidLatitudeError, InvalidLongitudeError


def validate_coordinate(latitude: float, longitude: float) -> None:
    """
    Raises if a latitude/longitude pair falls outside of the globe. Both poles and
    both sides of the antimeridian are valid.

    Args:
        latitude:
            Latitude, in decimal degrees

        longitude:
            Longitude, in decimal degrees

    Raises:
        InvalidLatitudeError, InvalidLongitudeError
    """
    if not -90 <= latitude <= 90:
        raise InvalidLatitudeError(
            f'Latitude outside of allowable range. Must be between -90 and 90. '
            f'Provided value: {latitude}'
        )

    if not -180 <= longitude <= 180:
        raise InvalidLongitudeError(
            f'Longitude outside of allowable range. Must be between -180 and 180. '
            f'Provided value: {longitude}'
        )


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lon/lat pair).

    Unlike a free-floating lon/lat pair, a Coordinate is never wrapped around the
    poles or antimeridian; out of range values raise instead.
    """

    __slots__ = ('_longitude', '_latitude')

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
    ):
        lon, lat = float(longitude), float(latitude)
        validate_coordinate(lat, lon)
        object.__setattr__(self, '_longitude', lon)
        object.__setattr__(self, '_latitude', lat)

    def __setattr__(self, key, value):
        raise AttributeError('Coordinate is immutable')

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @classmethod
    def from_mgrs(cls, mgrs_str: str) -> 'Coordinate':
        """Create a Coordinate object from a MGRS string"""
        from gridrefs.mgrs import decode_mgrs  # pylint: disable=import-outside-toplevel

        return decode_mgrs(mgrs_str)

    @classmethod
    def from_utm(cls, utm_str: str) -> 'Coordinate':
        """Create a Coordinate object from a UTM string"""
        from gridrefs.utm import decode_utm  # pylint: disable=import-outside-toplevel

        return decode_utm(utm_str)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_mgrs(self, precision: int = 5) -> str:
        """
        Convert this coordinate to a MGRS string

        Args:
            precision:
                (Default 5, one meter) The number of easting/northing digits, see
                gridrefs.mgrs.Precision

        Returns:
            str
        """
        from gridrefs.mgrs import encode_mgrs  # pylint: disable=import-outside-toplevel

        return encode_mgrs(self.latitude, self.longitude, precision)

    def to_utm(self) -> str:
        """Convert this coordinate to a UTM string"""
        from gridrefs.utm import encode_utm  # pylint: disable=import-outside-toplevel

        return encode_utm(self.latitude, self.longitude)
