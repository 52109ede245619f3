"""
Converter objects for encoding and decoding batches of coordinates
"""

__all__ = ['ConverterBase', 'MGRSConverter', 'UTMConverter']

import abc
from typing import Iterable, List, Sequence, Union

from gridrefs.coordinates import Coordinate
from gridrefs.mgrs import Precision, decode_mgrs, format_mgrs
from gridrefs.utils.logging import get_logger
from gridrefs.utm import decode_utm, format_utm
from gridrefs.zones import GridZoneRect, project, project_many

_LOGGER = get_logger(__name__)


class ConverterBase(abc.ABC):

    """
    Base class for all grid reference converters.
    """

    @abc.abstractmethod
    def _format(self, rect: GridZoneRect) -> str:
        """Formats a projected point as a grid reference"""

    @abc.abstractmethod
    def decode(self, reference: str) -> Coordinate:
        """
        Converts a grid reference to a Coordinate.

        Args:
            reference:
                A grid reference string

        Returns:
            Coordinate
        """

    def encode(self, coordinate: Coordinate) -> str:
        """
        Converts a Coordinate to a grid reference.

        Args:
            coordinate:
                A gridrefs Coordinate

        Returns:
            str
        """
        return self._format(project(coordinate.latitude, coordinate.longitude))

    def encode_coordinates(self, coordinates: Sequence[Coordinate]) -> List[str]:
        """
        Converts a collection of Coordinates to grid references. All coordinates are
        projected together, so a single unsupported coordinate fails the batch.

        Args:
            coordinates:
                A collection of Coordinates, from gridrefs

        Returns:
            List of grid references, in the same order as the coordinates
        """
        if not coordinates:
            return []

        latitudes = [coordinate.latitude for coordinate in coordinates]
        longitudes = [coordinate.longitude for coordinate in coordinates]
        zones, bands, eastings, northings = project_many(latitudes, longitudes)
        _LOGGER.debug('Projected %d coordinates', len(latitudes))

        return [
            self._format(GridZoneRect(int(zone), int(band), float(easting), float(northing)))
            for zone, band, easting, northing in zip(zones, bands, eastings, northings)
        ]

    def decode_references(self, references: Iterable[str]) -> List[Coordinate]:
        """
        Converts a collection of grid references to Coordinates.

        Args:
            references:
                A collection of grid reference strings

        Returns:
            List of Coordinates, in the same order as the references
        """
        return [self.decode(reference) for reference in references]


class UTMConverter(ConverterBase):
    """
    Converts coordinates to and from UTM references, e.g. '33U 391776 5820073'
    """

    def __repr__(self):
        return '<UTMConverter>'

    def _format(self, rect: GridZoneRect) -> str:
        return format_utm(rect)

    def decode(self, reference: str) -> Coordinate:
        return decode_utm(reference)


class MGRSConverter(ConverterBase):
    """
    Converts coordinates to and from MGRS references.

    Args:
        precision:
            (Default ONE_METER) The precision of encoded references. Decoding
            accepts any precision.
    """

    def __init__(self, precision: Union[Precision, int] = Precision.ONE_METER):
        self.precision = Precision(precision)

    def __repr__(self):
        return f'<MGRSConverter({self.precision.name})>'

    def _format(self, rect: GridZoneRect) -> str:
        return format_mgrs(rect, self.precision)

    def decode(self, reference: str) -> Coordinate:
        return decode_mgrs(reference)
