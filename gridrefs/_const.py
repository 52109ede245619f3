"""
Constants declarations for gridrefs
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Equatorial radius (meters)
WGS84_INVERSE_F = 298.257223563  # Inverse flattening

# Transverse Mercator
UTM_SCALE_FACTOR = 0.9996  # k0, scale at the central meridian
FALSE_EASTING = 500_000.0  # Easting of every zone's central meridian (meters)
FALSE_NORTHING = 10_000_000.0  # Added to southern hemisphere northings (meters)

# Grid zone geometry
ZONE_COUNT = 60
ZONE_WIDTH_DEGREES = 6
BAND_HEIGHT_DEGREES = 8

# Beyond these latitudes UPS is used instead of UTM
SOUTHERN_POLAR_THRESHOLD = -80.
NORTHERN_POLAR_THRESHOLD = 84.
NORTHERN_BAND_LIMIT = 72.  # Regular 8 degree bands stop here
POLAR_BAND_INDEX = 23

# Grid letters, A-Z omitting I and O
GRID_LETTERS = 'ABCDEFGHJKLMNPQRSTUVWXYZ'
ROW_LETTERS = 'ABCDEFGHJKLMNPQRSTUV'
SOUTHERN_BANDS = 'ACDEFGHJKLM'

# MGRS
SQUARE_SIZE = 100_000.0  # Side of a 100km grid square (meters)
COLUMNS_PER_ZONE = 8  # Column letters advance by 8 from one zone to the next
SQUARE_SET_COUNT = 6
SET_ORIGIN_COLUMNS = 'AJSAJS'
SET_ORIGIN_ROWS = 'AFAFAF'
NORTHING_CYCLE = 2_000_000.0  # Row letters repeat every 20 squares

# Lowest northing found in each latitude band
BAND_MIN_NORTHING = {
    'C': 1_100_000.,
    'D': 2_000_000.,
    'E': 2_800_000.,
    'F': 3_700_000.,
    'G': 4_600_000.,
    'H': 5_500_000.,
    'J': 6_400_000.,
    'K': 7_300_000.,
    'L': 8_200_000.,
    'M': 9_100_000.,
    'N': 0.,
    'P': 800_000.,
    'Q': 1_700_000.,
    'R': 2_600_000.,
    'S': 3_500_000.,
    'T': 4_400_000.,
    'U': 5_300_000.,
    'V': 6_200_000.,
    'W': 7_000_000.,
    'X': 7_900_000.,
}
